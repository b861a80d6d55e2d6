"""
Parser and Emission Context.

One `ParserContext` is threaded through the compilation of a single template
file. It carries the diagnostic location, the sticky failure flag and the
append-only buffer every tag handler emits generated code into.
"""

from typing import Any, List, Optional

from pydantic import BaseModel

from tagc.config import CompilerConfig
from tagc.utils.console import log_error


class Diagnostic(BaseModel):
  """
  A compilation failure located in a template file.
  """

  file_name: str
  line: int
  message: str

  def __str__(self) -> str:
    return f"{self.file_name}:{self.line} {self.message}"


class ParserContext:
  """
  Mutable per-file compilation state.

  Handlers borrow the context for the duration of one call. They write code
  with `emit` and report problems with `fail`; the failure flag is never
  cleared, so the driving scanner can check it once per tag or per file.
  """

  def __init__(self, file_name: str = "<template>", line: int = 1, config: Optional[CompilerConfig] = None):
    """
    Args:
        file_name: Template file name used in diagnostics.
        line: Current 1-based line number.
        config: Compiler settings. Defaults are used if omitted.
    """
    self.file_name = file_name
    self.line = line
    self.config = config or CompilerConfig()
    self.failed = False
    self.diagnostics: List[Diagnostic] = []
    self._chunks: List[str] = []
    self._size = 0

  def emit(self, text: str, *values: Any) -> None:
    """
    Appends generated code to the output buffer.

    No newline is added. With `values`, `text` is treated as a printf-style
    format string. Nothing is escaped: callers quote embedded literals.

    Args:
        text: Code text or format string.
        *values: Positional values for the format string.
    """
    chunk = text % values if values else text
    self._chunks.append(chunk)
    self._size += len(chunk)

  def fail(self, message: str) -> None:
    """
    Marks the context as failed and records a diagnostic at the current line.

    Args:
        message: Human readable description.
    """
    diagnostic = Diagnostic(file_name=self.file_name, line=self.line, message=message)
    self.failed = True
    self.diagnostics.append(diagnostic)
    log_error(str(diagnostic))

  def advance_line(self, count: int = 1) -> None:
    self.line += count

  def checkpoint(self) -> int:
    """Returns a marker for the current end of the output buffer."""
    return self._size

  def rollback(self, mark: int) -> None:
    """
    Discards everything emitted after `mark`.

    Args:
        mark: Value previously returned by `checkpoint`.
    """
    if mark >= self._size:
      return
    code = self.code[:mark]
    self._chunks = [code] if code else []
    self._size = mark

  @property
  def code(self) -> str:
    """All generated code emitted so far."""
    if len(self._chunks) > 1:
      self._chunks = ["".join(self._chunks)]
    return self._chunks[0] if self._chunks else ""

  @property
  def errors(self) -> List[str]:
    return [str(d) for d in self.diagnostics]
