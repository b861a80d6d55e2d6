"""
CLI Command Handlers.

- ``emit``: compiles tag texts given on the command line and prints the code.
- ``tags``: lists the tags available in the current configuration.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.syntax import Syntax
from rich.table import Table

from tagc.config import CompilerConfig
from tagc.core.compiler import TagCompiler, build_registry
from tagc.utils.console import console, log_error, log_success


def _load_config(settings: Dict[str, Any], search_path: Optional[Path]) -> Optional[CompilerConfig]:
  try:
    return CompilerConfig.load(search_path=search_path, **settings)
  except ValueError as e:
    log_error(f"Invalid configuration: {e}")
    return None


def handle_emit(
  tags: List[str],
  file_name: str,
  settings: Dict[str, Any],
  search_path: Optional[Path] = None,
) -> int:
  """
  Compiles each tag text and prints the generated code.

  Args:
      tags: Tag contents without delimiters, e.g. ``trans "Hello"``.
      file_name: Name reported in diagnostics.
      settings: CompilerConfig overrides parsed from ``--config``.
      search_path: Directory to start the pyproject.toml search from.

  Returns:
      int: Exit code (0 for success, 1 if any tag failed).
  """
  config = _load_config(settings, search_path)
  if config is None:
    return 1

  result = TagCompiler(config=config).compile_tags(tags, file_name=file_name)
  if not result.success:
    log_error(f"Compilation of {file_name} failed with {len(result.errors)} error(s).")
    return 1

  console.print(Syntax(result.code, "python", line_numbers=False))
  log_success(f"Compiled {len(tags)} tag(s).")
  return 0


def handle_tags(settings: Dict[str, Any], search_path: Optional[Path] = None) -> int:
  """
  Prints the registered tag names and the handlers they dispatch to.

  Returns:
      int: Exit code.
  """
  config = _load_config(settings, search_path)
  if config is None:
    return 1

  registry = build_registry(config)
  table = Table(title="Registered Tags")
  table.add_column("Tag", style="bold magenta")
  table.add_column("Handler")

  for name, handler in registry.items():
    origin = f"{getattr(handler, '__module__', '?')}.{getattr(handler, '__qualname__', repr(handler))}"
    table.add_row(name, origin)

  console.print(table)
  return 0
