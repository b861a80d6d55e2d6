"""
Tag Compilation Driver.

Glues the lexer and the registry together: one call compiles one tag.

The template scanner that locates tags in a file is an external collaborator;
it creates a `ParserContext` per file, calls `compile_tag` (or
`TagCompiler.compile`) for every tag it finds, and refuses to assemble the
file if the context ends up failed.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from tagc.config import CompilerConfig
from tagc.core.context import ParserContext
from tagc.core.lexer import tokenize
from tagc.core.loader import load_plugins
from tagc.core.registry import FrozenTagRegistry, TagRegistry
from tagc.core.tokens import Command
from tagc.tags import register_builtins
from tagc.utils.console import log_info


class CompilationResult(BaseModel):
  """
  Generated code and diagnostics of one compiled template file.
  """

  code: str = Field(default="", description="Concatenated generated code.")
  errors: List[str] = Field(default_factory=list, description="Diagnostics as 'file:line message'.")
  success: bool = Field(default=True, description="False if any tag failed to compile.")


def compile_tag(raw: Union[str, bytes], context: ParserContext, registry: TagRegistry) -> Optional[Command]:
  """
  Tokenizes one tag and dispatches it to its handler.

  Args:
      raw (Union[str, bytes]): Tag contents between the delimiters.
      context (ParserContext): The file's compilation state.
      registry (TagRegistry): Handlers to dispatch to.

  Returns:
      Optional[Command]: The dispatched command, or None if the tag could not be tokenized.
  """
  failed_before = len(context.diagnostics)
  tokens = tokenize(raw, context)
  if len(context.diagnostics) > failed_before:
    return None

  if not tokens:
    context.fail("Incomplete command")
    return None

  command = Command(tokens)
  registry.dispatch(command, context)
  return command


def build_registry(config: Optional[CompilerConfig] = None) -> FrozenTagRegistry:
  """
  Populates a registry with the built-in tags and configured plugins, then freezes it.

  Plugins are loaded after the built-ins, so a plugin may override a built-in tag.

  Args:
      config (Optional[CompilerConfig]): Supplies ``plugin_paths``.

  Returns:
      FrozenTagRegistry: The registry for one compilation run.
  """
  config = config or CompilerConfig()
  registry = TagRegistry()
  register_builtins(registry)
  if config.plugin_paths:
    loaded = load_plugins(registry, config.plugin_paths)
    if loaded:
      log_info(f"Loaded {loaded} tag plugin(s).")
  return registry.freeze()


class TagCompiler:
  """
  Compiles tags against a registry fixed for the lifetime of the compiler.
  """

  def __init__(self, config: Optional[CompilerConfig] = None, registry: Optional[TagRegistry] = None):
    """
    Args:
        config: Compiler settings. Defaults are used if omitted.
        registry: Tag handlers. Built from `config` if omitted; always frozen.
    """
    self.config = config or CompilerConfig()
    self.registry = (registry or build_registry(self.config)).freeze()

  def new_context(self, file_name: Union[str, Path] = "<template>") -> ParserContext:
    return ParserContext(file_name=str(file_name), config=self.config)

  def compile(self, raw: Union[str, bytes], context: ParserContext) -> Optional[Command]:
    return compile_tag(raw, context, self.registry)

  def compile_tags(self, texts: Iterable[str], file_name: str = "<template>") -> CompilationResult:
    """
    Compiles a sequence of tags into one code buffer, one tag per line.

    Args:
        texts (Iterable[str]): Tag contents in template order.
        file_name (str): Name used in diagnostics.

    Returns:
        CompilationResult: The accumulated code and diagnostics.
    """
    context = self.new_context(file_name)
    for i, text in enumerate(texts):
      if i:
        context.advance_line()
      self.compile(text, context)

    return CompilationResult(code=context.code, errors=context.errors, success=not context.failed)
