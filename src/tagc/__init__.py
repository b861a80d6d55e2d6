"""
tagc Package.

The tag-compilation front end of a template engine: turns the contents of
template tags (``{% trans "Hello" %}``) into Python source fragments that a
render function executes at request time.

Usage
-----

Simple String Compilation
^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import tagc
    code = tagc.compile_tags(['trans "Hello %s" {user}'])
    print(code)
    #   arg_0 = dict_get(context, "user")
    #   tmp = translate_format(4096, dict_get(context, "LANG"), "Hello %s", arg_0)
    #   res.write(tmp)

Per-file Compilation
^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from tagc import TagCompiler

    compiler = TagCompiler()
    ctx = compiler.new_context("index.html")
    compiler.compile('trans "Hello"', ctx)
    if ctx.failed:
        print(ctx.errors)
"""

from typing import Iterable, Optional

from tagc.config import CompilerConfig
from tagc.core.compiler import CompilationResult, TagCompiler, build_registry, compile_tag
from tagc.core.context import ParserContext
from tagc.core.registry import TagRegistry
from tagc.core.tokens import Command, Token

__version__ = "0.1.0"


def compile_tags(texts: Iterable[str], file_name: str = "<template>", config: Optional[CompilerConfig] = None) -> str:
  """
  Compiles tag contents into generated code.

  Args:
      texts (Iterable[str]): Tag contents, without delimiters, in template order.
      file_name (str): Name used in diagnostics.
      config (Optional[CompilerConfig]): Compiler settings.

  Returns:
      str: The generated code.

  Raises:
      ValueError: If any tag fails to compile.
  """
  result = TagCompiler(config=config).compile_tags(texts, file_name=file_name)
  if not result.success:
    error_msg = "\n".join(result.errors)
    raise ValueError(f"Tag compilation failed:\n{error_msg}")
  return result.code


__all__ = [
  "Command",
  "CompilationResult",
  "CompilerConfig",
  "ParserContext",
  "TagCompiler",
  "TagRegistry",
  "Token",
  "build_registry",
  "compile_tag",
  "compile_tags",
  "__version__",
]
