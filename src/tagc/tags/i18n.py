"""
Translation Tags.

``{% trans "message" [arg ...] %}`` writes the message translated into the
render-time locale. Extra arguments are ``%`` format arguments for the
translated message and come in two shapes:

- ``{name}``: deferred, looked up in the render-time context dictionary.
- anything else: literal, fixed when the template is compiled.

Example::

    {% trans "Hello %s, you have %s messages" {user} "no" %}

compiles to::

    arg_0 = dict_get(context, "user")
    arg_1 = "no"
    tmp = translate_format(4096, dict_get(context, "LANG"), "Hello %s, you have %s messages", arg_0, arg_1)
    res.write(tmp)
"""

from tagc.core.context import ParserContext
from tagc.core.registry import TagRegistry
from tagc.core.tokens import Command
from tagc.utils.codecs import quote_literal

PLUGIN_API_VERSION = 1


def _locale_expr(context: ParserContext) -> str:
  return f"dict_get(context, {quote_literal(context.config.locale_key)})"


def tag_trans(context: ParserContext, command: Command) -> None:
  """
  Emits code writing a translated, optionally formatted, message.

  On a malformed argument, or when the generated argument list outgrows the
  staging capacity, nothing is emitted for the tag and the context fails.

  Args:
      context (ParserContext): Emission target.
      command (Command): ``[trans, message, arg_0, ...]``.
  """
  message = command.value(1)
  if message is None:
    context.fail(f"{command.name} requires a message")
    return

  indent = context.config.indent
  quoted_message = quote_literal(message)
  args = command.args[1:]

  if not args:
    context.emit(
      "%sres.write(translate(%s, %s))\n",
      indent,
      _locale_expr(context),
      quoted_message,
    )
    return

  mark = context.checkpoint()
  capacity = context.config.argument_staging_capacity
  staged = ""

  for i, arg in enumerate(args):
    tmpname = f"arg_{i}"

    staged += f", {tmpname}"
    if len(staged) >= capacity:
      context.rollback(mark)
      context.fail(f"{command.name} argument list too long.")
      return

    text = arg.text
    if text.startswith("{"):
      if not text.endswith("}"):
        context.rollback(mark)
        context.fail(f"{command.name} argument not ends with '}}': {text}")
        return
      context.emit("%s%s = dict_get(context, %s)\n", indent, tmpname, quote_literal(text[1:-1]))
    else:
      context.emit("%s%s = %s\n", indent, tmpname, quote_literal(text))

  context.emit(
    "%stmp = translate_format(%d, %s, %s%s)\n",
    indent,
    context.config.format_buffer_size,
    _locale_expr(context),
    quoted_message,
    staged,
  )
  context.emit("%sres.write(tmp)\n", indent)


def register_tags(registry: TagRegistry) -> None:
  registry.register("trans", tag_trans)
