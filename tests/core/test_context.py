"""
Tests for the Parser/Emission Context.
"""

from tagc.core.context import Diagnostic, ParserContext


def test_emit_appends_without_newline(context):
  context.emit("a")
  context.emit("b\n")
  assert context.code == "ab\n"


def test_emit_printf_style(context):
  context.emit("%sres.write(%s)\n", "  ", '"x"')
  assert context.code == '  res.write("x")\n'


def test_emit_without_values_keeps_percent_signs(context):
  context.emit("100% literal")
  assert context.code == "100% literal"


def test_fail_records_location(context, captured_console):
  context.fail("Something broke")

  assert context.failed
  assert context.diagnostics == [Diagnostic(file_name="page.html", line=3, message="Something broke")]
  assert context.errors == ["page.html:3 Something broke"]
  assert "page.html:3 Something broke" in captured_console.export_text()


def test_failed_flag_is_sticky(context):
  context.fail("first")
  context.emit("more code")
  context.advance_line()
  context.fail("second")

  assert context.failed
  assert [d.line for d in context.diagnostics] == [3, 4]


def test_fresh_context_starts_clean():
  ctx = ParserContext()
  assert not ctx.failed
  assert ctx.code == ""
  assert ctx.line == 1
  assert ctx.file_name == "<template>"


def test_checkpoint_and_rollback(context):
  context.emit("keep\n")
  mark = context.checkpoint()
  context.emit("drop 1\n")
  context.emit("drop 2\n")

  context.rollback(mark)
  assert context.code == "keep\n"

  context.emit("after\n")
  assert context.code == "keep\nafter\n"


def test_rollback_to_empty(context):
  mark = context.checkpoint()
  context.emit("x")
  context.rollback(mark)
  assert context.code == ""
  assert context.checkpoint() == 0
