"""
Tests for the Tag Registry.

Verifies registration, replacement, dispatch, reset and frozen snapshots.
"""

import pytest

from tagc.core.context import ParserContext
from tagc.core.registry import FrozenTagRegistry, TagRegistry
from tagc.core.tokens import Command, Token


def _cmd(*texts):
  return Command([Token(t) for t in texts])


def test_dispatch_invokes_handler_with_full_command(context):
  seen = []
  registry = TagRegistry()
  registry.register("echo", lambda ctx, cmd: seen.append((ctx, cmd)))

  command = _cmd("echo", "a", "b")
  assert registry.dispatch(command, context) is True

  assert seen == [(context, command)]
  assert not context.failed


def test_reregistration_replaces_handler(context):
  registry = TagRegistry()
  registry.register("x", lambda ctx, cmd: ctx.emit("old"))
  registry.register("x", lambda ctx, cmd: ctx.emit("new"))

  registry.dispatch(_cmd("x"), context)
  registry.dispatch(_cmd("x"), context)

  assert context.code == "newnew"
  assert len(registry) == 1


def test_unknown_command_fails_without_emitting(context):
  registry = TagRegistry()
  registry.register("trans", lambda ctx, cmd: ctx.emit("code"))

  assert registry.dispatch(_cmd("bogus", "x"), context) is False

  assert context.failed
  assert context.code == ""
  assert context.diagnostics[0].message == "Unknown command 'bogus'"


def test_names_are_case_sensitive(context):
  registry = TagRegistry()
  registry.register("trans", lambda ctx, cmd: None)

  assert "trans" in registry
  assert "Trans" not in registry
  registry.dispatch(_cmd("TRANS"), context)
  assert context.failed


def test_decorator_registration():
  registry = TagRegistry()

  @registry.tag("hello")
  def tag_hello(ctx: ParserContext, cmd: Command) -> None:
    ctx.emit("hi")

  assert registry.get("hello") is tag_hello


@pytest.mark.parametrize("name", ["", "two words", "tab\tname"])
def test_invalid_names_rejected(name):
  with pytest.raises(ValueError):
    TagRegistry().register(name, lambda ctx, cmd: None)


def test_reset_discards_registrations(context):
  registry = TagRegistry()
  registry.register("a", lambda ctx, cmd: None)
  registry.reset()

  assert len(registry) == 0
  registry.dispatch(_cmd("a"), context)
  assert context.failed


def test_names_sorted():
  registry = TagRegistry()
  for name in ("b", "a", "c"):
    registry.register(name, lambda ctx, cmd: None)
  assert registry.names() == ("a", "b", "c")
  assert list(registry) == ["a", "b", "c"]


def test_frozen_snapshot_is_read_only_and_detached(context):
  registry = TagRegistry()
  registry.register("a", lambda ctx, cmd: ctx.emit("A"))
  frozen = registry.freeze()

  assert isinstance(frozen, FrozenTagRegistry)
  assert frozen.freeze() is frozen
  with pytest.raises(RuntimeError):
    frozen.register("b", lambda ctx, cmd: None)
  with pytest.raises(RuntimeError):
    frozen.reset()

  # Later changes to the source registry do not leak into the snapshot
  registry.register("a", lambda ctx, cmd: ctx.emit("changed"))
  frozen.dispatch(_cmd("a"), context)
  assert context.code == "A"
