"""
Tag Registry.

Maps tag names to handler callables and dispatches commands to them.

A registry is built once per compilation run (built-in tags, then external
plugins) and then frozen. The frozen snapshot is read-only, so it can be
handed to concurrent compilations of different files.
"""

import logging
from types import MappingProxyType
from typing import Callable, Dict, Iterator, Mapping, Optional, Protocol, Tuple

from tagc.core.context import ParserContext
from tagc.core.tokens import Command

logger = logging.getLogger(__name__)


class TagHandler(Protocol):
  """
  Plugin contract for tag handlers.

  A handler turns a `Command` into generated code through `context.emit`, or
  reports a problem through `context.fail`. It must not keep a reference to
  the command after returning, and must not write global state.
  """

  def __call__(self, context: ParserContext, command: Command) -> None: ...


class TagRegistry:
  """
  Mutable name-to-handler mapping used while a run is being set up.
  """

  def __init__(self, handlers: Optional[Mapping[str, TagHandler]] = None):
    self._handlers: Dict[str, TagHandler] = dict(handlers or {})

  def register(self, name: str, handler: TagHandler) -> None:
    """
    Registers `handler` for tag `name`, replacing any previous handler.

    Args:
        name (str): Case-sensitive tag name.
        handler (TagHandler): Callable invoked as ``handler(context, command)``.

    Raises:
        ValueError: If the name is empty or contains whitespace.
    """
    if not name or any(ch.isspace() for ch in name):
      raise ValueError(f"Invalid tag name: {name!r}")
    logger.debug("Added tag %s", name)
    self._handlers[name] = handler

  def tag(self, name: str) -> Callable[[TagHandler], TagHandler]:
    """
    Decorator form of `register`.

    Args:
        name (str): Tag name to register the decorated function under.
    """

    def decorator(func: TagHandler) -> TagHandler:
      self.register(name, func)
      return func

    return decorator

  def reset(self) -> None:
    """Discards all registrations."""
    self._handlers.clear()

  def get(self, name: str) -> Optional[TagHandler]:
    return self._handlers.get(name)

  def names(self) -> Tuple[str, ...]:
    return tuple(sorted(self._handlers))

  def items(self) -> Tuple[Tuple[str, TagHandler], ...]:
    return tuple(sorted(self._handlers.items()))

  def dispatch(self, command: Command, context: ParserContext) -> bool:
    """
    Invokes the handler registered for ``command.name``.

    Unknown names mark the context as failed and emit nothing.

    Args:
        command (Command): The tokenized tag.
        context (ParserContext): Emission target and diagnostics sink.

    Returns:
        bool: True if a handler was found and called.
    """
    handler = self._handlers.get(command.name)
    if handler is None:
      context.fail(f"Unknown command '{command.name}'")
      return False
    handler(context, command)
    return True

  def freeze(self) -> "FrozenTagRegistry":
    """Returns a read-only snapshot of the current registrations."""
    return FrozenTagRegistry(self._handlers)

  def __contains__(self, name: object) -> bool:
    return name in self._handlers

  def __len__(self) -> int:
    return len(self._handlers)

  def __iter__(self) -> Iterator[str]:
    return iter(self.names())


class FrozenTagRegistry(TagRegistry):
  """
  Immutable registry snapshot, safe to share between concurrent compilations.
  """

  def __init__(self, handlers: Optional[Mapping[str, TagHandler]] = None):
    super().__init__(handlers)
    self._handlers = MappingProxyType(dict(self._handlers))

  def register(self, name: str, handler: TagHandler) -> None:
    raise RuntimeError(f"Cannot register tag '{name}': registry is frozen.")

  def reset(self) -> None:
    raise RuntimeError("Cannot reset a frozen registry.")

  def freeze(self) -> "FrozenTagRegistry":
    return self
