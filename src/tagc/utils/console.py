"""
Logging and Console Utilities.

Routes the package's diagnostics through the standard `logging` library,
rendered by `rich`.

The console is held behind a proxy so the destination (stdout or an in-memory
recording console) can be swapped at runtime via `set_console`. Compiler
diagnostics, CLI output and test capture all go through the same object.

Attributes:
    console (_ConsoleProxy): Stable module-level reference to the active Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
  }
)


class _ConsoleProxy:
  """
  Forwards printing to a swappable `rich.console.Console` backend.

  Swapping the backend also rebinds the `RichHandler` on the root logger so
  `logging` calls land on the same destination as direct prints.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Restores a fresh standard output console."""
    self._backend = Console(theme=_THEME)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """The active Console implementation."""
    return self._backend

  def _configure_logging(self) -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=False,
      rich_tracebacks=True,
    )
    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(rich_handler)

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """
    Returns captured output (requires a backend created with ``record=True``).

    Args:
        **kwargs: Options passed to ``Console.export_text``.

    Returns:
        str: The recorded text.
    """
    return self._backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Redirects console printing and log records to `new_console`.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Resets logging and console output to standard output."""
  console.reset()


def get_console() -> Console:
  """Returns the currently active console backend."""
  return console.backend


def log_info(msg: str) -> None:
  logging.info(msg)


def log_success(msg: str) -> None:
  logging.log(SUCCESS_LEVEL_NUM, msg)


def log_warning(msg: str) -> None:
  logging.warning(msg)


def log_error(msg: str) -> None:
  """
  Logs an error message via standard logging.

  Compiler diagnostics use this channel, so messages are logged without Rich
  markup processing (template text may contain square brackets).

  Args:
      msg (str): The message content.
  """
  logging.error(msg)
