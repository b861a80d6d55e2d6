"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Snapshot testing fixture for generated code.
- Fresh compilation state (context, registry) per test.
- Console capture for diagnostics emitted through logging.
"""

import sys
import pytest
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console

# Add src to path so we can import 'tagc' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from tagc.config import CompilerConfig  # noqa: E402
from tagc.core.context import ParserContext  # noqa: E402
from tagc.core.registry import TagRegistry  # noqa: E402
from tagc.tags import register_builtins  # noqa: E402
from tagc.utils.console import reset_console, set_console  # noqa: E402


class SnapshotAssert:
  """
  Compares generated text against a stored ``__snapshots__/<test>.<ext>`` file.
  """

  def __init__(self, request: pytest.FixtureRequest):
    self.test_name = request.node.name
    self.snapshot_dir = Path(request.node.path).parent / "__snapshots__"
    self.update_mode = request.config.getoption("--update-snapshots", default=False)

  def assert_match(self, content: str, extension: str = "txt", normalizer: Optional[Callable[[str], str]] = None):
    """
    Args:
        content: The actual output string.
        extension: File extension (default 'txt').
        normalizer: Optional function applied to both sides before comparison.
    """
    self.snapshot_dir.mkdir(parents=True, exist_ok=True)
    snapshot_file = self.snapshot_dir / f"{self.test_name}.{extension}"
    content = content.replace("\r\n", "\n")

    if self.update_mode or not snapshot_file.exists():
      snapshot_file.write_text(normalizer(content) if normalizer else content, encoding="utf-8")
      if self.update_mode:
        return

    expected = snapshot_file.read_text(encoding="utf-8").replace("\r\n", "\n")
    lhs, rhs = (normalizer(content), normalizer(expected)) if normalizer else (content, expected)

    assert lhs == rhs, f"Snapshot mismatch for {snapshot_file.name}. Run pytest with --update-snapshots to accept changes."


@pytest.fixture
def snapshot(request):
  """Fixture to assert text matches a stored snapshot."""
  return SnapshotAssert(request)


@pytest.fixture
def config() -> CompilerConfig:
  return CompilerConfig()


@pytest.fixture
def context(config) -> ParserContext:
  """A fresh per-file compilation context."""
  return ParserContext(file_name="page.html", line=3, config=config)


@pytest.fixture
def registry() -> TagRegistry:
  """A registry populated with the built-in tags."""
  reg = TagRegistry()
  register_builtins(reg)
  return reg


@pytest.fixture
def captured_console():
  """Redirects console output and log records into a recording console."""
  recorder = Console(record=True, width=200, force_terminal=False)
  set_console(recorder)
  yield recorder
  reset_console()


def pytest_addoption(parser):
  """Add CLI flag to update snapshots."""
  parser.addoption("--update-snapshots", action="store_true", default=False, help="Update snapshots for generated code")
