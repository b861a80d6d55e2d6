"""
Tag Plugin Loader.

Tag modules (built-in or external) expose a single entry point::

    def register_tags(registry: TagRegistry) -> None:
        registry.register("mytag", my_handler)

External plugins are plain ``.py`` files in user-configured directories and
are imported by path.
"""

import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Callable, Iterable, Optional

from tagc.core.registry import TagRegistry
from tagc.utils.console import log_warning

PLUGIN_API_VERSION = 1

RegisterFunction = Callable[[TagRegistry], None]


def resolve_register_fn(module: ModuleType) -> RegisterFunction:
  """
  Finds the ``register_tags`` entry point of a tag module.

  Args:
      module (ModuleType): An imported tag module.

  Returns:
      RegisterFunction: The module's registration callable.

  Raises:
      ValueError: If the entry point is missing or the module targets another API version.
  """
  register_fn = getattr(module, "register_tags", None)
  if not callable(register_fn):
    raise ValueError(f"module '{module.__name__}' does not define register_tags(registry).")

  plugin_version = getattr(module, "PLUGIN_API_VERSION", PLUGIN_API_VERSION)
  if plugin_version != PLUGIN_API_VERSION:
    raise ValueError(
      f"module '{module.__name__}' targets plugin API version {plugin_version}, expected {PLUGIN_API_VERSION}."
    )
  return register_fn


def load_plugins(registry: TagRegistry, extra_dirs: Optional[Iterable[Path]] = None) -> int:
  """
  Imports tag plugins from directories and registers their tags.

  Broken plugins are reported as warnings and skipped so that one bad file
  does not prevent the remaining tags from loading.

  Args:
      registry (TagRegistry): Registry receiving the plugin tags.
      extra_dirs (Optional[Iterable[Path]]): Directories scanned for ``*.py`` files.

  Returns:
      int: Number of modules whose tags were registered.
  """
  count = 0
  for directory in extra_dirs or []:
    if not directory.is_dir():
      log_warning(f"Plugin directory not found: {directory}")
      continue
    for item in sorted(directory.glob("*.py")):
      if item.name.startswith("_"):
        continue
      if _load_file(registry, item):
        count += 1
  return count


def _load_file(registry: TagRegistry, path: Path) -> bool:
  unique_name = f"tagc_plugin_{path.stem}_{path.stat().st_ino}"
  try:
    spec = importlib.util.spec_from_file_location(unique_name, path)
    if spec is None or spec.loader is None:
      raise ImportError(f"cannot build an import spec for {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[unique_name] = module
    spec.loader.exec_module(module)
    resolve_register_fn(module)(registry)
  except Exception as e:  # noqa: BLE001
    sys.modules.pop(unique_name, None)
    log_warning(f"Failed to load tag plugin {path.name}: {e}")
    return False
  return True
