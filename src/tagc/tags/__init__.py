"""
Built-in Tags Package.

Every module in this package is a tag plugin exposing ``register_tags``.
Adding a module (e.g. ``loops.py``) makes its tags available without edits
to this file.
"""

import importlib
import pkgutil
from pathlib import Path

from tagc.core.loader import resolve_register_fn
from tagc.core.registry import TagRegistry

_pkg_dir = Path(__file__).parent


def register_builtins(registry: TagRegistry) -> None:
  """
  Registers the tags of every built-in tag module.

  Args:
      registry (TagRegistry): Registry receiving the tags.
  """
  for _, module_name, _ in pkgutil.iter_modules([str(_pkg_dir)]):
    if module_name.startswith("_"):
      continue
    module = importlib.import_module(f".{module_name}", package=__name__)
    resolve_register_fn(module)(registry)
