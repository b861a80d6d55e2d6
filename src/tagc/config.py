"""
Compiler Configuration Store.

Settings are read from the ``[tool.tagc]`` table of the nearest
``pyproject.toml`` and can be overridden per call (e.g. from CLI flags).
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class CompilerConfig(BaseModel):
  """
  Configuration shared by every tag compiled during one run.
  """

  locale_key: str = Field("LANG", description="Render-time context key holding the active locale.")
  format_buffer_size: int = Field(4096, gt=0, description="Size of the buffer translated text is formatted into.")
  argument_staging_capacity: int = Field(
    512,
    gt=0,
    description="Maximum length of the generated argument list of a single tag.",
  )
  indent: str = Field("  ", description="Indentation prefixed to every generated statement.")
  strict_unescape: bool = Field(True, description="Reject quoted tokens containing unescaped quotes.")
  plugin_paths: List[Path] = Field(default_factory=list, description="External directories to scan for tag plugins.")

  @field_validator("indent")
  @classmethod
  def validate_indent(cls, v: str) -> str:
    """
    Ensures generated statements are only ever prefixed with whitespace.

    Raises:
        ValueError: If the indent contains non-whitespace characters.
    """
    if v.strip():
      raise ValueError(f"Indent must be whitespace only, got {v!r}")
    return v

  @classmethod
  def load(cls, search_path: Optional[Path] = None, **overrides: Any) -> "CompilerConfig":
    """
    Loads configuration from pyproject.toml and applies overrides.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
            Defaults to the current working directory.
        **overrides: Field values taking precedence over the TOML table.
            ``None`` values are ignored.

    Returns:
        CompilerConfig: The fully resolved configuration object.
    """
    toml_config, toml_dir = _load_toml_settings(search_path or Path.cwd())

    raw_paths = toml_config.pop("plugin_paths", [])
    base = toml_dir or Path.cwd()
    toml_config["plugin_paths"] = [(base / Path(p)).resolve() for p in raw_paths]

    values = {**toml_config, **{k: v for k, v in overrides.items() if v is not None}}
    return cls.model_validate(values)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml'.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``[tool.tagc]`` table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      return dict(data.get("tool", {}).get("tagc", {})), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Types are inferred (int, float, bool, or string).

  Args:
      items (Optional[List[str]]): Raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.

  Raises:
      ValueError: If an item has no '=' separator.
  """
  config: Dict[str, Any] = {}
  for item in items or []:
    if "=" not in item:
      raise ValueError(f"Invalid config format: '{item}'. Expected 'key=value'.")

    key, val_str = item.split("=", 1)
    key = key.strip()
    val_str = val_str.strip()

    final_val: Any = val_str
    if val_str.lower() == "true":
      final_val = True
    elif val_str.lower() == "false":
      final_val = False
    else:
      try:
        final_val = int(val_str)
      except ValueError:
        try:
          final_val = float(val_str)
        except ValueError:
          pass

    config[key] = final_val

  return config
