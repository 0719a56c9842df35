"""
Runtime Configuration Store.

The rewrite recognizes a fixed set of names emitted by the MDX compiler and the
component resolver convention of the target framework. The defaults below
reproduce that convention exactly; a project only needs to touch them when an
upstream compiler release renames a helper. Values can be pinned in
``pyproject.toml``::

    [tool.mdx_vue_resolve]
    runtime_suffix = "jsx-runtime"
    trace = false
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  try:
    import tomli as tomllib
  except ImportError:
    tomllib = None  # type: ignore

TOOL_SECTION = "mdx_vue_resolve"


class RuntimeConfig(BaseModel):
  """
  Configuration for the component resolution rewrite.
  """

  runtime_suffix: str = Field("jsx-runtime", description="Import source suffix identifying the JSX runtime module.")
  resolver_import_name: str = Field("resolveComponent", description="Name exported by the runtime for resolution.")
  resolver_local_name: str = Field("_resolveComponent", description="Local binding of the resolver function.")
  render_entry_name: str = Field("MDXContent", description="Top-level render entry function.")
  render_body_name: str = Field("_createMdxContent", description="Render body function nested in the entry.")
  missing_reference_name: str = Field(
    "_missingMdxReference", description="Runtime assertion helper that the rewrite removes."
  )
  trace: bool = Field(True, description="Record trace events for every tree mutation.")

  @field_validator(
    "runtime_suffix",
    "resolver_import_name",
    "resolver_local_name",
    "render_entry_name",
    "render_body_name",
    "missing_reference_name",
  )
  @classmethod
  def validate_name(cls, v: str) -> str:
    """
    Rejects blank names.

    Args:
        v (str): The configured name.

    Returns:
        str: The name with surrounding whitespace removed.

    Raises:
        ValueError: If the name is empty.
    """
    v_clean = v.strip()
    if not v_clean:
      raise ValueError("Name must not be empty.")
    return v_clean

  @classmethod
  def load(cls, search_path: Optional[Path] = None, **overrides: Any) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and applies explicit overrides.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        **overrides: Field values taking precedence over the TOML file. ``None``
            values are ignored.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    known = cls.model_fields.keys()
    values = {k: v for k, v in toml_config.items() if k in known}
    values.update({k: v for k, v in overrides.items() if v is not None})
    return cls(**values)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  if not tomllib:
    return {}, None

  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None
