#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the csv2xlsx CLI.

Defaults for the ingestion and spreadsheet options may live in a dedicated
``.csv2xlsx.toml`` / ``.yaml`` / ``.yml`` / ``.json`` file or in the
``[tool.csv2xlsx]`` table of a ``pyproject.toml``. Every loader returns a plain
mapping; unknown keys are dropped with a warning before the CLI sees them.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import IO, Any, Callable, Dict, Optional

import yaml

from csv2xlsx.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION

logger = logging.getLogger(__name__)

CONFIG_KEYS = frozenset(
    {"delimiter", "encoding", "infer_types", "sheet_name", "header_style", "auto_fit_columns", "output_dir"}
)

# suffix -> (format name, open mode, loader, exceptions meaning "malformed")
_FORMATS: Dict[str, tuple[str, str, Callable[[IO[Any]], Any], tuple[type[Exception], ...]]] = {
    ".toml": ("TOML", "rb", tomllib.load, (tomllib.TOMLDecodeError,)),
    ".yaml": ("YAML", "r", yaml.safe_load, (yaml.YAMLError,)),
    ".yml": ("YAML", "r", yaml.safe_load, (yaml.YAMLError,)),
    ".json": ("JSON", "r", json.load, (json.JSONDecodeError,)),
}


def _read_mapping(config_path: Path, suffix: str) -> Dict[str, Any]:
    """Load ``config_path`` with the loader registered for ``suffix``.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read or parsed, or does not hold a mapping

    """
    fmt, mode, load, malformed = _FORMATS[suffix]
    try:
        if mode == "rb":
            with open(config_path, "rb") as f:
                data = load(f)
        else:
            with open(config_path, "r", encoding="utf-8") as f:
                data = load(f)
    except malformed as e:
        raise argparse.ArgumentTypeError(f"Invalid {fmt} in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading {fmt} config {config_path}: {e}") from e

    # An empty YAML document loads as None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError(f"{fmt} config file must contain a mapping, got {type(data).__name__}")
    return data


def _pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.csv2xlsx]`` table of a pyproject.toml, or ``{}``."""
    section = _read_mapping(pyproject_path, ".toml").get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] in {pyproject_path} must be a table, got {type(section).__name__}"
        )
    return section


def _config_in_directory(directory: Path) -> Optional[Path]:
    for filename in CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate

    pyproject = directory / "pyproject.toml"
    if pyproject.is_file():
        try:
            if _pyproject_section(pyproject):
                return pyproject
        except argparse.ArgumentTypeError as e:
            logger.debug(f"Ignoring unreadable {pyproject}: {e}")
    return None


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file at or above ``start_dir``.

    Dedicated ``.csv2xlsx.*`` files take precedence over a ``pyproject.toml``
    in the same directory, and a ``pyproject.toml`` only counts when it has a
    non-empty ``[tool.csv2xlsx]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start from, defaults to the current working directory

    Returns
    -------
    Path or None
        The first config file found walking towards the filesystem root

    """
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        found = _config_in_directory(directory)
        if found is not None:
            return found
    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Locate a config file near ``start_dir``, falling back to the home directory."""
    found = find_config_in_parents(start_dir)
    if found is not None:
        return found

    home = Path.home()
    return next((home / name for name in CONFIG_FILENAMES if (home / name).is_file()), None)


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a configuration mapping from ``config_path``.

    The format is chosen from the file name: ``pyproject.toml`` yields its
    ``[tool.csv2xlsx]`` table, other files are read by extension.

    Parameters
    ----------
    config_path : Path or str
        Path to a ``.toml``, ``.yaml``, ``.yml``, ``.json`` or ``pyproject.toml`` file

    Returns
    -------
    dict
        Raw configuration values

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, of an unsupported type, or malformed

    Examples
    --------
    >>> load_config_file(".csv2xlsx.toml")
    {'delimiter': ';', 'sheet_name': 'Data'}

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _pyproject_section(config_path)

    suffix = config_path.suffix.lower()
    if suffix not in _FORMATS:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {suffix}. Use .toml, .yaml or .json")
    return _read_mapping(config_path, suffix)


def validate_config_keys(config: Dict[str, Any], source: str = "configuration") -> Dict[str, Any]:
    """Return ``config`` restricted to recognized keys, warning about the rest."""
    unknown = sorted(set(config) - CONFIG_KEYS)
    if unknown:
        logger.warning(f"Ignoring unknown keys in {source}: {', '.join(unknown)}")
    return {key: value for key, value in config.items() if key in CONFIG_KEYS}


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load the configuration that applies to this run.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (CSV2XLSX_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Validated configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If the selected config file cannot be loaded

    """
    config_path: Optional[Path | str] = explicit_path or env_var_path or discover_config_file()
    if not config_path:
        return {}

    logger.debug(f"Loading configuration from {config_path}")
    return validate_config_keys(load_config_file(config_path), source=str(config_path))
