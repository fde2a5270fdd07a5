#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the diffview CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON format, and turning them into option
dataclasses. A configuration file holds two optional tables::

    [parse]
    max_diff_distance = 6
    similarity_threshold = 0.4

    [word_diff]
    max_change_ratio = 0.7
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from diffview.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from diffview.exceptions import ConfigError
from diffview.options import DiffOptions, WordDiffOptions

logger = logging.getLogger(__name__)

PARSE_SECTION = "parse"
WORD_DIFF_SECTION = "word_diff"


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.diffview] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary, or empty dict if the section is missing

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked
    for ``.diffview.toml``, ``.diffview.yaml``, ``.diffview.yml`` and
    ``.diffview.json``, then for a ``pyproject.toml`` with a
    ``[tool.diffview]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Parent directories are searched first (see :func:`find_config_in_parents`),
    then the user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", str(config_path)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file must contain a table at root level, got {type(config).__name__}", str(config_path)
        )
    return config


def options_from_config(config: Dict[str, Any]) -> tuple[DiffOptions, WordDiffOptions]:
    """Build option dataclasses from a loaded configuration.

    Parameters
    ----------
    config : dict
        Loaded configuration with optional ``parse`` and ``word_diff`` tables

    Returns
    -------
    tuple of (DiffOptions, WordDiffOptions)
        Options with configured values applied over the defaults

    Raises
    ------
    ConfigError
        If a section is not a table or holds unknown or invalid options

    """
    unknown = set(config) - {PARSE_SECTION, WORD_DIFF_SECTION}
    if unknown:
        raise ConfigError(f"Unknown config section(s): {', '.join(sorted(unknown))}")

    built = []
    for section, options_class in ((PARSE_SECTION, DiffOptions), (WORD_DIFF_SECTION, WordDiffOptions)):
        values = config.get(section, {})
        if not isinstance(values, dict):
            raise ConfigError(f"[{section}] must be a table, got {type(values).__name__}")
        try:
            built.append(options_class.from_mapping(values))
        except (ValueError, TypeError) as e:
            raise ConfigError(f"Invalid [{section}] configuration: {e}", original_error=e) from e
    return built[0], built[1]
