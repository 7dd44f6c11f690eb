"""
Utility functions for confstore.

Provides config file loading (YAML and JSON) and compact JSON encoding
used when flattening trees.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .exceptions import ConfigFileNotFoundError, ConfigParseError
from .logging import loader_logger


YAML_SUFFIXES = ('.yaml', '.yml')
JSON_SUFFIXES = ('.json',)


def is_readable_file(path: Path) -> bool:
    """Return True if path is an existing regular file the process can read."""
    return path.is_file() and os.access(path, os.R_OK)


def load_yaml(path: Path) -> Any:
    """
    Safely load a YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML content, or an empty dict for an empty document

    Raises:
        ConfigParseError: If YAML is invalid
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML in {path}: {e}") from e
    return {} if data is None else data


def load_json(path: Path) -> Any:
    """Load a JSON file, raising ConfigParseError on malformed content."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a configuration tree from a YAML or JSON file.

    The loader is selected by file suffix. The top level of the document
    must be a mapping.

    Args:
        path: Path to the config file

    Returns:
        dict: The configuration tree

    Raises:
        ConfigFileNotFoundError: If the file doesn't exist or can't be read
        ConfigParseError: If the content is invalid or not a mapping
    """
    path = Path(path)
    if not is_readable_file(path):
        raise ConfigFileNotFoundError(
            f"Config file not found or not readable: {path}", filename=str(path)
        )

    loader_logger.debug(f"Loading config file {path}")
    suffix = path.suffix.lower()
    try:
        if suffix in YAML_SUFFIXES:
            data = load_yaml(path)
        elif suffix in JSON_SUFFIXES:
            data = load_json(path)
        else:
            raise ConfigParseError(f"Unsupported config format: {suffix or path.name}")
    except OSError as e:
        raise ConfigFileNotFoundError(
            f"Config file could not be read: {path} ({e})", filename=str(path)
        ) from e

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Config file {path} must contain a mapping at the top level, "
            f"got {type(data).__name__}"
        )
    return data


def to_compact_json(value: Any) -> str:
    """Encode a value as JSON without whitespace between tokens."""
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False, default=str)
