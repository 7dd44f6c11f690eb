"""
confstore: file-backed configuration store with dotted-path access.

Loads YAML configuration files from a base directory on demand, caches them
in memory, and resolves item paths like "config.database.host".

Usage:
    from confstore import ConfigStore

    store = ConfigStore('config')
    host = store.get('config.database.host', 'localhost')
"""

__version__ = "1.0.0"

from .exceptions import (
    ConfigError,
    InvalidArgumentError,
    ConfigFileNotFoundError,
    InvalidKeyError,
    ConfigParseError,
)

from .config import (
    ConfigStore,
    MISSING,
    get_default_store,
    reset_default_store,
)

from .utils import load_config_file

from .logging import configure_logging, get_logger


__all__ = [
    "__version__",
    # Exceptions
    "ConfigError",
    "InvalidArgumentError",
    "ConfigFileNotFoundError",
    "InvalidKeyError",
    "ConfigParseError",
    # Store
    "ConfigStore",
    "MISSING",
    "get_default_store",
    "reset_default_store",
    # Loading
    "load_config_file",
    # Logging
    "configure_logging",
    "get_logger",
]
