"""
Exception hierarchy for confstore.

Every error raised by the store derives from ConfigError, and each concrete
error also derives from the closest builtin so callers can catch either.
"""

from typing import Optional


class ConfigError(Exception):
    """Base class for all confstore errors."""
    pass


class InvalidArgumentError(ConfigError, ValueError):
    """Raised when an item path or alias is malformed, or the store is not initialised."""
    pass


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """
    Raised when the file backing an alias does not exist or is not readable.

    Attributes:
        filename: Resolved path of the missing file.
        item: Item path that triggered the lookup, if any.
    """

    def __init__(self, message: str, filename: Optional[str] = None, item: Optional[str] = None):
        super().__init__(message)
        self.filename = filename
        self.item = item


class InvalidKeyError(ConfigError, LookupError):
    """
    Raised when a segment of an item path does not exist in the loaded tree.

    Attributes:
        key: The missing segment.
        item: The full item path that was requested.
        filename: Resolved path of the file the tree came from.
    """

    def __init__(self, key: str, item: str, filename: str):
        super().__init__(
            f'The key "{key}" does not exist, item: {item}, file: {filename}'
        )
        self.key = key
        self.item = item
        self.filename = filename


class ConfigParseError(ConfigError, ValueError):
    """Raised when a config file exists but does not hold a valid mapping document."""
    pass


__all__ = [
    "ConfigError",
    "InvalidArgumentError",
    "ConfigFileNotFoundError",
    "InvalidKeyError",
    "ConfigParseError",
]
