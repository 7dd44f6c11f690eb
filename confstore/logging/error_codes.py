"""
Error codes for structured error tracking.

Provides categorized error codes attached to log records emitted when a
store operation fails.
"""

from enum import Enum
from typing import NamedTuple


class ErrorCodeInfo(NamedTuple):
    """Container for error code information."""
    code: str
    category: str
    description: str


class ErrorCode(Enum):
    """
    Enumeration of error codes for structured logging.

    Each error code has:
    - code: Unique identifier (e.g., "CFG_001")
    - category: Error category (e.g., "config", "io")
    - description: Human-readable description

    Usage:
        log_event(logger, "WARNING", "Config file missing",
                  error_code=ErrorCode.CONFIG_FILE_MISSING, alias="config")
    """

    # Configuration errors (CFG_xxx)
    CONFIG_INVALID_ARGUMENT = ErrorCodeInfo("CFG_001", "config", "Item path or alias is malformed")
    CONFIG_FILE_MISSING = ErrorCodeInfo("CFG_002", "config", "Config file does not exist")
    CONFIG_INVALID_KEY = ErrorCodeInfo("CFG_003", "config", "Key does not exist in config tree")
    CONFIG_PARSE_ERROR = ErrorCodeInfo("CFG_004", "config", "Config file could not be parsed")
    CONFIG_NOT_INITIALIZED = ErrorCodeInfo("CFG_005", "config", "Config store has no base directory")

    # File/IO errors (IO_xxx)
    IO_READ_ERROR = ErrorCodeInfo("IO_001", "io", "Failed to read file")

    @property
    def code(self) -> str:
        """Get the error code identifier."""
        return self.value.code

    @property
    def category(self) -> str:
        """Get the error category."""
        return self.value.category

    @property
    def description(self) -> str:
        """Get the error description."""
        return self.value.description

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


__all__ = [
    "ErrorCode",
    "ErrorCodeInfo",
]
