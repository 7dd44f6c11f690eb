"""
Logging for confstore.

The store emits debug records for loads and cache hits and coded warnings
for failures. Nothing is printed until the host application calls
configure_logging().

Usage:
    from confstore.logging import configure_logging

    configure_logging(level="DEBUG", log_file="logs/confstore.log")
"""

from .config import (
    LogLevel,
    configure_logging,
    get_logger,
    level_number,
    shutdown_logging,
)
from .context import LogContext, current_context, reset_context
from .error_codes import ErrorCode, ErrorCodeInfo
from .events import log_event
from .formatters import ConsoleFormatter, JsonFormatter

# Loggers used inside the package
config_logger = get_logger('config')
loader_logger = get_logger('loader')


__all__ = [
    # Setup
    "LogLevel",
    "configure_logging",
    "get_logger",
    "level_number",
    "shutdown_logging",
    # Context
    "LogContext",
    "current_context",
    "reset_context",
    # Records
    "ErrorCode",
    "ErrorCodeInfo",
    "log_event",
    "ConsoleFormatter",
    "JsonFormatter",
    # Package loggers
    "config_logger",
    "loader_logger",
]
