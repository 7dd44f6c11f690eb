"""
Handler setup for the confstore logger namespace.

The library itself only emits records; an application calls
configure_logging() once to send them to the console and/or a file.
"""

import atexit
import logging
import sys
from pathlib import Path
from typing import List, Literal, Optional, Union

from .formatters import ConsoleFormatter, JsonFormatter

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ROOT_LOGGER_NAME = 'confstore'

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}

_installed: List[logging.Handler] = []
_atexit_registered = False


def level_number(level: str) -> int:
    """
    Map a level name (case-insensitive) to its logging constant.

    Raises:
        ValueError: If the name is not a known level
    """
    try:
        return _LEVELS[level.upper()]
    except KeyError:
        raise ValueError(
            f"Invalid log level '{level}'. Must be one of: {', '.join(_LEVELS)}"
        ) from None


def shutdown_logging() -> None:
    """Detach and close the handlers installed by configure_logging()."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()


def configure_logging(
    level: LogLevel = "INFO",
    console: bool = True,
    log_file: Optional[Union[str, Path]] = None,
    use_colors: bool = True,
) -> logging.Logger:
    """
    Attach handlers to the 'confstore' logger, replacing earlier ones.

    Args:
        level: Minimum level to emit
        console: Write readable lines to stdout
        log_file: Also write JSON lines to this file (parent dirs are created)
        use_colors: Color console lines by level

    Returns:
        The 'confstore' logger

    Raises:
        ValueError: If level is not a valid level name
    """
    global _atexit_registered

    level_no = level_number(level)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level_no)
    shutdown_logging()

    handlers: List[logging.Handler] = []
    if console:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(ConsoleFormatter(use_colors=use_colors))
        handlers.append(stream_handler)
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(JsonFormatter())
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level_no)
        root.addHandler(handler)
        _installed.append(handler)

    if not _atexit_registered:
        atexit.register(shutdown_logging)
        _atexit_registered = True

    return root


def get_logger(name: str) -> logging.Logger:
    """Return the logger 'confstore.<name>'."""
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


__all__ = [
    "LogLevel",
    "ROOT_LOGGER_NAME",
    "level_number",
    "configure_logging",
    "shutdown_logging",
    "get_logger",
]
