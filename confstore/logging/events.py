"""
Coded log events.

log_event() is how the store reports a failure before raising it: the
record carries the ErrorCode and any lookup details as attributes the
formatters know how to render.
"""

import logging
from typing import Any, Optional, Union

from .config import level_number
from .error_codes import ErrorCode


def log_event(
    logger: logging.Logger,
    level: Union[int, str],
    message: str,
    error_code: Optional[ErrorCode] = None,
    **fields: Any,
) -> None:
    """
    Emit message with an optional error code and lookup details.

    Args:
        logger: Logger to emit on
        level: Level name ("WARNING") or number (logging.WARNING)
        message: Log message
        error_code: Code identifying the failure, if any
        **fields: Details such as alias, item or key; None values are dropped

    Raises:
        ValueError: If level is an unknown level name
    """
    if isinstance(level, str):
        level = level_number(level)

    extra = {'fields': {k: v for k, v in fields.items() if v is not None}}
    if error_code is not None:
        extra['error_code'] = error_code.code
        extra['error_category'] = error_code.category

    logger.log(level, message, extra=extra)


__all__ = [
    "log_event",
]
