"""
Formatters for confstore records.

ConsoleFormatter renders one readable line per record; JsonFormatter writes
one JSON object per line for log files. Both pick up the LogContext fields
and the error code attached by log_event().
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from .context import CONTEXT_FIELDS, current_context


class ConsoleFormatter(logging.Formatter):
    """
    Single-line formatter for terminals.

    Layout:
        2024-01-31 12:00:00 | WARNING  | config | message [operation=get, item=config.x] (code=CFG_002)
    """

    LEVEL_COLORS = {
        logging.DEBUG: '\033[2m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[1;31m',
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__(datefmt='%Y-%m-%d %H:%M:%S')
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        context = current_context()
        tags = ', '.join(
            f"{name}={context[name]}" for name in CONTEXT_FIELDS if context.get(name)
        )

        line = ' | '.join([
            self.formatTime(record, self.datefmt),
            f"{record.levelname:<8}",
            record.name.rsplit('.', 1)[-1],
            record.getMessage(),
        ])
        if tags:
            line += f" [{tags}]"
        error_code = getattr(record, 'error_code', None)
        if error_code:
            line += f" (code={error_code})"

        color = self.LEVEL_COLORS.get(record.levelno) if self.use_colors else None
        if color:
            line = f"{color}{line}{self.RESET}"

        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


class JsonFormatter(logging.Formatter):
    """
    JSON-lines formatter for log files.

    Context fields (operation, alias, item) sit at the top level next to the
    message; fields passed to log_event() go under "fields".
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            'time': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        entry.update(current_context())

        error_code = getattr(record, 'error_code', None)
        if error_code:
            entry['error_code'] = error_code
            entry['error_category'] = getattr(record, 'error_category', None)

        fields = getattr(record, 'fields', None)
        if fields:
            entry['fields'] = fields

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


__all__ = [
    "ConsoleFormatter",
    "JsonFormatter",
]
