"""
Per-operation logging context.

The store wraps its multi-step operations in LogContext so every record
emitted inside carries the operation, the file alias and the item path.
Values live in a ContextVar, so threads and asyncio tasks each see their own.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional


_store_context: ContextVar[Dict[str, Any]] = ContextVar('confstore_log_context', default={})

# Order in which fields are rendered
CONTEXT_FIELDS = ('operation', 'alias', 'item')


def current_context() -> Dict[str, Any]:
    """Return a copy of the fields active in the current context."""
    return dict(_store_context.get())


def reset_context() -> None:
    """Drop every context field. Useful between test cases."""
    _store_context.set({})


@contextmanager
def LogContext(
    operation: str,
    alias: Optional[str] = None,
    item: Optional[str] = None,
) -> Iterator[Dict[str, Any]]:
    """
    Tag records emitted inside the block with store operation details.

    Blocks nest: inner fields override outer ones until the inner block exits.

    Usage:
        with LogContext(operation="sweep", alias="config"):
            flatten_tree(tree)
    """
    fields = dict(_store_context.get())
    fields['operation'] = operation
    if alias is not None:
        fields['alias'] = alias
    if item is not None:
        fields['item'] = item

    token = _store_context.set(fields)
    try:
        yield fields
    finally:
        _store_context.reset(token)


__all__ = [
    "CONTEXT_FIELDS",
    "LogContext",
    "current_context",
    "reset_context",
]
