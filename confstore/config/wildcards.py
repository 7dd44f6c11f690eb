"""
Value formatting helpers: wildcard substitution and key:value pairs.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping, Optional

WILDCARD_PATTERN = re.compile(r'%(\w+)%')


def replace_wildcards(value: Any, resolve: Callable[[str], Any]) -> Any:
    """
    Replace every %name% token in value with str(resolve(name)).

    Non-string values are returned unchanged.

    Args:
        value: Value to process
        resolve: Callable mapping a token name to its replacement value

    Returns:
        The substituted string, or value itself if it is not a string
    """
    if not isinstance(value, str):
        return value
    return WILDCARD_PATTERN.sub(lambda match: str(resolve(match.group(1))), value)


def format_pair(mapping: Mapping[Any, Any], index: int = 0) -> Optional[str]:
    """
    Return the index-th entry of mapping formatted as "key:value".

    Returns None when index is outside the mapping.
    """
    if index < 0:
        return None
    for position, (key, value) in enumerate(mapping.items()):
        if position == index:
            return f"{key}:{value}"
    return None
