"""
Item path parsing.

An item path looks like "alias.key1.key2": the first segment names the
config file, the remaining segments descend into its tree.
"""

from __future__ import annotations

from typing import List, NamedTuple

from ..exceptions import InvalidArgumentError


SEPARATOR = '.'


class ItemPath(NamedTuple):
    """A parsed item path."""
    item: str
    alias: str
    keys: List[str]


def parse_item(item: str) -> ItemPath:
    """
    Split an item path into its file alias and key segments.

    Args:
        item: Path in the form "alias.key1.key2..."

    Returns:
        ItemPath: The original string, the alias and the key segments

    Raises:
        InvalidArgumentError: If item is empty or has fewer than two segments
    """
    if not item:
        raise InvalidArgumentError('The item is empty')

    fields = item.split(SEPARATOR)
    if len(fields) < 2:
        raise InvalidArgumentError(
            f'The item "{item}" must have at least two fields separated by dot(.)'
        )
    return ItemPath(item=item, alias=fields[0], keys=fields[1:])


def validate_alias(alias: str) -> str:
    """Return alias unchanged, raising InvalidArgumentError if it is empty."""
    if not alias:
        raise InvalidArgumentError('The config alias is empty')
    return alias
