"""
Descent and assignment inside a loaded configuration tree.

A tree is made of dicts, lists and scalars. Dict children are addressed by
key (string, or integer for a decimal segment); list children by a decimal
index segment.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..exceptions import InvalidKeyError


MISSING_KEY = object()


def _list_index(container: list, key: str) -> int:
    """Return the list index named by key, or -1 if it is not a valid in-range index."""
    if not key.isdigit():
        return -1
    index = int(key)
    return index if index < len(container) else -1


def _mapping_key(node: dict, key: str) -> Any:
    """
    Return the key of node that segment key names, or MISSING_KEY.

    YAML loads keys such as `80:` as integers, so a decimal segment falls
    back to its integer form when the string key is absent.
    """
    if key in node:
        return key
    if key.lstrip('-').isdigit() and int(key) in node:
        return int(key)
    return MISSING_KEY


def get_child(node: Any, key: str, item: str, filename: str) -> Any:
    """
    Return the child of node named by key.

    Raises:
        InvalidKeyError: If node is not a container or has no such child
    """
    if isinstance(node, dict):
        actual = _mapping_key(node, key)
        if actual is not MISSING_KEY:
            return node[actual]
    elif isinstance(node, list):
        index = _list_index(node, key)
        if index >= 0:
            return node[index]
    raise InvalidKeyError(key, item, filename)


def get_nested(tree: Any, keys: Sequence[str], item: str, filename: str) -> Any:
    """
    Walk keys from the root of tree and return the value reached.

    Args:
        tree: Loaded configuration tree
        keys: Key segments to descend, in order
        item: Original item path, used in error messages
        filename: File the tree came from, used in error messages

    Returns:
        The value at the end of the path (a reference into tree)

    Raises:
        InvalidKeyError: If any segment does not exist
    """
    value = tree
    for key in keys:
        value = get_child(value, key, item, filename)
    return value


def set_nested(tree: Any, keys: Sequence[str], value: Any, item: str, filename: str) -> Any:
    """
    Assign value at the path given by keys, mutating tree in place.

    Intermediate nodes are never created: every segment but the last must
    already name a dict or list.

    Returns:
        The assigned value

    Raises:
        InvalidKeyError: If an intermediate segment is missing or is not a
            container, or the last segment is not a valid index of a list
    """
    parent = get_nested(tree, keys[:-1], item, filename)
    last = keys[-1]

    if isinstance(parent, dict):
        actual = _mapping_key(parent, last)
        parent[last if actual is MISSING_KEY else actual] = value
    elif isinstance(parent, list):
        index = _list_index(parent, last)
        if index < 0:
            raise InvalidKeyError(last, item, filename)
        parent[index] = value
    else:
        raise InvalidKeyError(last, item, filename)
    return value
