"""
Tree flattening.

Turns a nested configuration tree into a single-level dict keyed by the
dot-joined path of every leaf.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..utils import to_compact_json
from .keys import SEPARATOR


def flatten_tree(tree: Mapping[str, Any], parent: Optional[str] = None) -> Dict[str, Any]:
    """
    Flatten a configuration tree.

    Mappings are recursed into. Lists are not: they are encoded as compact
    JSON strings. When a key produced by a nested mapping collides with one
    already present, the earlier value is kept; a direct leaf assignment
    overwrites.

    Example:
        >>> flatten_tree({'db': {'host': 'x', 'ports': [1, 2]}, 'debug': True})
        {'db.host': 'x', 'db.ports': '[1,2]', 'debug': True}

    Args:
        tree: Mapping to flatten
        parent: Dot-joined prefix of tree within the root, if any

    Returns:
        dict: Flat mapping of dotted key to leaf value
    """
    out: Dict[str, Any] = {}
    header = '' if parent is None else f"{parent}{SEPARATOR}"

    for key, value in tree.items():
        path = f"{header}{key}"
        if isinstance(value, Mapping):
            for child_path, child_value in flatten_tree(value, path).items():
                out.setdefault(child_path, child_value)
        elif isinstance(value, (list, tuple)):
            out[path] = to_compact_json(list(value))
        else:
            out[path] = value

    return out
