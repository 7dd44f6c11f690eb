"""
Configuration store for confstore.

This package loads YAML configuration files on demand, caches them in memory
and resolves dotted item paths such as "config.database.host", where the
first segment names the file.

Public API:
    - ConfigStore: Explicit store object (preferred)
    - init: Set the base directory of the shared store
    - clear_cache: Clear the shared store's file cache
    - get: Get an item, optionally with a default
    - item_exist: Check whether an item exists
    - get_replaced: Get an item with %name% wildcards replaced
    - get_to_user_pwd: Format a mapping entry as "key:value"
    - set_item / set: Override an item in memory
    - sweep: Flatten a whole file into dotted keys
    - get_all: Get a whole file
"""

from __future__ import annotations

# Core store
from .core import (
    ConfigStore,
    MISSING,
    DEFAULT_EXTENSION,
    DEFAULT_ALIAS,
    DEFAULT_WILDCARD_ALIAS,
)

# Shared default store
from .defaults import (
    get_default_store,
    reset_default_store,
    init,
    clear_cache,
    get,
    item_exist,
    get_replaced,
    get_to_user_pwd,
    set_item,
    sweep,
    get_all,
)

# Helpers
from .keys import ItemPath, parse_item
from .flatten import flatten_tree
from .wildcards import replace_wildcards, format_pair

# Same name as ConfigStore.set; shadows the builtin within this namespace only
set = set_item


__all__ = [
    # Core
    'ConfigStore',
    'MISSING',
    'DEFAULT_EXTENSION',
    'DEFAULT_ALIAS',
    'DEFAULT_WILDCARD_ALIAS',
    # Shared store
    'get_default_store',
    'reset_default_store',
    'init',
    'clear_cache',
    'get',
    'item_exist',
    'get_replaced',
    'get_to_user_pwd',
    'set_item',
    'set',
    'sweep',
    'get_all',
    # Helpers
    'ItemPath',
    'parse_item',
    'flatten_tree',
    'replace_wildcards',
    'format_pair',
]
