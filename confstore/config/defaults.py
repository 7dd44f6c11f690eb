"""
Process-wide default store.

Module-level functions operating on a shared ConfigStore, for callers that
want the static "Config.get('config.key')" style instead of passing a store
around.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core import DEFAULT_ALIAS, MISSING, ConfigStore


_default_store: Optional[ConfigStore] = None
_default_store_lock = threading.Lock()


def get_default_store() -> ConfigStore:
    """
    Get the shared store, creating it on first use.

    Returns:
        ConfigStore instance
    """
    global _default_store

    with _default_store_lock:
        if _default_store is None:
            _default_store = ConfigStore()
        return _default_store


def reset_default_store() -> ConfigStore:
    """
    Replace the shared store with a fresh, uninitialised one (useful for testing).

    Returns:
        New ConfigStore instance
    """
    global _default_store
    with _default_store_lock:
        _default_store = None
    return get_default_store()


def init(base_dir: Union[str, Path]) -> None:
    """Set the base directory of the shared store."""
    get_default_store().init(base_dir)


def clear_cache() -> None:
    """Clear the file cache of the shared store."""
    get_default_store().clear_cache()


def get(item: str, default: Any = MISSING) -> Any:
    """Get an item from the shared store. See ConfigStore.get."""
    return get_default_store().get(item, default)


def item_exist(item: str) -> bool:
    """Check whether an item exists in the shared store."""
    return get_default_store().item_exist(item)


def get_replaced(item: str, default: Any = MISSING) -> Any:
    """Get an item with %name% wildcards replaced. See ConfigStore.get_replaced."""
    return get_default_store().get_replaced(item, default)


def get_to_user_pwd(item: str, index: int = 0) -> Optional[str]:
    """Format a mapping entry as "key:value". See ConfigStore.get_to_user_pwd."""
    return get_default_store().get_to_user_pwd(item, index)


def set_item(item: str, value: Any) -> Any:
    """Set an item in memory on the shared store. See ConfigStore.set."""
    return get_default_store().set(item, value)


def sweep(alias: str = DEFAULT_ALIAS) -> Dict[str, Any]:
    """Flatten a config file of the shared store. See ConfigStore.sweep."""
    return get_default_store().sweep(alias)


def get_all(alias: str) -> Dict[str, Any]:
    """Get a whole config file from the shared store."""
    return get_default_store().get_all(alias)
