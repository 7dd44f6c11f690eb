"""
Core configuration store.

ConfigStore resolves item paths of the form "alias.key1.key2..." against
YAML files in a base directory. Each file is read at most once and kept in an
in-memory cache; set() changes only that cached copy, never the file.
"""

from __future__ import annotations

import copy
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..exceptions import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidArgumentError,
    InvalidKeyError,
)
from ..logging import ErrorCode, LogContext, config_logger, log_event
from ..utils import load_config_file
from .keys import ItemPath, parse_item, validate_alias
from .flatten import flatten_tree
from .tree import get_nested, set_nested
from .wildcards import format_pair, replace_wildcards


logger = config_logger

DEFAULT_EXTENSION = '.yaml'
DEFAULT_ALIAS = 'config'
DEFAULT_WILDCARD_ALIAS = DEFAULT_ALIAS


class _Missing:
    """Marker type for "no default supplied"."""

    def __repr__(self) -> str:
        return '<MISSING>'


MISSING: Any = _Missing()


def _detached(value: Any) -> Any:
    """Return a deep copy of containers so callers never alias the cache."""
    if isinstance(value, (dict, list)):
        return copy.deepcopy(value)
    return value


class ConfigStore:
    """
    File-backed configuration cache with dotted-path access.

    Attributes:
        base_dir: Directory holding the config files, set by init()
        extension: File suffix appended to an alias (default ".yaml")
        wildcard_alias: Alias used to resolve %name% tokens in get_replaced()

    Example:
        >>> store = ConfigStore('/etc/myapp')
        >>> store.get('config.database.host')   # reads /etc/myapp/config.yaml
        'localhost'
    """

    def __init__(
        self,
        base_dir: Optional[Union[str, Path]] = None,
        extension: str = DEFAULT_EXTENSION,
        wildcard_alias: str = DEFAULT_WILDCARD_ALIAS,
    ):
        self.base_dir: Optional[Path] = None
        self.extension = extension if extension.startswith('.') else f'.{extension}'
        self.wildcard_alias = wildcard_alias
        self._cache: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.RLock()
        if base_dir is not None:
            self.init(base_dir)

    def init(self, base_dir: Union[str, Path]) -> None:
        """
        Set the directory config files are resolved from.

        The directory is not checked here; a missing directory surfaces as
        ConfigFileNotFoundError on first access.
        """
        self.base_dir = Path(base_dir)
        logger.debug(f"Config base directory set to {self.base_dir}")

    def clear_cache(self) -> None:
        """Drop every cached file so the next access re-reads from disk."""
        with self._lock:
            cache_size = len(self._cache)
            self._cache.clear()
        logger.debug(f"Cleared config cache ({cache_size} entries)")

    @property
    def cached_files(self) -> List[str]:
        """Resolved paths of the files currently held in the cache."""
        with self._lock:
            return list(self._cache)

    def file_path(self, alias: str) -> Path:
        """
        Resolve the file backing alias.

        Raises:
            InvalidArgumentError: If the alias is empty or init() was never called
        """
        try:
            validate_alias(alias)
        except InvalidArgumentError as e:
            log_event(
                logger, "WARNING", str(e),
                error_code=ErrorCode.CONFIG_INVALID_ARGUMENT, alias=alias,
            )
            raise
        if self.base_dir is None:
            log_event(
                logger, "WARNING", "Config store used before init()",
                error_code=ErrorCode.CONFIG_NOT_INITIALIZED, alias=alias,
            )
            raise InvalidArgumentError(
                'The config base directory is not set, call init(base_dir) first'
            )
        return (self.base_dir / f"{alias}{self.extension}").absolute()

    def _load(self, alias: str, item: Optional[str] = None) -> Tuple[str, Dict[str, Any]]:
        """
        Return (filename, tree) for alias, reading the file on first access.

        The returned tree is the cached object itself.
        """
        path = self.file_path(alias)
        filename = str(path)

        with self._lock:
            if filename in self._cache:
                logger.debug(f"Returning cached config for '{alias}'")
                return filename, self._cache[filename]

            try:
                tree = load_config_file(path)
            except ConfigFileNotFoundError as e:
                error_code = ErrorCode.IO_READ_ERROR if path.exists() else ErrorCode.CONFIG_FILE_MISSING
                log_event(
                    logger, "WARNING", f"Config file {filename} unavailable",
                    error_code=error_code, alias=alias, item=item,
                )
                if item is not None:
                    message = f'The configuration file "{filename}" for item "{item}" does not exist'
                else:
                    message = f'The configuration file "{filename}" does not exist'
                raise ConfigFileNotFoundError(message, filename=filename, item=item) from e
            except ConfigParseError:
                log_event(
                    logger, "ERROR", f"Config file {filename} could not be parsed",
                    error_code=ErrorCode.CONFIG_PARSE_ERROR, alias=alias, item=item,
                )
                raise

            self._cache[filename] = tree
            logger.debug(f"Cached config '{alias}' from {filename}")
            return filename, tree

    def _parse(self, item: str) -> ItemPath:
        """Split item into alias and keys, logging a malformed path before raising."""
        try:
            return parse_item(item)
        except InvalidArgumentError as e:
            log_event(
                logger, "WARNING", str(e),
                error_code=ErrorCode.CONFIG_INVALID_ARGUMENT, item=item,
            )
            raise

    def _resolve(self, path: ItemPath) -> Any:
        """Return a reference to the cached value at path."""
        filename, tree = self._load(path.alias, path.item)
        try:
            return get_nested(tree, path.keys, path.item, filename)
        except InvalidKeyError as e:
            log_event(
                logger, "DEBUG", str(e),
                error_code=ErrorCode.CONFIG_INVALID_KEY, key=e.key, item=path.item,
            )
            raise

    def get(self, item: str, default: Any = MISSING) -> Any:
        """
        Get the value at an item path.

        Args:
            item: Path in the form "alias.key1.key2...", where alias is the
                file name without extension
            default: Value returned when a key along the path is missing.
                When omitted the InvalidKeyError propagates. None is a valid
                default.

        Returns:
            The value found: a scalar, or a copy of a nested dict/list

        Raises:
            InvalidArgumentError: If item is empty or has fewer than two fields
            ConfigFileNotFoundError: If the backing file doesn't exist
            InvalidKeyError: If a key is missing and no default was given
        """
        path = self._parse(item)
        with self._lock:
            try:
                value = self._resolve(path)
            except InvalidKeyError:
                if default is MISSING:
                    raise
                return default
            return _detached(value)

    def item_exist(self, item: str) -> bool:
        """
        Check whether an item path resolves.

        Only a missing key yields False; a missing file or a malformed path
        still raises.
        """
        try:
            self.get(item)
        except InvalidKeyError:
            return False
        return True

    def get_replaced(self, item: str, default: Any = MISSING) -> Any:
        """
        Get an item like get(), replacing %name% wildcards in string values.

        Each token is replaced with the value of "<wildcard_alias>.name",
        whatever file the item itself came from.

        Example:
            if get('config.testwc') returns '%init%/some' then
            get_replaced('config.testwc') returns get('config.init') + '/some'
        """
        value = self.get(item, default)
        with LogContext(operation='get_replaced', item=item):
            return replace_wildcards(
                value, lambda name: self.get(f"{self.wildcard_alias}.{name}")
            )

    def get_to_user_pwd(self, item: str, index: int = 0) -> Optional[str]:
        """
        Format one entry of a mapping as "key:value".

        Intended for user/password pairs: {'user': 'pwd'} gives "user:pwd".

        Args:
            item: Path to a mapping
            index: Position of the entry in the mapping's order

        Returns:
            str: The formatted entry, or None if index is out of range

        Raises:
            InvalidArgumentError: If the item is not a mapping
        """
        value = self.get(item)
        if not isinstance(value, dict):
            raise InvalidArgumentError(
                f'The item "{item}" must be a mapping, got {type(value).__name__}'
            )
        return format_pair(value, index)

    def set(self, item: str, value: Any) -> Any:
        """
        Set an item in the in-memory copy of a config file.

        The file on disk is never modified. Intermediate keys must already
        exist.

        The cache keeps its own copy of a dict or list value, so later changes
        to value or to the returned object leave the cache untouched.

        Returns:
            The assigned value (a copy if it is a dict or list)

        Raises:
            InvalidArgumentError: If item is empty or has fewer than two fields
            ConfigFileNotFoundError: If the backing file doesn't exist
            InvalidKeyError: If an intermediate key is missing
        """
        path = self._parse(item)
        with self._lock, LogContext(operation='set', alias=path.alias, item=item):
            filename, tree = self._load(path.alias, item)
            set_nested(tree, path.keys, _detached(value), item, filename)
            logger.debug(f"Set {item} in memory")
        return _detached(value)

    def sweep(self, alias: str = DEFAULT_ALIAS) -> Dict[str, Any]:
        """
        Flatten a whole config file into "key1.key2" -> value pairs.

        Lists are encoded as compact JSON strings rather than recursed into.

        Raises:
            InvalidArgumentError: If alias is empty
            ConfigFileNotFoundError: If the backing file doesn't exist
        """
        with self._lock, LogContext(operation='sweep', alias=alias):
            _, tree = self._load(alias)
            return flatten_tree(tree)

    def get_all(self, alias: str) -> Dict[str, Any]:
        """
        Get every item of a config file.

        Args:
            alias: File name without extension

        Returns:
            dict: A copy of the whole tree, including in-memory changes

        Raises:
            InvalidArgumentError: If alias is empty
            ConfigFileNotFoundError: If the backing file doesn't exist
        """
        with self._lock:
            _, tree = self._load(alias)
            return copy.deepcopy(tree)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_dir={str(self.base_dir)!r}, "
            f"extension={self.extension!r}, cached={len(self._cache)})"
        )
