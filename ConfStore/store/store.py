"""
Settings store for ConfStore.

This module implements the Store class, an in-memory tree of settings
addressed by dot-delimited keys, with support for defaults, feature-style
enable/disable flags and deep merging of new settings.
"""

import copy
from typing import Any, Dict, Optional, Union

from ConfStore.exceptions import InvalidArgumentError
from ConfStore.store.utils import deep_merge, find_parent, is_node, make_parent
from ConfStore.utils.logging import get_logger

logger = get_logger(__name__)

# Marks a key that could not be resolved, so None values stay distinguishable
_MISSING = object()


class Store:
    """
    Configuration store.

    Wraps a single nested dictionary and exposes it through hierarchical
    keys such as ``"database.pool.size"``.

    Features:
    - Hierarchical key access with fallback defaults
    - Writing with automatic creation of intermediate sections
    - Enable/disable flags, stored in an ``enabled`` field for sections
    - Deep merging of dictionaries or other stores

    A Store is not thread-safe. Callers sharing one between threads must
    synchronise access themselves.

    Attributes:
        _data (Dict[str, Any]): The root settings dictionary
    """

    def __init__(self, source: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize a new store.

        The given dictionary is adopted as the root as-is (no copy), so the
        store and the caller share it.

        Args:
            source (Dict[str, Any], optional): Initial settings. Defaults to a new empty dictionary.
        """
        self._data = {} if source is None else source

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value using dot notation.

        Note that any falsy value (``0``, ``False``, ``""``, ``None``, empty
        containers) is treated like a missing one and yields ``default``.
        Use ``has()`` to tell a falsy value apart from an absent one.

        Args:
            key (str): Hierarchical key using dot notation (e.g., "database.type")
            default (Any, optional): Value to return if the key is not found. Defaults to None.

        Returns:
            Any: The setting value if found and truthy, otherwise the default value.

        Raises:
            InvalidKeyError: If the key is not a non-empty string

        Examples:
            >>> store = Store({"database": {"type": "sqlite"}})
            >>> store.get("database.type")
            'sqlite'
            >>> store.get("database.port", 5432)
            5432
        """
        value = self._resolve(key)

        return value if value is not _MISSING and value else default

    def set(self, key: str, value: Any) -> 'Store':
        """
        Set a setting value using dot notation.

        Creates intermediate dictionaries if they don't exist, replacing any
        non-dictionary value found on the way. The previous value at ``key``
        is overwritten, never merged.

        Args:
            key (str): Hierarchical key using dot notation (e.g., "database.type")
            value (Any): Value to set

        Returns:
            Store: The store itself, for chaining

        Raises:
            InvalidKeyError: If the key is not a non-empty string

        Examples:
            >>> store = Store()
            >>> store.set("foo", 123).set("foo.bar.baz", [1, 2, 3]).get("foo")
            {'bar': {'baz': [1, 2, 3]}}
        """
        node, leaf = make_parent(self._data, key)
        node[leaf] = value
        return self

    def has(self, key: str) -> bool:
        """
        Check if a setting is defined.

        A setting holding ``False`` or ``0`` is defined; one holding ``None``
        is not.

        Args:
            key (str): Hierarchical key using dot notation

        Returns:
            bool: True if the key resolves to a non-None value
        """
        value = self._resolve(key)
        return value is not _MISSING and value is not None

    def enable(self, key: str) -> 'Store':
        """
        Enable a setting.

        When the key holds a section (a dictionary), its ``enabled`` field is
        set instead, keeping the rest of the section intact.

        Args:
            key (str): Hierarchical key using dot notation

        Returns:
            Store: The store itself, for chaining

        Examples:
            >>> store = Store({"cache": {"size": 10}})
            >>> store.enable("cache").get("cache")
            {'size': 10, 'enabled': True}
        """
        return self._set_enabled(key, True)

    def disable(self, key: str) -> 'Store':
        """
        Disable a setting.

        Mirrors ``enable()``, writing ``False``.

        Args:
            key (str): Hierarchical key using dot notation

        Returns:
            Store: The store itself, for chaining
        """
        return self._set_enabled(key, False)

    def enabled(self, key: str) -> bool:
        """
        Check if a setting is enabled.

        For a section, the truthiness of its ``enabled`` field is used; a
        section without that field counts as enabled. Any other value is
        enabled when truthy, and a missing key is disabled.

        Args:
            key (str): Hierarchical key using dot notation

        Returns:
            bool: True if the setting is enabled, False otherwise
        """
        value = self._resolve(key)

        if value is _MISSING:
            return False
        if is_node(value):
            return bool(value.get('enabled', True))
        return bool(value)

    def disabled(self, key: str) -> bool:
        """Check if a setting is disabled."""
        return not self.enabled(key)

    def merge(self, values: Union[Dict[str, Any], 'Store']) -> 'Store':
        """
        Deep merge new settings into the store.

        Lists are extended, sections are merged recursively and every other
        value is overwritten by a copy of the new one. Settings missing from
        ``values`` are kept.

        Lists are extended even when ``values`` is this store itself, so
        ``store.merge(store)`` doubles every list (``[1]`` becomes ``[1, 1]``).

        Args:
            values (Union[Dict[str, Any], Store]): A dictionary or another store

        Returns:
            Store: The store itself, for chaining

        Raises:
            InvalidArgumentError: If ``values`` is neither a dictionary nor a Store

        Examples:
            >>> store = Store({"hosts": ["a"], "db": {"port": 1, "name": "x"}})
            >>> store.merge({"hosts": ["b"], "db": {"port": 2}}).get_all()
            {'hosts': ['a', 'b'], 'db': {'port': 2, 'name': 'x'}}
        """
        if isinstance(values, Store):
            values = values._data

        if not is_node(values):
            raise InvalidArgumentError(
                f"Cannot merge settings from {type(values).__name__}",
                context={"type": type(values).__name__}
            )

        logger.debug(f"Merging {len(values)} top-level settings")
        deep_merge(self._data, values)
        return self

    def get_all(self) -> Dict[str, Any]:
        """
        Get the entire settings tree.

        Returns:
            Dict[str, Any]: A deep copy of the root dictionary
        """
        return copy.deepcopy(self._data)

    def _resolve(self, key: str) -> Any:
        """Return the raw value at ``key``, or ``_MISSING``."""
        found = find_parent(self._data, key)

        if found is None:
            return _MISSING

        node, leaf = found
        return node.get(leaf, _MISSING)

    def _set_enabled(self, key: str, value: bool) -> 'Store':
        if is_node(self._resolve(key)):
            key = f"{key}.enabled"

        return self.set(key, value)
