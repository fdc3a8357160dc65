"""
Utility functions for the ConfStore settings tree.

This module provides the helpers the Store is built on: classifying tree
values, validating key paths, walking a key path through nested dictionaries
and deep merging one settings tree into another.
"""

import copy
from typing import Any, Dict, List, Optional, Tuple

from ConfStore.exceptions import InvalidKeyError


def is_node(value: Any) -> bool:
    """Return True if ``value`` is a nested settings mapping."""
    return isinstance(value, dict)


def is_sequence(value: Any) -> bool:
    """Return True if ``value`` is a list of settings (strings are scalars)."""
    return isinstance(value, (list, tuple))


def split_key(key: Any) -> List[str]:
    """
    Validate a key path and split it into its segments.

    Args:
        key: Hierarchical key using dot notation (e.g., "database.pool.size")

    Returns:
        The list of segments, the last one being the leaf segment

    Raises:
        InvalidKeyError: If the key is not a string or is empty
    """
    if not isinstance(key, str):
        raise InvalidKeyError(
            f"The key must be a string, got {type(key).__name__}",
            context={"key": repr(key)}
        )
    if key == '':
        raise InvalidKeyError("The key should not be empty")

    return key.split('.')


def find_parent(data: Dict[str, Any], key: str) -> Optional[Tuple[Dict[str, Any], str]]:
    """
    Walk the intermediate segments of ``key`` without modifying ``data``.

    Args:
        data: The root settings dictionary
        key: Hierarchical key using dot notation

    Returns:
        A ``(node, leaf)`` tuple, or None when an intermediate segment does not
        hold a nested mapping
    """
    *parts, leaf = split_key(key)

    for part in parts:
        value = data.get(part)
        if not is_node(value):
            return None
        data = value

    return data, leaf


def make_parent(data: Dict[str, Any], key: str) -> Tuple[Dict[str, Any], str]:
    """
    Walk the intermediate segments of ``key``, creating them as needed.

    Any missing segment, or one holding a non-mapping value, is replaced by a
    new empty dictionary.

    Args:
        data: The root settings dictionary
        key: Hierarchical key using dot notation

    Returns:
        A ``(node, leaf)`` tuple
    """
    *parts, leaf = split_key(key)

    for part in parts:
        if not is_node(data.get(part)):
            data[part] = {}
        data = data[part]

    return data, leaf


def deep_merge(dest: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge ``source`` into ``dest`` in place.

    Rules:
    - If the destination value is a list, the source value is appended to it
      (a list source is concatenated, anything else added as one element)
    - If both values are dictionaries, recursively merge them
    - Otherwise, the destination value is replaced by a copy of the source value

    Keys present only in ``dest`` are left untouched.

    Args:
        dest: Dictionary receiving the values
        source: Dictionary with values to merge

    Returns:
        The ``dest`` dictionary
    """
    for field, value in source.items():
        current = dest.get(field)

        if is_sequence(current):
            # Build a new list so callers holding the old one never see it grow
            extra = list(value) if is_sequence(value) else [value]
            dest[field] = list(current) + copy.deepcopy(extra)
        elif is_node(value) and is_node(current):
            deep_merge(current, value)
        else:
            dest[field] = copy.deepcopy(value)

    return dest
