"""
ConfStore settings store.

This package provides the in-memory settings tree with support for
hierarchical keys, enable/disable flags and deep merging.

Usage:
    from ConfStore.store import Store

    store = Store({"database": {"type": "sqlite"}})

    # Get a setting value
    db_type = store.get("database.type")

    # Set a setting value
    store.set("logging.level", "debug")

    # Merge more settings
    store.merge({"database": {"port": 5432}})
"""

from ConfStore.store.store import Store
from ConfStore.store.utils import deep_merge, is_node

__all__ = ["Store", "deep_merge", "is_node"]
