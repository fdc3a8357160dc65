"""
ConfStore - An in-memory configuration store with hierarchical keys.

This module provides a settings tree addressed by dot-delimited keys, with
fallback defaults, enable/disable flags, deep merging and a loader that reads
a directory of YAML/JSON files.

Key Components:
- Store: The settings tree and its operations
- Loader: Builds a Store from the files of a directory
- CLI: Command-line interface for inspecting configuration directories

Usage Examples:
    # Working with a store
    from ConfStore import Store
    store = Store({"database": {"type": "sqlite"}})
    store.set("database.port", 5432)
    store.enable("cache")

    # Loading a directory of config files
    from ConfStore import Loader
    store = Loader().load("config")

    # Setting the log level
    from ConfStore import set_log_level
    set_log_level('debug')
"""

__version__ = '1.0.0'

from ConfStore.utils.logging import get_logger, set_log_level, configure_logging
from ConfStore.exceptions import (
    ConfStoreError,
    InvalidArgumentError,
    InvalidKeyError,
    LoaderError,
    StoreError,
)
from ConfStore.store import Store
from ConfStore.loader import Loader, load_config

__all__ = [
    'Store',
    'Loader',
    'load_config',
    'ConfStoreError',
    'StoreError',
    'InvalidKeyError',
    'InvalidArgumentError',
    'LoaderError',
    'configure_logging',
    'get_logger',
    'set_log_level',
]
