"""
ConfStore file loader.

Reads a directory of YAML/JSON files into a Store, one top-level key per file.
"""

from ConfStore.loader.loader import Loader, load_config

__all__ = ["Loader", "load_config"]
