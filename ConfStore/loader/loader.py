"""
Configuration file loader for ConfStore.

This module implements the Loader class, which reads every configuration
file at the top level of a directory and builds a Store whose top-level keys
are derived from the file names.
"""

import json
import re
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml

from ConfStore.exceptions import LoaderError
from ConfStore.loader.defaults import DEFAULT_FILTER, SUPPORTED_EXTENSIONS
from ConfStore.store import Store
from ConfStore.utils.logging import get_logger

logger = get_logger(__name__)

FileFilter = Union[str, re.Pattern, Callable[[str], Optional[str]]]


class Loader:
    """
    The config files loader.

    Each YAML or JSON file of a directory becomes one top-level section of
    the resulting store, e.g. ``database.yml`` is available under the
    ``database`` key. Subdirectories are not visited.

    Attributes:
        _filter: Regular expression or callable selecting files and naming their key
        _mapper: Optional callable renaming keys, called as ``mapper(name, path)``
        _resolve: Optional callable transforming each parsed file content
    """

    def __init__(self,
                 file_filter: Optional[FileFilter] = None,
                 mapper: Optional[Callable[[str, str], str]] = None,
                 resolve: Optional[Callable[[Any], Any]] = None) -> None:
        """
        Initialize a new config loader.

        Args:
            file_filter: A regular expression (string or compiled) searched for
                anywhere in each file name. The key is its first group, or the
                whole match when the pattern has no group or the group is empty.
                Alternatively a callable returning the key, or a falsy value to
                skip the file.
                Defaults to visible ``.yaml``, ``.yml`` and ``.json`` files.
            mapper: Callable receiving the key and the file path and returning
                the key to use.
            resolve: Callable receiving the parsed content of a file and
                returning the value to store.
        """
        if file_filter is None:
            file_filter = DEFAULT_FILTER
        elif isinstance(file_filter, str):
            file_filter = re.compile(file_filter)

        self._filter = file_filter
        self._mapper = mapper
        self._resolve = resolve

    def load(self, dirname: Union[str, Path]) -> Store:
        """
        Load config files from a directory.

        Args:
            dirname: The config directory

        Returns:
            Store: A store holding one section per loaded file

        Raises:
            LoaderError: If the directory does not exist or a file cannot be parsed

        Examples:
            >>> store = Loader().load("config")
            >>> store.get("database.type", "sqlite")
        """
        return Store(self._load_files(Path(dirname)))

    def _load_files(self, path: Path) -> Dict[str, Any]:
        """
        Read and parse every selected file of ``path``.

        Files are visited in name order, so when two files map to the same
        key the last one wins.
        """
        if not path.is_dir():
            raise LoaderError(
                f"Configuration directory not found: {path}",
                context={"dirname": str(path)}
            )

        settings: Dict[str, Any] = {}

        for file_path in sorted(path.iterdir()):
            if not file_path.is_file():
                continue

            key = self._key_for(file_path)
            if not key:
                logger.debug(f"Skipping {file_path.name}")
                continue

            content = self._parse_file(file_path)
            if self._resolve is not None:
                content = self._resolve(content)

            logger.debug(f"Loaded {file_path.name} as '{key}'")
            settings[key] = content

        logger.info(f"Loaded {len(settings)} configuration files from {path}")
        return settings

    def _key_for(self, file_path: Path) -> Optional[str]:
        """Return the settings key for ``file_path``, or None to skip it."""
        if callable(self._filter):
            key = self._filter(file_path.name)
        else:
            match = self._filter.search(file_path.name)
            if not match:
                return None
            # An unmatched or empty first group falls back to the whole match
            key = (match.group(1) if self._filter.groups else None) or match.group(0)

        if key and self._mapper is not None:
            key = self._mapper(key, str(file_path))

        return key

    def _parse_file(self, file_path: Path) -> Any:
        """
        Parse a YAML or JSON file according to its extension.

        Raises:
            LoaderError: If the format is unsupported or the content is invalid
        """
        file_format = SUPPORTED_EXTENSIONS.get(file_path.suffix.lower())

        if file_format is None:
            raise LoaderError(
                f"Unsupported configuration file format: {file_path.name}",
                context={"path": str(file_path)}
            )

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                if file_format == 'yaml':
                    return yaml.safe_load(f)
                return json.load(f)
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.error(f"Failed to load configuration file {file_path}: {e}")
            raise LoaderError(
                f"Failed to load configuration file {file_path}: {e}",
                context={"path": str(file_path)},
                cause=e
            ) from e


def load_config(dirname: Union[str, Path], **options: Any) -> Store:
    """
    Load a directory of config files into a new store.

    Args:
        dirname: The config directory
        **options: Loader options (``file_filter``, ``mapper``, ``resolve``)

    Returns:
        Store: The loaded store
    """
    return Loader(**options).load(dirname)
