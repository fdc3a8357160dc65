"""
Configuration-related commands for the ConfStore CLI.

This module provides the implementation of the commands for inspecting a
directory of configuration files: showing the merged tree, reading a single
setting and checking enable flags.
"""

from typing import Any, Optional

import click

from ConfStore.exceptions import ConfStoreError
from ConfStore.loader import Loader
from ConfStore.utils import echo_data, format_json
from ConfStore.utils.logging import get_logger

logger = get_logger(__name__)


def _report_error(error: ConfStoreError) -> int:
    logger.error(f"{error.error_code}: {error.message}")
    click.echo(f"Error: {error.user_message}", err=True)
    return 1


def config_show(dirname: str, format_type: str = 'yaml', section: Optional[str] = None) -> int:
    """
    Display the configuration loaded from a directory.

    Args:
        dirname: The config directory
        format_type: Output format (yaml or json)
        section: Optional key of a section to display (e.g., 'database')

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        store = Loader().load(dirname)

        if section:
            if not store.has(section):
                click.echo(f"Error: Section '{section}' not found in configuration", err=True)
                return 1
            config_data = store.get_all()
            for part in section.split('.'):
                config_data = config_data[part]
        else:
            config_data = store.get_all()

        echo_data(config_data, format_type)
        return 0

    except ConfStoreError as e:
        return _report_error(e)


def config_get(dirname: str, key: str, default: Optional[Any] = None) -> int:
    """
    Print a single setting as JSON.

    Args:
        dirname: The config directory
        key: Hierarchical key using dot notation
        default: Value printed when the setting is missing or falsy

    Returns:
        Exit code (0 when a value was printed, 1 otherwise)
    """
    try:
        value = Loader().load(dirname).get(key, default)
    except ConfStoreError as e:
        return _report_error(e)

    if value is None:
        click.echo(f"Error: Setting '{key}' not found in configuration", err=True)
        return 1

    click.echo(format_json(value))
    return 0


def config_enabled(dirname: str, key: str) -> int:
    """
    Print whether a setting is enabled.

    Args:
        dirname: The config directory
        key: Hierarchical key using dot notation

    Returns:
        Exit code (0 when enabled, 1 when disabled or on error)
    """
    try:
        enabled = Loader().load(dirname).enabled(key)
    except ConfStoreError as e:
        return _report_error(e)

    click.echo('true' if enabled else 'false')
    return 0 if enabled else 1
