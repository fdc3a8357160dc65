"""
Utility functions for the ConfStore package.

This module provides output helpers shared by the command-line interface.
"""

import json
from typing import Any

import click
import yaml

from ConfStore.utils.logging import get_logger

logger = get_logger(__name__)


def format_json(data: Any, indent: int = 2, sort_keys: bool = False) -> str:
    """
    Format data as JSON string with proper encoding.

    Args:
        data: The data to format as JSON
        indent: Number of spaces for indentation (default: 2)
        sort_keys: Whether to sort dictionary keys (default: False)

    Returns:
        A formatted JSON string

    Example:
        >>> print(format_json({'database': {'port': 5432}}))
        {
          "database": {
            "port": 5432
          }
        }
    """
    return json.dumps(
        data,
        indent=indent,
        ensure_ascii=False,
        sort_keys=sort_keys,
        default=str  # Handle non-serializable types such as YAML dates
    )


def format_yaml(data: Any) -> str:
    """Format data as block-style YAML."""
    return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True)


def echo_data(data: Any, format_type: str = 'yaml') -> None:
    """
    Print settings data to stdout in the requested format.

    Args:
        data: The settings value or tree to print
        format_type: 'yaml' or 'json'
    """
    if format_type.lower() == 'json':
        click.echo(format_json(data))
    else:
        click.echo(format_yaml(data), nl=False)
