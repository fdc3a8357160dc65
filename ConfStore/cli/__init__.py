"""
Command-line interface module for the ConfStore package.

Key Components:
- main: Main entry point for the CLI
- cli: The click command group (show, get, enabled)
"""

from ConfStore.cli.commands import cli, main

__all__ = ['cli', 'main']
