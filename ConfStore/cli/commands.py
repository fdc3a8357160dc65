"""
Command-line interface (CLI) commands for the ConfStore package.

This module wires the configuration commands into a click command group.
"""

import sys

import click

from ConfStore.cli.config_commands import config_enabled, config_get, config_show
from ConfStore.utils.logging import get_logger, set_log_level

# Get a logger for this module
logger = get_logger(__name__)


# Apply the log level if specified in the command options
def apply_log_level(ctx, param, value):
    if value:
        set_log_level(value)
    return value


# Add an option for setting the log level to all commands
def log_level_option(f):
    return click.option('--log-level',
                        type=click.Choice(['debug', 'info', 'warning', 'error', 'critical'], case_sensitive=False),
                        callback=apply_log_level, expose_value=False, is_eager=True,
                        help='Set the logging level')(f)


def dirname_argument(f):
    return click.argument('dirname', type=click.Path(file_okay=False))(f)


@click.group()
@click.pass_context
def cli(ctx):
    """ConfStore CLI for inspecting directories of configuration files."""
    logger.debug(f"Running command: {ctx.invoked_subcommand}")


@cli.command('show')
@dirname_argument
@click.option('--format', 'format_type', type=click.Choice(['yaml', 'json'], case_sensitive=False),
              default='yaml', help='Output format (yaml or json)')
@click.option('--section', help='Show only a specific configuration section')
@log_level_option
@click.pass_context
def show_command(ctx, dirname, format_type, section):
    """Display the configuration loaded from DIRNAME."""
    ctx.exit(config_show(dirname, format_type, section))


@cli.command('get')
@dirname_argument
@click.argument('key')
@click.option('--default', help='Value to print when the setting is missing')
@log_level_option
@click.pass_context
def get_command(ctx, dirname, key, default):
    """Print the value of KEY as JSON."""
    ctx.exit(config_get(dirname, key, default))


@cli.command('enabled')
@dirname_argument
@click.argument('key')
@log_level_option
@click.pass_context
def enabled_command(ctx, dirname, key):
    """Check whether KEY is enabled (exit status 0 when enabled)."""
    ctx.exit(config_enabled(dirname, key))


def main():
    """Main entry point for the ConfStore command-line interface."""
    return cli()


if __name__ == '__main__':
    sys.exit(main())
