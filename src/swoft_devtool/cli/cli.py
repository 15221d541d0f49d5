import logging
import os

import click

from swoft_devtool.cli.commands.config_cmd import config_cmd
from swoft_devtool.cli.commands.new_cmd import new_cmd
from swoft_devtool.cli.commands.types_cmd import types_cmd
from swoft_devtool.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "SWOFT_DEVTOOL_DEBUG"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="swoft-devtool")
@click.option("--dry-run", is_flag=True, help="Print commands instead of running them.")
@click.option("-v", "--verbose", is_flag=True, help="Print every command before it runs.")
@click.option("-q", "--quiet", is_flag=True, help="Only print errors.")
@click.pass_context
def cli(ctx: click.Context, dry_run: bool, verbose: bool, quiet: bool) -> None:
    """Create new swoft projects from cached demo templates."""
    # Enable debug logging if SWOFT_DEVTOOL_DEBUG environment variable is set
    if os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run, verbose=verbose, quiet=quiet)


cli.add_command(new_cmd)
cli.add_command(types_cmd)
cli.add_command(config_cmd)


def main() -> None:
    """CLI entry point used by the `swoft-devtool` console script."""
    cli()
