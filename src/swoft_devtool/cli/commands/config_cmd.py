"""Show the effective global configuration."""

import click

from swoft_devtool.cli.output import machine_output, user_output
from swoft_devtool.core.context import DevtoolContext


@click.command("config")
@click.pass_obj
def config_cmd(ctx: DevtoolContext) -> None:
    """Print the config file location and effective settings."""
    store = ctx.config_store
    suffix = "" if store.exists() else " (not found, using defaults)"
    user_output(click.style("Global configuration:", bold=True) + f" {store.path()}{suffix}")

    config = ctx.global_config
    machine_output(f"  cache_root={config.cache_root}")
    machine_output(f"  installer={config.installer}")
