"""List the registered template types."""

import click
from rich.console import Console
from rich.table import Table

from swoft_devtool.core.templates import DEMO_GITHUB_REPOS, repo_url_for_type


@click.command("types")
def types_cmd() -> None:
    """List template types accepted by `new --type`."""
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("type", style="cyan", no_wrap=True)
    table.add_column("repository", no_wrap=True)
    table.add_column("url")

    for type_name, repo_name in DEMO_GITHUB_REPOS.items():
        table.add_row(type_name, repo_name, repo_url_for_type(type_name))

    console = Console(stderr=True, width=200)
    console.print(table)
