"""Create a new project from a template type or repository reference."""

import logging
from dataclasses import replace
from pathlib import Path

import click

from swoft_devtool.cli.ensure import Ensure
from swoft_devtool.cli.output import user_output
from swoft_devtool.core.context import DevtoolContext
from swoft_devtool.core.creation import CreationRequest
from swoft_devtool.core.project_creator import ProjectCreator
from swoft_devtool.core.templates import allowed_types

logger = logging.getLogger(__name__)


def render_info(info: dict[str, str]) -> None:
    """Print the creation summary, one ``key: value`` pair per line."""
    width = max((len(key) for key in info), default=0)
    for key, value in info.items():
        user_output(f"  {click.style(key.ljust(width), bold=True)}  {value}")


@click.command("new")
@click.argument("name")
@click.option(
    "-t",
    "--type",
    "type_",
    default="",
    help=f"Template type to create from ({', '.join(allowed_types())}).",
)
@click.option(
    "-r",
    "--repo",
    default="",
    help="Repository to create from: full URL, git@ reference or owner/name.",
)
@click.option(
    "-d",
    "--work-dir",
    default="",
    help="Parent directory of the new project (default: current directory).",
)
@click.option("--refresh", is_flag=True, help="Re-fetch the cached template before copying.")
@click.option(
    "--install/--no-install",
    default=True,
    show_default=True,
    help="Run the dependency installer in the new project.",
)
@click.option("--no-dev", is_flag=True, help="Skip development-only dependencies on install.")
@click.option(
    "--cache-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Template cache directory (overrides config).",
)
@click.pass_obj
def new_cmd(
    ctx: DevtoolContext,
    name: str,
    type_: str,
    repo: str,
    work_dir: str,
    refresh: bool,
    install: bool,
    no_dev: bool,
    cache_root: Path | None,
) -> None:
    """Create project NAME from a cached upstream template.

    \b
    Examples:
      swoft-devtool new demo --type http
      swoft-devtool new demo --repo swoft-cloud/swoft-rpc-project -d ~/work
      swoft-devtool new demo --repo git@github.com:me/app.git --no-install
    """
    config = ctx.global_config
    if cache_root is not None:
        config = replace(config, cache_root=cache_root)

    request = CreationRequest.build(
        name, repo=repo, type=type_, work_dir=work_dir, refresh=refresh
    )
    creator = ProjectCreator(
        request,
        runner=ctx.runner,
        feedback=ctx.feedback,
        cache_root=config.cache_root,
        installer=config.installer,
    )

    if ctx.dry_run:
        dry_run_header = click.style("Dry-run mode:", fg="cyan", bold=True)
        user_output(dry_run_header + " No changes will be made\n")

    creator.validate()
    logger.debug("Creation info: %s", creator.info())
    Ensure.no_creation_error(creator.error)

    user_output(click.style("Project info:", bold=True))
    render_info(creator.info())
    user_output()

    creator.create()
    Ensure.no_creation_error(creator.error)

    if install:
        creator.install(no_dev=no_dev)
        Ensure.no_creation_error(creator.error)
