# keel CLI — main entry point
"""keel CLI — associate a directory with an application and inspect its workspace."""

from __future__ import annotations

import logging
from functools import wraps
from pathlib import Path
from typing import Any, Callable

import click

from ..common import console, die, init_logging, print_detail, print_info, print_success
from ..config import settings
from ..errors import (
    AlreadyAssociatedError,
    DockerfileNotFoundError,
    FileAlreadyExistsError,
    NotAssociatedError,
    RootNotFoundError,
    WorkspaceError,
)

logger = logging.getLogger(__name__)

# Exit code 2 is click's usage error.
EXIT_CODES: dict[type[WorkspaceError], int] = {
    RootNotFoundError: 3,
    NotAssociatedError: 4,
    AlreadyAssociatedError: 5,
    FileAlreadyExistsError: 6,
    DockerfileNotFoundError: 7,
}


def exit_code_for(error: Exception) -> int:
    for exc_type, code in EXIT_CODES.items():
        if isinstance(error, exc_type):
            return code
    return 1


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn workspace errors into a red message and a distinct exit code."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (WorkspaceError, OSError) as e:
            logger.error("%s failed: %s", func.__name__, e)
            die(str(e), exit_code_for(e))

    return wrapper


def _workspace(ctx: click.Context):
    from ..services.workspace import Workspace

    return Workspace(ctx.obj["working_dir"])


@click.group()
@click.version_option(version=settings.app_version, prog_name="keel")
@click.option(
    "--dir",
    "working_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Run as if invoked from this directory.",
)
@click.option("--log-dir", type=click.Path(file_okay=False, path_type=Path), default=None)
@click.pass_context
def cli(ctx: click.Context, working_dir: Path | None, log_dir: Path | None) -> None:
    """keel — workspace manifests for your application."""
    ctx.ensure_object(dict)
    ctx.obj["working_dir"] = (working_dir or Path.cwd()).absolute()
    init_logging(log_dir=log_dir)


@cli.command()
@click.argument("application")
@click.pass_context
@handle_errors
def init(ctx: click.Context, application: str) -> None:
    """Associate the workspace with APPLICATION."""
    ws = _workspace(ctx)
    ws.create(application)
    print_success(f"Workspace {ws.root} belongs to application {application}")


@cli.command()
@click.pass_context
@handle_errors
def show(ctx: click.Context) -> None:
    """Show the workspace directory and its application."""
    ws = _workspace(ctx)
    summary = ws.summary()
    console.print(f"[bold blue]Application[/] {summary.application}")
    print_detail(f"Workspace: {ws.root}")
    if not ws.is_in_git_repository():
        print_info("This directory is not the top of a git repository.")


@cli.command()
@click.pass_context
@handle_errors
def deinit(ctx: click.Context) -> None:
    """Remove the workspace's application association."""
    ws = _workspace(ctx)
    ws.summaries.delete()
    print_success("Removed the workspace summary")


# ---------------------------------------------------------------------------
# Workload commands
# ---------------------------------------------------------------------------


def _print_names(names: list[str], kind: str) -> None:
    if not names:
        console.print(f"[dim]No {kind} found in this workspace.[/dim]")
        return
    for name in names:
        click.echo(name)


@cli.group()
def svc():
    """Inspect services."""
    pass


@svc.command("ls")
@click.pass_context
@handle_errors
def svc_ls(ctx: click.Context) -> None:
    """List services in the workspace."""
    _print_names(_workspace(ctx).manifests.service_names(), "services")


@cli.group()
def job():
    """Inspect jobs."""
    pass


@job.command("ls")
@click.pass_context
@handle_errors
def job_ls(ctx: click.Context) -> None:
    """List jobs in the workspace."""
    _print_names(_workspace(ctx).manifests.job_names(), "jobs")


@cli.group()
def manifest():
    """Inspect workload manifests."""
    pass


@manifest.command("show")
@click.argument("name")
@click.pass_context
@handle_errors
def manifest_show(ctx: click.Context, name: str) -> None:
    """Print the manifest of workload NAME."""
    data = _workspace(ctx).manifests.read_manifest(name)
    click.echo(data.decode("utf-8"), nl=False)


@cli.group()
def addons():
    """Inspect workload addons."""
    pass


@addons.command("ls")
@click.argument("workload")
@click.pass_context
@handle_errors
def addons_ls(ctx: click.Context, workload: str) -> None:
    """List addon files of WORKLOAD."""
    _print_names(_workspace(ctx).addons.list_addon_names(workload), "addons")


# ---------------------------------------------------------------------------
# Build inputs
# ---------------------------------------------------------------------------


@cli.command()
@click.pass_context
@handle_errors
def dockerfiles(ctx: click.Context) -> None:
    """List Dockerfiles in the current directory and one level below."""
    for path in _workspace(ctx).dockerfiles.discover():
        click.echo(path)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
