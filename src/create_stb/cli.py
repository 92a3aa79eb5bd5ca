"""
create_stb.cli - Command Line Interface
=======================================

Typer entry point for ``create-stb``. The command takes one positional
argument, the project name, and a handful of options that map onto
:class:`~create_stb.models.ScaffoldConfig`.

This command is the error boundary of the application: any failure of the
pipeline is printed to stderr behind a failure marker and turned into a
non-zero exit code. Stack traces are never shown in normal use; pass
``--debug`` to get diagnostic logging.

Usage Examples
--------------
    $ create-stb my-service
    $ create-stb my-service --source remote
    $ create-stb my-service --skip-install --output ~/code

See Also
--------
- generator.py: The scaffolding pipeline
- models.py: Configuration model
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from create_stb import __version__
from create_stb.errors import ScaffoldError
from create_stb.generator import create_project
from create_stb.models import (
    DEFAULT_CLONE_TIMEOUT,
    DEFAULT_TEMPLATE_SUBDIR,
    ScaffoldConfig,
    TemplateSource,
)


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="create-stb",
    help="Create a new serverless TypeScript project from the stb boilerplate.",
    rich_markup_mode="rich",
    add_completion=False,
)

# Progress and banner go to stdout, failures to stderr
console = Console()
err_console = Console(stderr=True)

USAGE = "Usage: create-stb <project-name> [OPTIONS]"

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

SOURCE_HELP = "Template source: " + "; ".join(
    f"{s.value} = {s.description}" for s in TemplateSource
)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        console.print(f"create-stb {__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        level=logging.WARNING,
    )
    if debug:
        logging.getLogger("create_stb").setLevel(logging.DEBUG)


def _fail(message: str, hint: str | None = None) -> typer.Exit:
    """Report a failure on stderr and return the Exit to raise."""
    err_console.print(f"[bold red]✖ Error:[/] {escape(message)}", soft_wrap=True)
    if hint:
        err_console.print(f"[yellow]Hint:[/] {escape(hint)}", soft_wrap=True)
    return typer.Exit(EXIT_FAILURE)


# =============================================================================
# Main Command
# =============================================================================

@app.command()
def main(
    name: Annotated[
        str | None,
        typer.Argument(
            help="Name of the project directory to create",
            show_default=False,
        ),
    ] = None,
    source: Annotated[
        TemplateSource,
        typer.Option(
            "--source",
            "-s",
            help=SOURCE_HELP,
            case_sensitive=False,
            envvar="CREATE_STB_SOURCE",
        ),
    ] = TemplateSource.BUNDLED,
    repo_url: Annotated[
        str | None,
        typer.Option(
            "--repo-url",
            help="Repository cloned by the remote source (required with --source remote)",
            envvar="CREATE_STB_REPO_URL",
        ),
    ] = None,
    subdir: Annotated[
        str,
        typer.Option(
            "--subdir",
            help="Repository subdirectory holding the template",
        ),
    ] = DEFAULT_TEMPLATE_SUBDIR,
    timeout: Annotated[
        float,
        typer.Option(
            "--timeout",
            help="Seconds allowed for each git command of the remote source",
        ),
    ] = DEFAULT_CLONE_TIMEOUT,
    package_manager: Annotated[
        str,
        typer.Option(
            "--package-manager",
            help="Package manager used to install dependencies",
            envvar="CREATE_STB_PACKAGE_MANAGER",
        ),
    ] = "npm",
    skip_install: Annotated[
        bool,
        typer.Option(
            "--skip-install",
            help="Do not install dependencies",
        ),
    ] = False,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Directory to create the project in (default: current directory)",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Log diagnostic messages to stderr",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Create a new project in [cyan]./NAME[/] from the serverless boilerplate.

    Checks that Node.js 20+ is installed, copies the boilerplate, sets the
    project name in [cyan]package.json[/] and [cyan]serverless.yml[/], and
    runs [cyan]npm install[/].
    """
    if name is None or not name.strip():
        err_console.print("Please provide a project name.")
        err_console.print(USAGE, markup=False)
        raise typer.Exit(EXIT_FAILURE)

    _configure_logging(debug)

    try:
        config = ScaffoldConfig(
            name=name,
            output_dir=output_dir or Path.cwd(),
            source=source,
            repo_url=repo_url,
            template_subdir=subdir,
            clone_timeout=timeout,
            package_manager=package_manager,
            install=not skip_install,
        )
    except ValidationError as e:
        details = "; ".join(err["msg"].removeprefix("Value error, ") for err in e.errors())
        raise _fail(f"Invalid configuration: {details}") from None

    try:
        create_project(config, out=console)
    except ScaffoldError as e:
        raise _fail(str(e), e.hint) from None
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted.[/]")
        raise typer.Exit(EXIT_INTERRUPTED) from None
    except Exception as e:  # noqa: BLE001
        raise _fail(str(e)) from None
