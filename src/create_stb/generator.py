"""
create_stb.generator - Project Scaffolding Pipeline
===================================================

This module sequences the whole scaffolding run. Each step is fatal: the
first failure aborts the remaining steps and propagates to the caller.

Architecture
------------
The generator follows a linear pipeline:

    1. Check the Node.js version
    2. Check that git is installed (remote template only)
    3. Create the project directory
    4. Acquire the template (bundled, or cloned into a temp workspace)
    5. Copy the template into the project directory
    6. Remove the temporary workspace
    7. Rewrite package.json and serverless.yml
    8. Install dependencies with the package manager
    9. Print the next steps

The temporary workspace is removed on both the success and the failure
path. On failure, errors raised while removing it are discarded so the
original error is what the user sees.

Progress
--------
Steps 1-7 run under a transient Rich status line that is cleared when the
step finishes. The install step prints a plain heading instead, because
the package manager writes straight to the terminal.

Usage Example
-------------
>>> from create_stb.generator import create_project
>>> from create_stb.models import ScaffoldConfig
>>> result = create_project(ScaffoldConfig(name="demo"))
>>> result.project_path.name
'demo'
"""

from __future__ import annotations

import contextlib
import logging
import shutil
import subprocess
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from create_stb.acquirer import acquire_bundled, acquire_remote
from create_stb.environment import (
    check_runtime_version,
    check_version_control_installed,
)
from create_stb.errors import InstallError, MissingDependencyError
from create_stb.filesystem import (
    cleanup_temp,
    copy_tree,
    create_project_directory,
    make_temp_workspace,
)
from create_stb.metadata import (
    PACKAGE_DESCRIPTOR,
    SERVICE_DECLARATION,
    update_package_descriptor,
    update_service_declaration,
)
from create_stb.models import ScaffoldConfig


logger = logging.getLogger(__name__)

# Console for rich output
console = Console()


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class GenerationResult:
    """
    Outcome of a completed scaffolding run. Failed runs raise instead of
    returning a result.

    Attributes
    ----------
    project_path : Path
        Absolute path of the project directory.

    files_created : list[Path]
        Files copied from the template.

    metadata_updated : list[str]
        Names of the metadata files that were rewritten.

    installed : bool
        Whether the dependency installation ran.
    """

    project_path: Path
    files_created: list[Path] = field(default_factory=list)
    metadata_updated: list[str] = field(default_factory=list)
    installed: bool = False


# =============================================================================
# Helpers
# =============================================================================


@contextlib.contextmanager
def _step(out: Console, label: str, verbose: bool) -> Iterator[None]:
    """Show ``label`` on a transient status line while the step runs."""
    logger.debug("Step: %s", label)
    if not verbose:
        yield
        return
    with out.status(f"{label}..."):
        yield


def install_dependencies(
    project_dir: Path,
    package_manager: str = "npm",
    args: Sequence[str] = ("install", "--silent"),
) -> None:
    """
    Run the package manager inside the project directory.

    Output and errors of the package manager go straight to the terminal.

    Raises
    ------
    MissingDependencyError
        If ``package_manager`` is not on the PATH.
    InstallError
        If the installation exits with a non-zero status.
    """
    # which() also resolves npm.cmd on Windows
    executable = shutil.which(package_manager)
    if executable is None:
        raise MissingDependencyError(f"{package_manager} is not installed")

    command = [executable, *args]
    logger.debug("Running %s in %s", command, project_dir)
    try:
        subprocess.run(command, cwd=project_dir, check=True)
    except subprocess.CalledProcessError as e:
        shown = " ".join([package_manager, *args])
        raise InstallError(
            f"'{shown}' failed with exit code {e.returncode}",
            hint=f"Fix the problem above, then run it again inside {project_dir}.",
        ) from e


def _print_next_steps(out: Console, config: ScaffoldConfig, installed: bool) -> None:
    steps = [f"cd {escape(config.name)}"]
    if not installed:
        steps.append(escape(" ".join([config.package_manager, *config.install_args])))
    steps.append(f"{escape(config.package_manager)} run offline")

    out.print()
    out.print(
        Panel(
            "[bold green]Installation complete[/]\n\n"
            f"[dim]Location:[/] {escape(str(config.project_dir))}\n\n"
            "[bold]Next steps:[/]\n"
            + "\n".join(f"  {s}" for s in steps),
            title="[bold green]create-stb[/]",
            border_style="green",
        )
    )


# =============================================================================
# Main Generation Function
# =============================================================================


def create_project(
    config: ScaffoldConfig,
    *,
    out: Console | None = None,
    verbose: bool = True,
) -> GenerationResult:
    """
    Scaffold a new project from the given configuration.

    Parameters
    ----------
    config : ScaffoldConfig
        Complete run configuration.

    out : Console | None
        Console used for progress and the completion banner. Defaults to
        the module console.

    verbose : bool, default=True
        If False, no progress or banner is printed.

    Returns
    -------
    GenerationResult
        Summary of what was created.

    Raises
    ------
    ScaffoldError
        Any typed failure of a pipeline step.
    json.JSONDecodeError
        If the template's package.json is malformed.
    OSError
        For unexpected filesystem failures.
    """
    out = out or console
    project_dir = config.project_dir
    result = GenerationResult(project_path=project_dir)
    workspace: Path | None = None

    try:
        with _step(out, "Checking Node version", verbose):
            check_runtime_version(
                config.min_node_major,
                executable=config.runtime_executable,
            )

        if config.uses_remote_template:
            with _step(out, "Checking git", verbose):
                check_version_control_installed(config.vcs_executable)

        with _step(out, "Creating project directory", verbose):
            create_project_directory(project_dir)

        if config.uses_remote_template:
            with _step(out, "Downloading boilerplate", verbose):
                workspace = make_temp_workspace()
                template_dir = acquire_remote(
                    workspace,
                    repo_url=config.repo_url,
                    subdirectory=config.template_subdir,
                    timeout=config.clone_timeout,
                    git=config.vcs_executable,
                )
        else:
            template_dir = acquire_bundled()

        with _step(out, "Copying boilerplate files", verbose):
            result.files_created = copy_tree(template_dir, project_dir)

        if workspace is not None:
            cleanup_temp(workspace)
            workspace = None

        with _step(out, f"Updating {PACKAGE_DESCRIPTOR}", verbose):
            if update_package_descriptor(project_dir, config.name):
                result.metadata_updated.append(PACKAGE_DESCRIPTOR)

        with _step(out, f"Updating {SERVICE_DECLARATION}", verbose):
            if update_service_declaration(project_dir, config.name):
                result.metadata_updated.append(SERVICE_DECLARATION)

        if config.install:
            if verbose:
                out.print("[bold]Installing packages...[/]")
            install_dependencies(
                project_dir,
                config.package_manager,
                config.install_args,
            )
            result.installed = True

    finally:
        if workspace is not None:
            with contextlib.suppress(OSError):
                cleanup_temp(workspace)

    if verbose:
        _print_next_steps(out, config, result.installed)

    return result
