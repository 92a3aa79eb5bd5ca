"""
create_stb.acquirer - Template Acquisition
==========================================

Two independent strategies produce the template tree:

- :func:`acquire_bundled` returns the tree shipped inside this package.
  It is the default and needs neither git nor the network.
- :func:`acquire_remote` performs a shallow, blob-filtered, sparse clone of
  the template repository into a temporary workspace and returns the
  template subdirectory.

The orchestrator selects one of them from ``ScaffoldConfig.source``; a
failure of one never falls back to the other.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from create_stb.errors import AcquisitionError
from create_stb.models import DEFAULT_CLONE_TIMEOUT, DEFAULT_TEMPLATE_SUBDIR
from create_stb.sanitize import (
    sanitize_path,
    sanitize_relative_path,
    sanitize_repo_url,
)


logger = logging.getLogger(__name__)

BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "templates" / "serverless"

CLONE_DIRNAME = "repo"


# =============================================================================
# Bundled Template
# =============================================================================


def acquire_bundled(root: Path = BUNDLED_TEMPLATE_DIR) -> Path:
    """
    Return the template tree shipped with the package.

    Raises
    ------
    AcquisitionError
        If the bundled tree is missing from the installation.
    """
    if not root.is_dir():
        raise AcquisitionError(
            f"Bundled template not found at {root}",
            hint="Reinstall create-stb or use --source remote.",
        )
    return root


# =============================================================================
# Remote Template
# =============================================================================


def _run_git(args: list[str], *, cwd: Path | None, timeout: float) -> None:
    """Run one git command, translating every failure to AcquisitionError."""
    logger.debug("Running %s", args)
    try:
        subprocess.run(
            args,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise AcquisitionError(
            f"'{' '.join(args[:2])}' timed out after {timeout:g}s"
        ) from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip()
        message = f"'{' '.join(args[:2])}' failed with exit code {e.returncode}"
        if detail:
            message = f"{message}: {detail}"
        raise AcquisitionError(message) from e
    except OSError as e:
        raise AcquisitionError(f"Could not run {args[0]}: {e}") from e


def acquire_remote(
    temp_dir: Path | str,
    *,
    repo_url: str,
    subdirectory: str = DEFAULT_TEMPLATE_SUBDIR,
    timeout: float = DEFAULT_CLONE_TIMEOUT,
    git: str = "git",
) -> Path:
    """
    Sparse-clone the template repository beneath ``temp_dir``.

    Parameters
    ----------
    temp_dir : Path | str
        Temporary workspace owned by the current run. It is sanitized
        before use, as is the clone destination derived from it.

    repo_url : str
        Repository to clone. Must not look like a git option.

    subdirectory : str
        The only directory checked out from the repository. Must be a
        relative path inside the repository.

    timeout : float
        Upper bound in seconds for each git invocation.

    git : str
        Git executable.

    Returns
    -------
    Path
        Path of ``subdirectory`` inside the clone.

    Raises
    ------
    InvalidPathError
        If ``temp_dir``, ``repo_url`` or ``subdirectory`` fails
        sanitization. git is not run in that case.
    AcquisitionError
        If clone or sparse-checkout fails, times out, or the subdirectory
        is absent afterwards.
    """
    workspace = sanitize_path(temp_dir)
    clone_dir = sanitize_path(workspace / CLONE_DIRNAME)
    repo_url = sanitize_repo_url(repo_url)
    subdirectory = sanitize_relative_path(subdirectory)

    _run_git(
        [
            git, "clone",
            "--depth", "1",
            "--filter=blob:none",
            "--sparse",
            "--",
            repo_url,
            str(clone_dir),
        ],
        cwd=None,
        timeout=timeout,
    )
    _run_git(
        [git, "sparse-checkout", "set", "--", subdirectory],
        cwd=clone_dir,
        timeout=timeout,
    )

    template_dir = clone_dir / subdirectory
    if not template_dir.is_dir():
        raise AcquisitionError(
            f"Template directory '{subdirectory}' not found in {repo_url}"
        )
    return template_dir
