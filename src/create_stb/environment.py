"""
create_stb.environment - Host Prerequisite Checks
=================================================

The generated project is a Node.js application, so before anything touches
the filesystem we make sure a recent enough ``node`` is on the PATH and,
for the remote template source, that ``git`` is available.

Both checks run the executable with ``--version`` through an argument
vector and never through a shell.
"""

from __future__ import annotations

import logging
import re
import subprocess

from create_stb.errors import MissingDependencyError, UnsupportedRuntimeError


logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^v?(\d+)(?:\.\d+)*")


def detect_runtime_version(executable: str = "node") -> str:
    """
    Return the version string reported by ``<executable> --version``.

    Raises
    ------
    MissingDependencyError
        If the executable cannot be started or exits with an error.
    """
    try:
        result = subprocess.run(
            [executable, "--version"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, OSError) as e:
        raise MissingDependencyError(
            f"{executable} is not installed",
            hint="Install Node.js from https://nodejs.org/",
        ) from e

    version = result.stdout.strip()
    logger.debug("%s --version -> %s", executable, version)
    return version


def parse_major_version(version: str) -> int:
    """
    Extract the major component of a version string.

    >>> parse_major_version("v20.11.1")
    20
    """
    match = _VERSION_RE.match(version.strip())
    if match is None:
        raise UnsupportedRuntimeError(
            f"Could not determine the Node.js version from {version!r}"
        )
    return int(match.group(1))


def check_runtime_version(min_major: int = 20, *, executable: str = "node") -> int:
    """
    Ensure the host Node.js major version is at least ``min_major``.

    Parameters
    ----------
    min_major : int, default=20
        Oldest accepted major version.

    executable : str, default="node"
        Runtime executable to query.

    Returns
    -------
    int
        The detected major version.

    Raises
    ------
    UnsupportedRuntimeError
        If the detected major version is lower than ``min_major``.
    MissingDependencyError
        If the runtime is not installed.
    """
    version = detect_runtime_version(executable)
    major = parse_major_version(version)
    if major < min_major:
        raise UnsupportedRuntimeError(
            f"Node.js v{min_major}+ required (found {version})"
        )
    return major


def check_version_control_installed(executable: str = "git") -> None:
    """
    Ensure the version-control executable can be run.

    Raises
    ------
    MissingDependencyError
        If ``<executable> --version`` cannot be started or exits with an
        error.
    """
    try:
        subprocess.run(
            [executable, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (subprocess.CalledProcessError, OSError) as e:
        raise MissingDependencyError(f"{executable} is not installed") from e
