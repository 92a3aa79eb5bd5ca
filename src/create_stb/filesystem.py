"""
create_stb.filesystem - Directory Materialization
=================================================

Helpers that create the project directory, mirror a template tree into it
and remove the temporary workspace afterwards.

Only plain files and directories are reproduced. Symbolic links are followed
like regular entries, and permission bits and timestamps are not copied.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
import time
from pathlib import Path

from create_stb.errors import DirectoryNotEmptyError


logger = logging.getLogger(__name__)


def create_project_directory(path: Path) -> None:
    """
    Create the project directory, or accept it if it is empty.

    Parameters
    ----------
    path : Path
        Directory to create. Missing parents are created too.

    Raises
    ------
    DirectoryNotEmptyError
        If ``path`` exists and has content (or is not a directory).

    Notes
    -----
    The existence check and the creation are not atomic.
    """
    if path.exists():
        if path.is_dir() and not any(path.iterdir()):
            logger.debug("Reusing empty directory %s", path)
            return
        raise DirectoryNotEmptyError(
            f'Directory "{path}" exists and is not empty.',
            hint="Choose another project name or remove the directory.",
        )

    path.mkdir(parents=True)
    logger.debug("Created %s", path)


def copy_tree(src: Path, dest: Path) -> list[Path]:
    """
    Recursively copy every entry of ``src`` into ``dest``.

    Hidden entries are included and ``src`` is left untouched.

    Returns
    -------
    list[Path]
        Destination paths of all files written.
    """
    copied: list[Path] = []
    dest.mkdir(parents=True, exist_ok=True)

    for entry in sorted(src.iterdir()):
        target = dest / entry.name
        if entry.is_dir():
            copied.extend(copy_tree(entry, target))
        else:
            shutil.copyfile(entry, target)
            copied.append(target)

    return copied


def cleanup_temp(path: Path) -> None:
    """Remove ``path`` recursively. Does nothing if it does not exist."""
    if not path.exists():
        return
    shutil.rmtree(path)
    logger.debug("Removed %s", path)


def make_temp_workspace(prefix: str = "create-stb") -> Path:
    """
    Create a run-unique temporary directory.

    The name carries a millisecond timestamp and a random suffix, so two
    concurrent runs never share a workspace.
    """
    stamp = int(time.time() * 1000)
    workspace = Path(tempfile.mkdtemp(prefix=f"{prefix}-{stamp}-"))
    logger.debug("Temporary workspace %s", workspace)
    return workspace
