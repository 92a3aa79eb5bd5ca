"""
create_stb.sanitize - Path Validation for Subprocess Arguments
==============================================================

Paths and URLs that come from the user or the environment end up as
arguments to ``git``. Before that happens they go through one of the
functions below, which reject values that could be read as a command-line
flag. :func:`sanitize_path` also rejects shell metacharacters and returns an
absolute, normalized path; :func:`sanitize_relative_path` does the same for
a path inside a repository checkout.

All subprocess calls in this package use argument vectors, never shell
strings; the sanitizer is an additional guard, not a replacement for that.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath

from create_stb.errors import InvalidPathError


# Characters that must never appear in a path handed to a subprocess
FORBIDDEN_CHARACTERS = frozenset("`$|;&<>\0")


def _check(text: str) -> None:
    """Apply the rejection rules shared by every sanitizer."""
    if not text:
        raise InvalidPathError("Path must not be empty.")

    if text.startswith("-"):
        raise InvalidPathError(
            f"Invalid path {text!r}: paths must not start with '-'."
        )

    found = sorted(set(text) & FORBIDDEN_CHARACTERS)
    if found:
        shown = " ".join(repr(c) for c in found)
        raise InvalidPathError(
            f"Invalid path {text!r}: contains forbidden characters {shown}."
        )


def sanitize_path(value: str | os.PathLike[str]) -> Path:
    """
    Validate a path and return its absolute, normalized form.

    Parameters
    ----------
    value : str | os.PathLike[str]
        The path to check. Surrounding whitespace is ignored.

    Returns
    -------
    Path
        ``value`` resolved against the current working directory with
        ``.`` and ``..`` segments collapsed. Symbolic links are not
        followed.

    Raises
    ------
    InvalidPathError
        If the trimmed value is empty, starts with a hyphen, or contains
        one of `` ` $ | ; & < > `` or a NUL byte.

    Examples
    --------
    >>> sanitize_path("/tmp/a/../b")
    PosixPath('/tmp/b')
    """
    text = os.fspath(value).strip()
    _check(text)
    return Path(os.path.normpath(os.path.abspath(text)))


def sanitize_relative_path(value: str) -> str:
    """
    Validate a path that names a directory inside a repository checkout.

    The same rules as :func:`sanitize_path` apply. In addition the path must
    be relative and must not climb out of the checkout with ``..``. The
    result is returned in POSIX form, as git expects it.

    >>> sanitize_relative_path("templates/serverless/")
    'templates/serverless'
    """
    text = value.strip()
    _check(text)

    path = PurePosixPath(text.replace("\\", "/"))
    if path.is_absolute() or os.path.isabs(text) or ".." in path.parts:
        raise InvalidPathError(
            f"Invalid path {text!r}: must be relative to the repository root."
        )
    return path.as_posix()


def sanitize_repo_url(value: str) -> str:
    """
    Validate a repository URL before it is handed to ``git clone``.

    URLs are not filesystem paths, so only the checks that stop a value
    from being read as a git option apply.
    """
    text = value.strip()
    if not text:
        raise InvalidPathError("Repository URL must not be empty.")
    if text.startswith("-") or "\0" in text:
        raise InvalidPathError(
            f"Invalid repository URL {text!r}: must not start with '-'."
        )
    return text
