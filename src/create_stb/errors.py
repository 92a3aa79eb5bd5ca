"""
create_stb.errors - Exception Hierarchy
=======================================

Every failure that create-stb reports to the user is a subclass of
:class:`ScaffoldError`. The CLI command is the only place that turns these
into exit codes; everything below it simply raises.

Hierarchy
---------
ScaffoldError
├── InvalidPathError
├── UnsupportedRuntimeError
├── MissingDependencyError
├── DirectoryNotEmptyError
├── AcquisitionError
└── InstallError

Errors raised while parsing the template's metadata files (for example
``json.JSONDecodeError``) are deliberately not wrapped.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """
    Base class for all create-stb errors.

    Parameters
    ----------
    message : str
        Human-readable description shown after the failure marker.

    hint : str | None
        Optional actionable guidance printed below the message.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidPathError(ScaffoldError):
    """Raised when a path fails sanitization."""


class UnsupportedRuntimeError(ScaffoldError):
    """Raised when the host Node.js runtime is older than required."""


class MissingDependencyError(ScaffoldError):
    """Raised when a required executable is not installed."""


class DirectoryNotEmptyError(ScaffoldError):
    """Raised when the target project directory already has content."""


class AcquisitionError(ScaffoldError):
    """Raised when the template tree cannot be obtained."""


class InstallError(ScaffoldError):
    """Raised when the dependency installation exits with an error."""
