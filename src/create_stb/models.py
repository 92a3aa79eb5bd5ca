"""
create_stb.models - Pydantic Models for Scaffold Configuration
==============================================================

This module defines the configuration consumed by the scaffolding pipeline.
Every recognised knob is an explicit, validated field so that the CLI, the
Python API and the tests all build the same object.

Architecture Notes
------------------
The models are organized as:

    ScaffoldConfig (main)
    ├── name: str
    ├── output_dir: Path
    ├── source: TemplateSource (enum)
    │   ├── BUNDLED - template shipped inside the package
    │   └── REMOTE  - sparse clone of a git repository
    ├── remote settings (repo_url, template_subdir, clone_timeout)
    └── install settings (package_manager, install_args, install)

Usage Example
-------------
>>> from create_stb.models import ScaffoldConfig
>>> config = ScaffoldConfig(name="demo")
>>> config.project_dir.name
'demo'
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, field_validator, model_validator

from create_stb.errors import InvalidPathError
from create_stb.sanitize import sanitize_relative_path, sanitize_repo_url


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_TEMPLATE_SUBDIR = "serverless"
DEFAULT_CLONE_TIMEOUT = 60.0
DEFAULT_MIN_NODE_MAJOR = 20


# =============================================================================
# Enumerations
# =============================================================================

class TemplateSource(str, Enum):
    """
    Where the boilerplate tree comes from.

    Exactly one strategy is used per run; there is no fallback from one to
    the other.

    Attributes
    ----------
    BUNDLED : str
        The tree shipped inside the installed package. Works offline and
        does not need git.

    REMOTE : str
        A shallow, blob-filtered, sparse clone of ``repo_url`` restricted
        to ``template_subdir``.

    Examples
    --------
    >>> TemplateSource("remote") is TemplateSource.REMOTE
    True
    """

    BUNDLED = "bundled"
    REMOTE = "remote"

    @property
    def description(self) -> str:
        """Short human-readable description for help output."""
        descriptions = {
            TemplateSource.BUNDLED: "Template shipped with create-stb",
            TemplateSource.REMOTE: "Sparse clone of the template repository",
        }
        return descriptions[self]


# =============================================================================
# Main Configuration Model
# =============================================================================

class ScaffoldConfig(BaseModel):
    """
    Complete configuration for one scaffolding run.

    Attributes
    ----------
    name : str
        Project name. Used as the directory name and written into
        ``package.json`` and ``serverless.yml``.

    output_dir : Path
        Directory in which the project directory is created.

    source : TemplateSource
        Template acquisition strategy.

    repo_url : str | None
        Git URL cloned by the remote strategy. Required when ``source`` is
        ``remote``; there is no default repository.

    template_subdir : str
        Subdirectory of the repository holding the template.

    clone_timeout : float
        Upper bound in seconds for each git invocation of the remote
        strategy.

    min_node_major : int
        Oldest supported Node.js major version.

    package_manager : str
        Executable used to install dependencies.

    install_args : list[str]
        Arguments passed to ``package_manager``.

    install : bool
        Whether to run the dependency installation at all.

    vcs_executable : str
        Version-control executable used by the remote strategy.

    runtime_executable : str
        Executable whose ``--version`` reports the Node.js version.
    """

    name: Annotated[str, Field(
        description="Project name (directory and package name)",
        min_length=1,
    )]
    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory where the project will be created",
    )
    source: TemplateSource = Field(
        default=TemplateSource.BUNDLED,
        description="Template acquisition strategy",
    )
    repo_url: str | None = Field(
        default=None,
        description="Repository cloned by the remote strategy",
    )
    template_subdir: str = Field(
        default=DEFAULT_TEMPLATE_SUBDIR,
        min_length=1,
        description="Repository subdirectory holding the template",
    )
    clone_timeout: float = Field(
        default=DEFAULT_CLONE_TIMEOUT,
        gt=0,
        description="Timeout in seconds for each git invocation",
    )
    min_node_major: int = Field(
        default=DEFAULT_MIN_NODE_MAJOR,
        ge=1,
        description="Minimum supported Node.js major version",
    )
    package_manager: str = Field(
        default="npm",
        min_length=1,
        description="Package manager executable",
    )
    install_args: list[str] = Field(
        default_factory=lambda: ["install", "--silent"],
        description="Arguments for the install command",
    )
    install: bool = Field(
        default=True,
        description="Run the dependency installation",
    )
    vcs_executable: str = Field(default="git", min_length=1)
    runtime_executable: str = Field(default="node", min_length=1)

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------

    @field_validator("name")
    @classmethod
    def validate_project_name(cls, v: str) -> str:
        """
        Strip surrounding whitespace and reject blank names.

        No further format rules are imposed; the filesystem and the target
        files decide what they tolerate.
        """
        v = v.strip()
        if not v:
            msg = "Project name must not be blank."
            raise ValueError(msg)
        return v

    @field_validator("repo_url")
    @classmethod
    def validate_repo_url(cls, v: str | None) -> str | None:
        """Reject URLs that git would parse as an option."""
        if v is None:
            return v
        try:
            return sanitize_repo_url(v)
        except InvalidPathError as e:
            raise ValueError(str(e)) from e

    @field_validator("template_subdir")
    @classmethod
    def validate_template_subdir(cls, v: str) -> str:
        """Require a relative path that stays inside the repository."""
        try:
            return sanitize_relative_path(v)
        except InvalidPathError as e:
            raise ValueError(str(e)) from e

    @model_validator(mode="after")
    def validate_remote_settings(self) -> ScaffoldConfig:
        """The remote strategy needs a repository to clone."""
        if self.source == TemplateSource.REMOTE and not self.repo_url:
            msg = "A repository URL is required for the remote template source (--repo-url)."
            raise ValueError(msg)
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def project_dir(self) -> Path:
        """Absolute path of the project directory (output_dir / name)."""
        return (self.output_dir / self.name).absolute()

    @property
    def uses_remote_template(self) -> bool:
        """True when the template is cloned rather than read from the package."""
        return self.source == TemplateSource.REMOTE
