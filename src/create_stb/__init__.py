"""
create-stb - Serverless TypeScript Boilerplate Scaffolder
=========================================================

A CLI tool that creates a new serverless TypeScript project from the stb
boilerplate: it checks for Node.js (and git when cloning), copies the
template into a fresh directory, renames the project in ``package.json`` and
``serverless.yml``, and installs dependencies with npm.

Quick Start
-----------
```bash
pip install create-stb
create-stb my-service
cd my-service
npm run offline
```

Example
-------
>>> from create_stb import ScaffoldConfig, create_project
>>> create_project(ScaffoldConfig(name="my-service", install=False))

Architecture
------------
- ``cli``: Typer command and error boundary
- ``generator``: The scaffolding pipeline
- ``acquirer``: Bundled and remote template sources
- ``filesystem``: Directory creation, tree copy, temp cleanup
- ``metadata``: package.json / serverless.yml rewriting
- ``environment``: Node.js and git checks
- ``sanitize``: Path validation for subprocess arguments
- ``models``: Pydantic configuration
- ``errors``: Exception hierarchy
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from create_stb.errors import ScaffoldError
from create_stb.generator import GenerationResult, create_project
from create_stb.models import ScaffoldConfig, TemplateSource


__all__ = [
    "GenerationResult",
    "ScaffoldConfig",
    "ScaffoldError",
    "TemplateSource",
    "__version__",
    "create_project",
]
