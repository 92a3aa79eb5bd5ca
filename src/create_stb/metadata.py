"""
create_stb.metadata - Project Name Rewriting
============================================

After the template is copied, two files still carry the template's own
name: ``package.json`` (``name`` and ``description``) and ``serverless.yml``
(the ``service:`` line). Both rewrites are skipped silently when the file
does not exist.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path


logger = logging.getLogger(__name__)

PACKAGE_DESCRIPTOR = "package.json"
SERVICE_DECLARATION = "serverless.yml"

# First "service:" line; stops before the line terminator so CRLF survives
_SERVICE_LINE_RE = re.compile(r"^service:[^\r\n]*", re.MULTILINE)


def update_package_descriptor(project_path: Path, project_name: str) -> bool:
    """
    Set ``name`` and ``description`` in the project's ``package.json``.

    Parameters
    ----------
    project_path : Path
        Root of the generated project.

    project_name : str
        New package name.

    Returns
    -------
    bool
        True if the file was rewritten, False if it does not exist.

    Raises
    ------
    json.JSONDecodeError
        If the existing file is not valid JSON. The template is considered
        corrupt and the error is not repaired or hidden.
    """
    path = project_path / PACKAGE_DESCRIPTOR
    if not path.exists():
        logger.debug("No %s in %s", PACKAGE_DESCRIPTOR, project_path)
        return False

    data = json.loads(path.read_text(encoding="utf-8"))
    data["name"] = project_name
    data["description"] = f"{project_name} app description"

    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return True


def update_service_declaration(project_path: Path, project_name: str) -> bool:
    """
    Replace the first ``service:`` line of ``serverless.yml``.

    Everything else in the file stays byte-identical. Returns True if the
    file was rewritten.
    """
    path = project_path / SERVICE_DECLARATION
    if not path.exists():
        logger.debug("No %s in %s", SERVICE_DECLARATION, project_path)
        return False

    with path.open(encoding="utf-8", newline="") as f:
        content = f.read()

    updated, count = _SERVICE_LINE_RE.subn(
        lambda _: f"service: {project_name}", content, count=1
    )
    if not count:
        logger.debug("No service line in %s", path)
        return False

    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(updated)
    return True
