"""
pytest configuration and shared fixtures for create-stb tests.

Fixtures
--------
template_tree : Path
    A small template with a top-level file, a dotfile and a nested file.

stb_template : Path
    A template carrying package.json and serverless.yml like the real one.
"""

import json
from pathlib import Path

import pytest


SAMPLE_SERVERLESS_YML = "service: starter-name\nprovider:\n  name: aws\n"


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """
    Create a template directory with a file, a dotfile and a subfolder.

    Returns
    -------
    Path
        Root of the template tree.
    """
    root = tmp_path / "template"
    (root / "sub").mkdir(parents=True)
    (root / "file.txt").write_text("hello world", encoding="utf-8")
    (root / ".dotfile").write_text("dotfile", encoding="utf-8")
    (root / "sub" / "nested.txt").write_text("nested", encoding="utf-8")
    return root


@pytest.fixture
def stb_template(tmp_path: Path) -> Path:
    """Create a template with the two metadata files the generator rewrites."""
    root = tmp_path / "stb-template"
    (root / "src").mkdir(parents=True)
    (root / "package.json").write_text(
        json.dumps({"name": "old", "description": "desc", "version": "1.0.0"}, indent=2),
        encoding="utf-8",
    )
    (root / "serverless.yml").write_text(SAMPLE_SERVERLESS_YML, encoding="utf-8")
    (root / ".gitignore").write_text("node_modules/\n", encoding="utf-8")
    (root / "src" / "handler.ts").write_text("export {};\n", encoding="utf-8")
    return root
