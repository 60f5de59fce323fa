"""Shared pytest fixtures for the Radnt test suite.

Provides reusable fixtures for:
- A small catalog matching the resolver examples
- Next.js project directories (bare, initialised, src/ layout)
- A ``Config`` pointed at the temporary project
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from radnt.config import Config
from radnt.project import ShadcnConfig
from radnt.resolver import CatalogEntry


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_catalog() -> list[CatalogEntry]:
    """``alert``, ``alert-dialog``, ``avatar`` in that order."""
    return [
        CatalogEntry("alert", "Displays a callout for user attention"),
        CatalogEntry("alert-dialog", "A modal dialog that interrupts the user"),
        CatalogEntry("avatar", "An image element with a fallback"),
    ]


# ---------------------------------------------------------------------------
# Project directories
# ---------------------------------------------------------------------------

def write_package_json(root: Path, *, dev: bool = False, next_dep: bool = True) -> Path:
    deps = {"react": "^18.3.0"}
    if next_dep:
        deps["next"] = "^15.0.0"
    data = {"name": root.name, "version": "0.1.0", "private": True}
    data["devDependencies" if dev else "dependencies"] = deps
    path = root / "package.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def next_project(tmp_path: Path) -> Path:
    """A minimal TypeScript App Router project without shadcn/ui."""
    root = tmp_path / "my-app"
    root.mkdir()
    write_package_json(root)
    (root / "tsconfig.json").write_text("{}", encoding="utf-8")
    (root / "app").mkdir()
    yield root


@pytest.fixture
def initialized_project(next_project: Path) -> Path:
    """``next_project`` with a default ``components.json``."""
    (next_project / "components.json").write_text(ShadcnConfig().to_json(), encoding="utf-8")
    yield next_project


@pytest.fixture
def config(initialized_project: Path) -> Config:
    return Config(project_dir=initialized_project)
