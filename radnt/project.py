"""Inspection of an existing Next.js project and its ``components.json``.

``ShadcnConfig`` mirrors the ``components.json`` file understood by the
shadcn/ui tooling; field aliases keep the on-disk keys camelCase.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from radnt.errors import InvalidProjectFileError, NotANextProjectError, ProjectNotFoundError
from radnt.utils import format_validation_error, load_json

Style = Literal["default", "new-york"]
BaseColor = Literal["slate", "gray", "zinc", "neutral", "stone"]

STYLES: list[str] = ["default", "new-york"]
BASE_COLORS: list[str] = ["slate", "gray", "zinc", "neutral", "stone"]


# ---------------------------------------------------------------------------
# components.json model
# ---------------------------------------------------------------------------

class TailwindSettings(BaseModel):
    """The ``tailwind`` block of ``components.json``."""

    model_config = ConfigDict(populate_by_name=True)

    config: str = Field(default="tailwind.config.js")
    css: str = Field(default="app/globals.css")
    base_color: BaseColor = Field(default="slate", alias="baseColor")
    css_variables: bool = Field(default=True, alias="cssVariables")


class Aliases(BaseModel):
    """Import aliases used inside generated components."""

    components: str = Field(default="@/components")
    utils: str = Field(default="@/lib/utils")


class ShadcnConfig(BaseModel):
    """Contents of ``components.json``."""

    model_config = ConfigDict(populate_by_name=True)

    style: Style = Field(default="default")
    base_color: BaseColor = Field(default="slate", alias="baseColor")
    css_variables: bool = Field(default=True, alias="cssVariables")
    rsc: bool = Field(default=True, description="React Server Components (App Router)")
    tsx: bool = Field(default=True)
    tailwind: TailwindSettings = Field(default_factory=TailwindSettings)
    aliases: Aliases = Field(default_factory=Aliases)

    def to_json(self) -> str:
        """Serialise with the camelCase keys used on disk."""
        return self.model_dump_json(by_alias=True, indent=2) + "\n"

    @classmethod
    def load(cls, path: Path) -> "ShadcnConfig":
        """Read and validate a ``components.json`` file.

        Raises:
            InvalidProjectFileError: If the file is not valid JSON or holds
                values shadcn/ui does not accept.
        """
        path = Path(path)
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise InvalidProjectFileError(path, format_validation_error(exc)) from exc


# ---------------------------------------------------------------------------
# Project layout detection
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectLayout:
    """Which optional directories and files a Next.js project has."""

    root: Path
    has_app_dir: bool
    has_src_dir: bool
    has_typescript: bool

    @classmethod
    def detect(cls, root: str | Path) -> "ProjectLayout":
        root = Path(root)
        return cls(
            root=root,
            has_app_dir=(root / "app").is_dir() or (root / "src" / "app").is_dir(),
            has_src_dir=(root / "src").is_dir(),
            has_typescript=(root / "tsconfig.json").is_file(),
        )

    def describe(self) -> list[str]:
        """Human-readable summary lines, one per detected property."""
        return [
            "TypeScript" if self.has_typescript else "JavaScript",
            "App Router" if self.has_app_dir else "Pages Router",
            "src/ directory" if self.has_src_dir else "root directory",
        ]

    def css_path(self) -> str:
        """Location of the global stylesheet for this layout."""
        prefix = "src/" if self.has_src_dir else ""
        folder = "app" if self.has_app_dir else "styles"
        return f"{prefix}{folder}/globals.css"

    def alias_to_path(self, alias: str) -> Path:
        """Map an ``@/`` import alias to a directory inside the project.

        Examples (with a ``src/`` directory)::

            "@/components" -> <root>/src/components
            "@/lib/utils"  -> <root>/src/lib/utils
        """
        relative = alias
        if alias.startswith("@/"):
            relative = ("src/" if self.has_src_dir else "") + alias[2:]
        return self.root / relative


def ensure_next_project(package_json: str | Path) -> dict:
    """Return the parsed *package_json* of a Next.js project.

    Raises:
        ProjectNotFoundError: If the file does not exist.
        InvalidProjectFileError: If the file is not valid JSON.
        NotANextProjectError: If ``next`` is not a (dev) dependency.
    """
    package_json = Path(package_json)
    if not package_json.is_file():
        raise ProjectNotFoundError(package_json.parent)

    try:
        data = load_json(package_json)
    except json.JSONDecodeError as exc:
        raise InvalidProjectFileError(package_json, str(exc)) from exc
    dependencies = data.get("dependencies") or {}
    dev_dependencies = data.get("devDependencies") or {}
    if "next" not in dependencies and "next" not in dev_dependencies:
        raise NotANextProjectError(package_json.parent)
    return data
