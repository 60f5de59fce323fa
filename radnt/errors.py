"""Exceptions raised by Radnt commands.

Every exception carries a message meant to be shown to the user as-is; the
CLI entry point prints it and exits with status 1.
"""

from __future__ import annotations

from pathlib import Path


class RadntError(Exception):
    """Base class for user-facing command failures."""


class ProjectNotFoundError(RadntError):
    """Raised when the working directory has no ``package.json``."""

    def __init__(self, project_dir: Path) -> None:
        self.project_dir = project_dir
        super().__init__(
            f"No package.json found in {project_dir}. "
            "Make sure you're in a project directory."
        )


class NotANextProjectError(RadntError):
    """Raised when ``package.json`` does not depend on ``next``."""

    def __init__(self, project_dir: Path) -> None:
        self.project_dir = project_dir
        super().__init__(
            "This doesn't appear to be a Next.js project. "
            'Create one with "npx create-next-app" first.'
        )


class ProjectNotInitializedError(RadntError):
    """Raised when ``components.json`` is missing."""

    def __init__(self, components_json: Path) -> None:
        self.components_json = components_json
        super().__init__(
            f'No {components_json.name} found. Run "radnt init" first.'
        )


class ComponentNotImplementedError(RadntError):
    """Raised when a catalog component has no boilerplate template."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Component {name} is not implemented yet")


class InvalidProjectFileError(RadntError):
    """Raised when ``package.json`` or ``components.json`` cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid {path.name} in {path.parent}: {reason}")


class ConfigError(RadntError):
    """Raised when Radnt's own settings (environment variables) are invalid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")
