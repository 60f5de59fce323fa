"""Writes rendered component boilerplate into a project."""

from __future__ import annotations

import asyncio
from enum import Enum
from pathlib import Path
from typing import Any

from radnt.errors import ComponentNotImplementedError
from radnt.utils import write_text_file

from .templates import ComponentRenderer


class InstallOutcome(str, Enum):
    """What ``ComponentInstaller.install`` did for one component."""

    ADDED = "added"
    SKIPPED = "skipped"


class ComponentInstaller:
    """Installs UI components under ``<project_dir>/<ui_dir>``.

    Existing component files are never overwritten: a user may have edited
    them since they were added.

    Attributes:
        ui_path: Directory receiving ``<name>.tsx`` files.
        renderer: Template renderer providing the boilerplate.
        context: Extra template context (for example the ``utils_alias``
            read from ``components.json``).
    """

    def __init__(
        self,
        ui_path: str | Path,
        renderer: ComponentRenderer | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.ui_path = Path(ui_path)
        self.renderer = renderer or ComponentRenderer()
        self.context = dict(context or {})

    def component_path(self, name: str) -> Path:
        return self.ui_path / f"{name}.tsx"

    async def install(self, name: str) -> InstallOutcome:
        """Render component *name* and write it to ``component_path(name)``.

        Returns:
            ``InstallOutcome.SKIPPED`` if the file already exists, otherwise
            ``InstallOutcome.ADDED``.

        Raises:
            ComponentNotImplementedError: If no boilerplate exists for *name*.
        """
        target = self.component_path(name)
        if await asyncio.to_thread(target.exists):
            return InstallOutcome.SKIPPED

        if not self.renderer.has_template(name):
            raise ComponentNotImplementedError(name)

        content = self.renderer.render_component(name, self.context)
        await asyncio.to_thread(write_text_file, target, content)
        return InstallOutcome.ADDED
