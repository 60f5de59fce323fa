"""Jinja2 rendering of component boilerplate.

Each implemented component has a ``ui/<name>.tsx.j2`` template under
``radnt/components/templates/``; the set of templates present on disk is the
keyed lookup table of available boilerplate.  The files written by ``radnt
init`` live beside them: the ``cn()`` helper at ``lib/utils.j2``, the Tailwind
config at ``tailwind/`` and the theme stylesheet at ``styles/``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Context used when the caller does not supply one.
DEFAULT_CONTEXT: dict[str, Any] = {
    "utils_alias": "@/lib/utils",
    "typescript": True,
}


class ComponentRenderer:
    """Renders component and helper templates.

    Args:
        template_dir: Root directory holding ``ui/`` and ``lib/``. Defaults
            to the templates shipped with the package.
    """

    COMPONENT_PREFIX = "ui"
    COMPONENT_SUFFIX = ".tsx.j2"
    UTILS_TEMPLATE = "lib/utils.j2"
    TAILWIND_TEMPLATE = "tailwind/tailwind.config.js.j2"
    GLOBAL_STYLES_TEMPLATE = "styles/globals.css.j2"

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Lookup ------------------------------------------------------------

    def template_name(self, name: str) -> str:
        return f"{self.COMPONENT_PREFIX}/{name}{self.COMPONENT_SUFFIX}"

    def has_template(self, name: str) -> bool:
        """Return ``True`` if boilerplate exists for component *name*."""
        return (self.template_dir / self.template_name(name)).is_file()

    def list_components(self) -> list[str]:
        """Return the sorted names of every component with a template."""
        ui_dir = self.template_dir / self.COMPONENT_PREFIX
        if not ui_dir.is_dir():
            return []
        return sorted(
            path.name[: -len(self.COMPONENT_SUFFIX)]
            for path in ui_dir.glob(f"*{self.COMPONENT_SUFFIX}")
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render a single template, layering *context* over ``DEFAULT_CONTEXT``."""
        merged = {**DEFAULT_CONTEXT, **(context or {})}
        template = self.env.get_template(template_path)
        return template.render(**merged)

    def render_component(self, name: str, context: dict[str, Any] | None = None) -> str:
        """Render the boilerplate for component *name*.

        Raises:
            jinja2.TemplateNotFound: If the component has no template.
        """
        return self.render(self.template_name(name), {"component": name, **(context or {})})

    def render_utils(self, context: dict[str, Any] | None = None) -> str:
        """Render the ``cn()`` class-name helper."""
        return self.render(self.UTILS_TEMPLATE, context)

    def render_tailwind_config(self, context: dict[str, Any] | None = None) -> str:
        """Render a ``tailwind.config.js`` wired to the shadcn/ui CSS variables."""
        return self.render(self.TAILWIND_TEMPLATE, context)

    def render_global_styles(self, context: dict[str, Any] | None = None) -> str:
        """Render the Tailwind directives and light/dark theme variables."""
        return self.render(self.GLOBAL_STYLES_TEMPLATE, context)
