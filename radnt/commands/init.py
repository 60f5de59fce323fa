"""``radnt init`` -- set up shadcn/ui in an existing Next.js project.

Writes ``components.json``, creates the ``components/ui`` folder and the
``cn()`` class-name helper, then makes sure Tailwind and the global
stylesheet know the theme variables the components use.  An existing
``tailwind.config.js`` is never touched.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

from rich.prompt import Confirm, Prompt

from radnt.components import ComponentRenderer
from radnt.config import Config
from radnt.project import (
    BASE_COLORS,
    STYLES,
    Aliases,
    ProjectLayout,
    ShadcnConfig,
    TailwindSettings,
    ensure_next_project,
)
from radnt.utils import (
    console,
    print_success,
    print_summary_table,
    print_warning,
    write_text_file,
)

Confirmer = Callable[[str], bool]


def confirm_overwrite(message: str) -> bool:
    return Confirm.ask(message, default=False, console=console)


def build_shadcn_config(
    layout: ProjectLayout,
    style: str = "default",
    base_color: str = "slate",
    css_variables: bool = True,
) -> ShadcnConfig:
    """Build the ``components.json`` contents for a detected project layout."""
    return ShadcnConfig(
        style=style,
        base_color=base_color,
        css_variables=css_variables,
        rsc=layout.has_app_dir,
        tsx=layout.has_typescript,
        tailwind=TailwindSettings(
            config="tailwind.config.js",
            css=layout.css_path(),
            base_color=base_color,
            css_variables=css_variables,
        ),
        aliases=Aliases(components="@/components", utils="@/lib/utils"),
    )


# Present in a stylesheet that already defines the shadcn/ui theme.
THEME_MARKER = "--background:"


def setup_tailwind_config(path: Path, renderer: ComponentRenderer, typescript: bool) -> bool:
    """Write ``tailwind.config.js`` unless the project already has one.

    Returns:
        ``True`` if the file was created.
    """
    if path.exists():
        return False
    write_text_file(path, renderer.render_tailwind_config({"typescript": typescript}))
    return True


def setup_global_styles(path: Path, renderer: ComponentRenderer) -> str:
    """Add the theme variables to the global stylesheet.

    A missing stylesheet is created; an existing one gets the theme appended
    unless it already defines ``--background``.

    Returns:
        ``"created"``, ``"updated"`` or ``"unchanged"``.
    """
    styles = renderer.render_global_styles()
    if not path.exists():
        write_text_file(path, styles)
        return "created"

    existing = path.read_text(encoding="utf-8")
    if THEME_MARKER in existing:
        return "unchanged"
    write_text_file(path, f"{existing.rstrip()}\n\n{styles}")
    return "updated"


def _prompt_options(style: str | None, base_color: str | None) -> tuple[str, str]:
    if style is None:
        style = Prompt.ask(
            "Which style would you like to use?",
            choices=STYLES,
            default="default",
            console=console,
        )
    if base_color is None:
        base_color = Prompt.ask(
            "Which color would you like to use as base color?",
            choices=BASE_COLORS,
            default="slate",
            console=console,
        )
    return style, base_color


async def init_project(
    config: Config,
    *,
    style: str | None = None,
    base_color: str | None = None,
    css_variables: bool = True,
    assume_yes: bool = False,
    confirm: Confirmer = confirm_overwrite,
) -> Path | None:
    """Initialise shadcn/ui in ``config.project_dir``.

    Args:
        config: Resolved configuration.
        style: ``default`` or ``new-york``; prompted for when ``None`` and
            *assume_yes* is not set.
        base_color: One of ``BASE_COLORS``; prompted for likewise.
        css_variables: Whether colours are expressed as CSS variables.
        assume_yes: Use defaults for unanswered options and overwrite an
            existing ``components.json`` without asking.
        confirm: Asks whether an existing ``components.json`` may be replaced.

    Returns:
        Path of the written ``components.json``, or ``None`` if the user
        cancelled.

    Raises:
        ProjectNotFoundError: If the directory has no ``package.json``.
        InvalidProjectFileError: If ``package.json`` is not valid JSON.
        NotANextProjectError: If the project does not depend on ``next``.
    """
    console.print("[bold blue]Initializing shadcn/ui in your project...[/bold blue]\n")

    root = config.project_dir
    ensure_next_project(config.package_json_path)

    target = config.components_json_path
    if target.exists() and not assume_yes:
        if not confirm(f"{target.name} already exists. Do you want to overwrite it?"):
            print_warning("Initialization cancelled.")
            return None

    layout = ProjectLayout.detect(root)
    console.print("[dim]Detected project configuration:[/dim]")
    for line in layout.describe():
        console.print(f"[dim]  • {line}[/dim]")
    console.print()

    if assume_yes:
        style = style or "default"
        base_color = base_color or "slate"
    else:
        style, base_color = _prompt_options(style, base_color)

    shadcn = build_shadcn_config(layout, style, base_color, css_variables)
    await asyncio.to_thread(write_text_file, target, shadcn.to_json())

    ui_path = layout.alias_to_path(shadcn.aliases.components) / "ui"
    await asyncio.to_thread(ui_path.mkdir, parents=True, exist_ok=True)

    extension = ".ts" if layout.has_typescript else ".js"
    utils_path = layout.alias_to_path(shadcn.aliases.utils).with_suffix(extension)
    renderer = ComponentRenderer()
    utils_source = renderer.render_utils({"typescript": layout.has_typescript})
    await asyncio.to_thread(write_text_file, utils_path, utils_source)

    tailwind_path = root / shadcn.tailwind.config
    tailwind_created = await asyncio.to_thread(
        setup_tailwind_config, tailwind_path, renderer, layout.has_typescript
    )
    css_path = root / shadcn.tailwind.css
    css_status = await asyncio.to_thread(setup_global_styles, css_path, renderer)

    print_summary_table(
        {
            "Config": str(target.relative_to(root)),
            "Components": str(ui_path.relative_to(root)),
            "Utils": str(utils_path.relative_to(root)),
            "Tailwind config": (
                f"{shadcn.tailwind.config} ({'created' if tailwind_created else 'unchanged'})"
            ),
            "Global styles": f"{shadcn.tailwind.css} ({css_status})",
            "Style": f"{shadcn.style} / {shadcn.base_color}",
        },
        title="shadcn/ui setup",
    )
    print_success("shadcn/ui has been initialized!")
    console.print("[cyan]Next steps:[/cyan]")
    console.print("  • Add components: radnt add alert")
    console.print("  • Add all components: radnt add --all")
    return target
