"""``radnt add`` -- copy shadcn/ui component boilerplate into a project.

The component name typed by the user goes through ``radnt.resolver.resolve``
and each outcome is presented as follows:

* exact match: install it.
* one fuzzy match: announce the substitution, then install it.
* several fuzzy matches: list them and ask the user to pick one.  Nothing is
  written until a choice has been made.
* no match: print the whole catalog as a hint and stop.

The interactive pieces (single choice and multi-selection) are plain
callables so tests and other front-ends can swap them out.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from radnt.components import CATALOG, ComponentInstaller, InstallOutcome, catalog_names
from radnt.config import Config
from radnt.errors import ProjectNotInitializedError, RadntError
from radnt.project import ProjectLayout, ShadcnConfig
from radnt.resolver import Ambiguous, CatalogEntry, Exact, UniqueFuzzy, resolve
from radnt.utils import (
    console,
    create_progress,
    import_hint,
    print_component_list,
    print_error,
    print_success,
    print_warning,
)

Chooser = Callable[[Sequence[CatalogEntry]], CatalogEntry]
MultiSelector = Callable[[Sequence[CatalogEntry]], list[str]]


# ---------------------------------------------------------------------------
# Interactive prompts
# ---------------------------------------------------------------------------


def prompt_choice(candidates: Sequence[CatalogEntry]) -> CatalogEntry:
    """Ask the user to pick exactly one of *candidates*."""
    names = [entry.name for entry in candidates]
    picked = Prompt.ask(
        "Select the correct component",
        choices=names,
        console=console,
    )
    return candidates[names.index(picked)]


def prompt_multi_select(catalog: Sequence[CatalogEntry]) -> list[str]:
    """Show the numbered catalog and read a comma-separated selection."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Component", style="cyan")
    table.add_column("Description")
    for index, entry in enumerate(catalog, start=1):
        table.add_row(str(index), entry.name, entry.description)
    console.print(table)

    raw = Prompt.ask(
        "Which components would you like to add? (names or numbers, comma separated)",
        default="",
        console=console,
    )
    return parse_selection(raw, catalog)


def parse_selection(raw: str, catalog: Sequence[CatalogEntry]) -> list[str]:
    """Turn ``"1, tabs, 3"`` into catalog names.

    Tokens may be 1-based positions or exact names.  Unknown tokens are
    reported and ignored; duplicates are dropped while keeping first-seen
    order.
    """
    names = [entry.name for entry in catalog]
    selected: list[str] = []
    for token in (part.strip() for part in raw.split(",")):
        if not token:
            continue
        if token.isdigit() and 1 <= int(token) <= len(names):
            name = names[int(token) - 1]
        elif token in names:
            name = token
        else:
            print_warning(f"Ignoring unknown component: {escape(token)}")
            continue
        if name not in selected:
            selected.append(name)
    return selected


# ---------------------------------------------------------------------------
# Name resolution
# ---------------------------------------------------------------------------


def select_component(
    query: str,
    catalog: Sequence[CatalogEntry] = CATALOG,
    chooser: Chooser = prompt_choice,
) -> CatalogEntry | None:
    """Resolve a typed component name, asking the user when it is ambiguous.

    Returns:
        The chosen entry, or ``None`` if nothing in the catalog matches.
    """
    result = resolve(query.strip(), catalog)

    if isinstance(result, Exact):
        return result.entry

    if isinstance(result, UniqueFuzzy):
        print_warning(f'Did you mean "{escape(result.entry.name)}"? Using that instead.')
        return result.entry

    if isinstance(result, Ambiguous):
        print_error(f'Component "{escape(query)}" not found.')
        print_warning("Did you mean one of these?")
        print_component_list(result.candidates)
        return chooser(result.candidates)

    # NoMatch
    print_error(f'Component "{escape(query)}" not found.')
    print_warning("Available components:")
    print_component_list(catalog)
    return None


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


def _default_installer(config: Config, shadcn: ShadcnConfig) -> ComponentInstaller:
    """Installer writing into ``<components alias>/ui`` unless ``ui_dir`` overrides it."""
    if config.ui_dir:
        ui_path = config.project_dir / config.ui_dir
    else:
        layout = ProjectLayout.detect(config.project_dir)
        ui_path = layout.alias_to_path(shadcn.aliases.components) / "ui"
    return ComponentInstaller(ui_path, context={"utils_alias": shadcn.aliases.utils})


async def add_components(
    config: Config,
    component: str | None = None,
    *,
    add_all: bool = False,
    chooser: Chooser = prompt_choice,
    selector: MultiSelector = prompt_multi_select,
    installer: ComponentInstaller | None = None,
) -> dict[str, InstallOutcome]:
    """Add one, several, or all catalog components to the project.

    Args:
        config: Resolved configuration; ``config.project_dir`` is the project.
        component: Name typed by the user.  Ignored when *add_all* is set.
        add_all: Install every catalog component.
        chooser: Picks one entry out of an ambiguous match.
        selector: Interactive multi-selection used when neither *component*
            nor *add_all* is given.
        installer: Override the installer (defaults to one writing into the
            ``ui`` folder under the components alias of ``components.json``).

    Returns:
        Mapping of component name to what happened to it.  Empty when the
        name did not match or the user selected nothing.

    Raises:
        ProjectNotInitializedError: If ``components.json`` is missing.
        InvalidProjectFileError: If ``components.json`` cannot be parsed.
        ComponentNotImplementedError: If a selected component has no
            boilerplate.
    """
    console.print("[bold blue]Adding shadcn/ui components...[/bold blue]\n")

    if not config.components_json_path.exists():
        raise ProjectNotInitializedError(config.components_json_path)
    shadcn = ShadcnConfig.load(config.components_json_path)

    component = component.strip() if component else None
    if add_all:
        names = catalog_names()
    elif component:
        entry = select_component(component, CATALOG, chooser)
        if entry is None:
            return {}
        names = [entry.name]
    else:
        names = selector(CATALOG)
        if not names:
            print_warning("No components selected.")
            return {}

    if installer is None:
        installer = _default_installer(config, shadcn)
    alias = f"{shadcn.aliases.components}/ui"

    outcomes: dict[str, InstallOutcome] = {}
    with create_progress() as progress:
        task = progress.add_task("Adding components...", total=None)
        for name in names:
            progress.update(task, description=f"Adding {name}...")
            try:
                outcomes[name] = await installer.install(name)
            except RadntError:
                print_error("Failed to add components")
                raise
            if outcomes[name] is InstallOutcome.SKIPPED:
                print_warning(f"Component {name} already exists, skipping...")

    print_success(f"Successfully added {len(names)} component(s)!")
    console.print("[cyan]You can now import and use them in your project:[/cyan]")
    for name in names:
        console.print(f"  [dim]{import_hint(name, alias)}[/dim]", highlight=False)

    return outcomes
