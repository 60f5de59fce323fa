"""The catalog of shadcn/ui components that ``radnt add`` knows about.

Entry order matters: it is the order in which ambiguous matches are offered
and in which ``radnt add --all`` installs components.
"""

from __future__ import annotations

from radnt.resolver import CatalogEntry

CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry("accordion", "A vertically stacked set of interactive headings"),
    CatalogEntry("alert", "Displays a callout for user attention"),
    CatalogEntry("alert-dialog", "A modal dialog that interrupts the user"),
    CatalogEntry("avatar", "An image element with a fallback for representing the user"),
    CatalogEntry("badge", "Displays a badge or a component that looks like a badge"),
    CatalogEntry("breadcrumb", "Displays the path to the current resource"),
    CatalogEntry("calendar", "A date field component that allows users to enter and edit date"),
    CatalogEntry("checkbox", "A control that allows the user to toggle between checked and not checked"),
    CatalogEntry("collapsible", "An interactive component which expands/collapses a panel"),
    CatalogEntry("combobox", "Combines a text input with a listbox"),
    CatalogEntry("command", "Fast, composable, unstyled command menu"),
    CatalogEntry("context-menu", "Displays a menu to the user"),
    CatalogEntry("data-table", "Powerful table and datagrids built using TanStack Table"),
    CatalogEntry("date-picker", "A date picker component with range and presets"),
    CatalogEntry("dialog", "A window overlaid on either the primary window or another dialog window"),
    CatalogEntry("dropdown-menu", "Displays a menu to the user"),
    CatalogEntry("form", "Building forms with validation and accessibility"),
    CatalogEntry("hover-card", "For sighted users to preview content available behind a link"),
    CatalogEntry("menubar", "A visually persistent menu common in desktop applications"),
    CatalogEntry("navigation-menu", "A collection of links for navigating websites"),
    CatalogEntry("popover", "Displays rich content in a portal, triggered by a button"),
    CatalogEntry("progress", "Displays an indicator showing the completion progress"),
    CatalogEntry("radio-group", "A set of checkable buttons, known as radio buttons"),
    CatalogEntry("scroll-area", "Augments native scroll functionality for custom, cross-browser styling"),
    CatalogEntry("select", "Displays a list of options for the user to pick from"),
    CatalogEntry("separator", "Visually or semantically separates content"),
    CatalogEntry("sheet", "Extends the Dialog component to display content that complements the main content"),
    CatalogEntry("skeleton", "Use to show a placeholder while content is loading"),
    CatalogEntry("slider", "An input where the user selects a value from within a given range"),
    CatalogEntry("switch", "A control that allows the user to toggle between checked and not checked"),
    CatalogEntry("table", "A responsive table component"),
    CatalogEntry("tabs", "A set of layered sections of content"),
    CatalogEntry("textarea", "Displays a form textarea or a component that looks like a textarea"),
    CatalogEntry("toast", "A succinct message that is displayed temporarily"),
    CatalogEntry("toggle", "A two-state button that can be either on or off"),
    CatalogEntry("toggle-group", "A set of two-state buttons that can be toggled on or off"),
    CatalogEntry("tooltip", "A popup that displays information related to an element"),
)


def catalog_names() -> list[str]:
    """Return every component name in catalog order."""
    return [entry.name for entry in CATALOG]
