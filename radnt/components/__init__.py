"""Radnt UI components -- the catalog plus boilerplate rendering and install.

Quick usage::

    from radnt.components import CATALOG, ComponentInstaller

    installer = ComponentInstaller("my-app/components/ui")
    outcome = await installer.install("alert")
"""

from radnt.components.catalog import CATALOG, catalog_names
from radnt.components.installer import ComponentInstaller, InstallOutcome
from radnt.components.templates import ComponentRenderer

__all__ = [
    "CATALOG",
    "ComponentInstaller",
    "ComponentRenderer",
    "InstallOutcome",
    "catalog_names",
]
