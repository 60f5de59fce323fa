"""Implementations of the ``radnt`` subcommands."""

from radnt.commands.add import add_components, select_component
from radnt.commands.init import init_project

__all__ = [
    "add_components",
    "init_project",
    "select_component",
]
