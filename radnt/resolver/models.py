"""Value types for component-name resolution.

A resolution call takes a query and an ordered catalog of ``CatalogEntry``
values and returns exactly one of the four ``MatchResult`` variants below.
All types are frozen so a catalog can be shared freely between callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CatalogEntry:
    """A known, valid name together with a one-line description."""

    name: str
    description: str = ""


# ---------------------------------------------------------------------------
# Match results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Exact:
    """The query equals an entry name character for character."""

    entry: CatalogEntry


@dataclass(frozen=True)
class UniqueFuzzy:
    """Exactly one entry is close enough to the query to be substituted."""

    entry: CatalogEntry


@dataclass(frozen=True)
class Ambiguous:
    """Two or more entries qualify; the caller must ask the user to pick one."""

    candidates: tuple[CatalogEntry, ...]

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.candidates]


@dataclass(frozen=True)
class NoMatch:
    """No entry is close to the query."""


MatchResult = Union[Exact, UniqueFuzzy, Ambiguous, NoMatch]
