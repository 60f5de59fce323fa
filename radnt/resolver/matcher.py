"""Typo-tolerant lookup of a user-typed name in a fixed catalog."""

from __future__ import annotations

from collections.abc import Sequence

from .distance import levenshtein
from .models import Ambiguous, CatalogEntry, Exact, MatchResult, NoMatch, UniqueFuzzy

# Largest edit distance at which a name still counts as a likely typo.
MAX_EDIT_DISTANCE = 2


def is_fuzzy_candidate(query: str, name: str, max_distance: int = MAX_EDIT_DISTANCE) -> bool:
    """Return ``True`` if *name* is close enough to *query* to be offered.

    A name qualifies when either string contains the other, or when the two
    are at most *max_distance* edits apart.
    """
    if query in name or name in query:
        return True
    return levenshtein(name, query) <= max_distance


def fuzzy_candidates(
    query: str,
    catalog: Sequence[CatalogEntry],
    max_distance: int = MAX_EDIT_DISTANCE,
) -> list[CatalogEntry]:
    """Every catalog entry that passes ``is_fuzzy_candidate``, in catalog order."""
    return [
        entry for entry in catalog
        if is_fuzzy_candidate(query, entry.name, max_distance)
    ]


def resolve(query: str, catalog: Sequence[CatalogEntry]) -> MatchResult:
    """Map *query* to zero, one or many entries of *catalog*.

    An exact, case-sensitive name match always wins and skips fuzzy matching
    altogether.  Otherwise every entry that passes ``is_fuzzy_candidate`` is
    collected without re-ranking: a single candidate is returned as
    ``UniqueFuzzy``, several as ``Ambiguous`` and none as ``NoMatch``.

    The query is used as given; callers trim user input before resolving.
    The function never raises and never mutates *catalog*.
    """
    for entry in catalog:
        if entry.name == query:
            return Exact(entry)

    candidates = fuzzy_candidates(query, catalog)
    if not candidates:
        return NoMatch()
    if len(candidates) == 1:
        return UniqueFuzzy(candidates[0])
    return Ambiguous(tuple(candidates))
