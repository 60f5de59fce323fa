"""Radnt component-name resolver.

Resolves a user-typed component name against the known catalog, tolerating
small typos.

Usage::

    from radnt.resolver import CatalogEntry, resolve, UniqueFuzzy

    catalog = [CatalogEntry("alert"), CatalogEntry("avatar")]
    result = resolve("alrt", catalog)
    if isinstance(result, UniqueFuzzy):
        print(result.entry.name)   # "alert"
"""

from radnt.resolver.distance import levenshtein
from radnt.resolver.matcher import MAX_EDIT_DISTANCE, fuzzy_candidates, is_fuzzy_candidate, resolve
from radnt.resolver.models import (
    Ambiguous,
    CatalogEntry,
    Exact,
    MatchResult,
    NoMatch,
    UniqueFuzzy,
)

__all__ = [
    "MAX_EDIT_DISTANCE",
    "Ambiguous",
    "CatalogEntry",
    "Exact",
    "MatchResult",
    "NoMatch",
    "UniqueFuzzy",
    "fuzzy_candidates",
    "is_fuzzy_candidate",
    "levenshtein",
    "resolve",
]
