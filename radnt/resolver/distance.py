"""Levenshtein edit distance."""

from __future__ import annotations

import sys
from collections.abc import Sequence

# Native byte order so the 16-bit cast below yields the unit values.
_UTF16 = "utf-16-le" if sys.byteorder == "little" else "utf-16-be"


def code_units(text: str) -> Sequence[int]:
    """Return the UTF-16 code units of *text*.

    Characters outside the Basic Multilingual Plane become a surrogate pair,
    so ``len(code_units("\\U0001F600")) == 2``.
    """
    return memoryview(text.encode(_UTF16)).cast("H")


def levenshtein(a: str, b: str) -> int:
    """Return the minimum number of single-unit edits turning *a* into *b*.

    Insertions, deletions and substitutions each cost 1.  Strings are
    compared as raw UTF-16 code units, with no case folding or Unicode
    normalisation, so ``levenshtein("a", "A") == 1`` and an emoji counts as
    two units.

    Only two rows of the dynamic-programming matrix are kept alive at a time.

    Examples::

        levenshtein("alert", "alrt")    -> 1
        levenshtein("kitten", "sitting") -> 3
        levenshtein("", "tabs")         -> 4
    """
    if a == b:
        return 0
    units_a = code_units(a)
    units_b = code_units(b)
    if not units_a:
        return len(units_b)
    if not units_b:
        return len(units_a)

    previous = list(range(len(units_b) + 1))
    for i, unit_a in enumerate(units_a, start=1):
        current = [i]
        for j, unit_b in enumerate(units_b, start=1):
            if unit_a == unit_b:
                current.append(previous[j - 1])
            else:
                current.append(
                    1 + min(
                        previous[j - 1],  # substitute
                        previous[j],      # delete
                        current[j - 1],   # insert
                    )
                )
        previous = current
    return previous[-1]
