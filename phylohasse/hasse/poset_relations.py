"""
Poset Relations: pure predicates for comparing character sets under inclusion.

The empty set is included in every set and includes only the empty set.
"""

from __future__ import annotations
from typing import AbstractSet, Iterable, List

from phylohasse.elements.signed_character import SignedCharacter, State


def is_included(left: Iterable[str], right: AbstractSet[str]) -> bool:
    """
    Return True if every character of left is present in right (left ⊆ right).

    Examples:
        >>> is_included(["c1"], {"c1", "c2"})  # True
        >>> is_included([], {"c1"})            # True: vacuous
        >>> is_included(["c3"], {"c1", "c2"})  # False
    """
    for character in left:
        if character not in right:
            # stop at the first character of left missing from right
            return False
    return True


def is_proper_subset(left: AbstractSet[str], right: AbstractSet[str]) -> bool:
    """Return True if left ⊊ right."""
    return len(left) < len(right) and is_included(left, right)


def are_incomparable(left: AbstractSet[str], right: AbstractSet[str]) -> bool:
    """Return True if neither set includes the other."""
    return not is_included(left, right) and not is_included(right, left)


def gained_characters(
    lower: AbstractSet[str], upper: Iterable[str]
) -> List[SignedCharacter]:
    """
    Label the edge lower -> upper with the characters gained along it.

    The characters of upper missing from lower are returned in upper's order,
    each with State.GAIN.

    Examples:
        >>> gained_characters({"c2"}, ["c1", "c2", "c5"])  # [c1+, c5+]
    """
    return [
        SignedCharacter(character, State.GAIN)
        for character in upper
        if character not in lower
    ]
