from __future__ import annotations
from typing import List, Sequence

from phylohasse.hasse.extraction import SpeciesCharacters


def order_species(pairs: Sequence[SpeciesCharacters]) -> List[SpeciesCharacters]:
    """
    Sort (species, characters) pairs by ascending number of characters.

    The sort is stable: species with equally sized sets keep their input
    order. Building the diagram in this order means every vertex whose set can
    be included in C(v) already exists when v is processed, so edges always
    point to newer vertices and no cycle can form.
    """
    return sorted(pairs, key=lambda pair: len(set(pair[1])))
