from __future__ import annotations
from typing import List, Tuple

from phylohasse.elements.red_black_graph import RedBlackGraph
from phylohasse.logger import hd_logger, format_names

SpeciesCharacters = Tuple[str, Tuple[str, ...]]


def extract_character_sets(graph: RedBlackGraph) -> List[SpeciesCharacters]:
    """
    Compute C(s) for every species s of the graph.

    Every adjacent character counts, whatever the color of the edge. Species
    are returned in the graph's enumeration order and each character tuple
    follows edge insertion order with duplicates impossible by construction.
    A species without characters yields an empty tuple.
    """
    pairs: List[SpeciesCharacters] = []
    for species in graph.species():
        characters = tuple(graph.adjacent_characters(species))
        hd_logger.debug(f"C({species}) = {format_names(characters)}")
        pairs.append((species, characters))
    return pairs
