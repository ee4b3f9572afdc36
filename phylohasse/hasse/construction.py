"""
Hasse Diagram Construction
--------------------------
Builds the Hasse diagram of the species of a red-black graph ordered by
character-set inclusion.

Pipeline:
  1. extract C(s) for every species
  2. sort species by ascending |C(s)| (stable)
  3. merge each species into a set-equal vertex or create a new vertex with
     in-edges from every vertex whose set it includes
  4. remove the edges implied by transitivity
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from phylohasse.config import FULL, HasseConfig
from phylohasse.elements.red_black_graph import RedBlackGraph
from phylohasse.exceptions import HasseInvariantError
from phylohasse.hasse.diagram import HasseDiagram, HasseVertex
from phylohasse.hasse.extraction import SpeciesCharacters, extract_character_sets
from phylohasse.hasse.formatting import diagram_table, format_diagram
from phylohasse.hasse.ordering import order_species
from phylohasse.hasse.poset_relations import gained_characters, is_included
from phylohasse.hasse.transitive_reduction import (
    full_transitive_reduction,
    transitive_reduction,
)
from phylohasse.logger import hd_logger, format_names


def insert_species(
    diagram: HasseDiagram, species: str, characters: Sequence[str]
) -> Tuple[HasseVertex, bool]:
    """
    Insert one species into a diagram under construction.

    Existing vertices are scanned in enumeration order. A vertex with the same
    character set absorbs the species and ends the scan. Otherwise every
    scanned vertex whose set is included in C(species) becomes the source of
    an edge to the new vertex, labelled by the characters it lacks.

    Returns:
        The vertex now holding the species and True if it was created
    """
    character_set = frozenset(characters)
    pending: List[HasseVertex] = []
    merged: Optional[HasseVertex] = None

    for vertex in diagram.vertices():
        if vertex.character_set == character_set:
            merged = vertex
            break
        if is_included(vertex.characters, character_set):
            pending.append(vertex)

    indexed = diagram.find_vertex(character_set)
    if indexed is not merged:
        message = (
            f"Vertex lookup for {format_names(characters)} disagrees with the "
            f"vertex scan while inserting {species}"
        )
        hd_logger.error(message)
        raise HasseInvariantError(message)

    if merged is not None:
        merged.species.append(species)
        hd_logger.debug(f"{species}: merged into [{' '.join(merged.species)}]")
        return merged, False

    vertex = diagram.add_vertex(species, characters)
    hd_logger.debug(f"{species}: added vertex {vertex.index}")
    for lower in pending:
        edge, _ = diagram.add_edge(
            lower.index,
            vertex.index,
            gained_characters(lower.character_set, vertex.characters),
        )
        hd_logger.debug(
            f"  edge [{' '.join(lower.species)}] "
            f"-{','.join(str(sc) for sc in edge.signed_characters)}-> "
            f"[{species}]"
        )
    return vertex, True


def build_poset(
    ordered: Sequence[SpeciesCharacters], diagram: HasseDiagram
) -> HasseDiagram:
    """
    Insert species into the diagram in the given order.

    The order must be non-decreasing in character-set size (see
    order_species); edges then only point from older to newer vertices.
    """
    for species, characters in ordered:
        insert_species(diagram, species, characters)
    return diagram


def hasse_diagram(
    graph: RedBlackGraph,
    maximal_reducible: Optional[RedBlackGraph] = None,
    config: Optional[HasseConfig] = None,
) -> HasseDiagram:
    """
    Build the Hasse diagram of the species of graph.

    Two species s1 and s2 are joined by the edge (s1, s2) if C(s1) ⊊ C(s2)
    and, after transitive reduction, no species s3 with s1 < s3 < s2 sits on a
    path between them.

    Args:
        graph: Red-black graph whose species and characters are read
        maximal_reducible: Maximal reducible graph recorded as provenance;
            defaults to graph
        config: Reduction mode and verbosity

    Returns:
        The completed HasseDiagram
    """
    config = config or HasseConfig()
    was_disabled = hd_logger.disabled
    if config.verbose:
        hd_logger.disabled = False

    try:
        hd_logger.section("Hasse diagram")
        pairs = extract_character_sets(graph)
        ordered = order_species(pairs)
        hd_logger.table(
            [[species, format_names(chars)] for species, chars in ordered],
            headers=["Species", "Characters"],
            title="Species by ascending character count",
        )

        diagram = build_poset(ordered, HasseDiagram(graph, maximal_reducible))
        hd_logger.subsection("Before transitive reduction")
        hd_logger.info(format_diagram(diagram))

        if config.reduction == FULL:
            removed = full_transitive_reduction(diagram)
        else:
            removed = transitive_reduction(diagram)

        hd_logger.result("Edges removed by transitive reduction", removed)
        rows, headers = diagram_table(diagram)
        hd_logger.table(rows, headers=headers, title="Hasse diagram")
        hd_logger.end_section()
        return diagram
    finally:
        hd_logger.disabled = was_disabled
