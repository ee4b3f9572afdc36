from __future__ import annotations
from typing import List

from phylohasse.elements.red_black_graph import RedBlackGraph
from phylohasse.hasse.diagram import HasseDiagram
from phylohasse.logger import hd_logger


def reduce_diagram(diagram: HasseDiagram, graph: RedBlackGraph) -> List[int]:
    """
    Remove active species from a Hasse diagram.

    A species is active if a red edge of graph is incident to it. Active
    species are dropped from the vertex labels; a vertex left without any
    species is removed together with its edges. Species unknown to graph are
    kept.

    Returns:
        Indices of the removed vertices
    """
    removed: List[int] = []
    for vertex in diagram.vertices():
        active = [
            s for s in vertex.species if graph.is_species(s) and graph.is_active(s)
        ]
        if not active:
            continue

        vertex.species = [s for s in vertex.species if s not in active]
        hd_logger.debug(
            f"active species {' '.join(active)} dropped from vertex {vertex.index}"
        )
        if not vertex.species:
            diagram.remove_vertex(vertex.index)
            removed.append(vertex.index)
    return removed
