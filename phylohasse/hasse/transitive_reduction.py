"""
Transitive Reduction
--------------------
Removes the edges of a Hasse diagram that are implied by other paths.

transitive_reduction() is the historical single sweep: it only looks for
shortcuts over a single intermediate vertex. full_transitive_reduction()
removes an edge whenever any other directed path joins its endpoints.
Neither moves the label of a removed edge onto the surviving path.
"""

from __future__ import annotations
from typing import Dict, Set

from phylohasse.hasse.diagram import HasseDiagram
from phylohasse.logger import hd_logger


def _describe(diagram: HasseDiagram, index: int) -> str:
    return "[" + " ".join(diagram.vertex(index).species) + "]"


def transitive_reduction(diagram: HasseDiagram) -> int:
    """
    Remove every edge p -> s for which a path p -> u -> s exists.

    Each vertex u with at least one predecessor and one successor is visited
    once, in enumeration order.

    Returns:
        Number of edges removed
    """
    removed = 0
    for vertex in diagram.vertices():
        u = vertex.index
        if diagram.in_degree(u) == 0 or diagram.out_degree(u) == 0:
            continue

        for p in diagram.predecessors(u):
            for s in diagram.successors(u):
                if not diagram.has_edge(p, s):
                    continue
                diagram.remove_edge(p, s)
                removed += 1
                hd_logger.debug(
                    f"removed {_describe(diagram, p)} -> {_describe(diagram, s)} "
                    f"(via {_describe(diagram, u)})"
                )
    return removed


def _reaches(
    diagram: HasseDiagram, start: int, goal: int, cache: Dict[int, Set[int]]
) -> bool:
    """Return True if goal is reachable from start."""
    if start not in cache:
        reached: Set[int] = set()
        stack = [start]
        while stack:
            current = stack.pop()
            for nxt in diagram.successors(current):
                if nxt not in reached:
                    reached.add(nxt)
                    stack.append(nxt)
        cache[start] = reached
    return goal in cache[start]


def full_transitive_reduction(diagram: HasseDiagram) -> int:
    """
    Remove every edge p -> s for which another path from p to s exists.

    Reachability is computed explicitly, so shortcuts over chains of any
    length are removed. Removing a redundant edge never changes which
    vertices are reachable from which, so the reachability cache stays valid
    for the whole pass and a second pass removes nothing.

    Returns:
        Number of edges removed
    """
    removed = 0
    cache: Dict[int, Set[int]] = {}
    for vertex in diagram.vertices():
        p = vertex.index
        for s in diagram.successors(p):
            others = [m for m in diagram.successors(p) if m != s]
            if any(_reaches(diagram, m, s, cache) for m in others):
                diagram.remove_edge(p, s)
                removed += 1
                hd_logger.debug(
                    f"removed {_describe(diagram, p)} -> {_describe(diagram, s)}"
                )
    return removed
