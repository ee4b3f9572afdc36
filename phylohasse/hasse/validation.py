"""
Invariant checks for Hasse diagrams.

These are used by the test suite and by callers that edit a diagram in
place (remove_vertex, reduce_diagram) and want to confirm it is still a
valid diagram of its poset.
"""

from __future__ import annotations
from collections import deque
from typing import Deque, Dict, List, Optional, Set

from phylohasse.exceptions import HasseInvariantError
from phylohasse.hasse.diagram import HasseDiagram
from phylohasse.hasse.poset_relations import is_proper_subset
from phylohasse.logger import hd_logger, format_set


def is_acyclic(diagram: HasseDiagram) -> bool:
    """Return True if the diagram has no directed cycle (Kahn's algorithm)."""
    in_degree: Dict[int, int] = {v.index: diagram.in_degree(v.index) for v in diagram}
    queue: Deque[int] = deque(i for i, d in in_degree.items() if d == 0)
    visited = 0
    while queue:
        current = queue.popleft()
        visited += 1
        for nxt in diagram.successors(current):
            in_degree[nxt] -= 1
            if in_degree[nxt] == 0:
                queue.append(nxt)
    return visited == len(diagram)


def has_unique_character_sets(diagram: HasseDiagram) -> bool:
    """Return True if no two vertices share a character set."""
    seen: Set[frozenset] = set()
    for vertex in diagram:
        if vertex.character_set in seen:
            return False
        seen.add(vertex.character_set)
    return True


def _covering_violation(diagram: HasseDiagram) -> Optional[str]:
    vertices = diagram.vertices()
    for edge in diagram.edges():
        lower = diagram.vertex(edge.source).character_set
        upper = diagram.vertex(edge.target).character_set
        if not is_proper_subset(lower, upper):
            return (
                f"edge {edge.source} -> {edge.target} joins {format_set(lower)} "
                f"and {format_set(upper)}, which are not properly included"
            )
        for middle in vertices:
            if is_proper_subset(lower, middle.character_set) and is_proper_subset(
                middle.character_set, upper
            ):
                return (
                    f"edge {edge.source} -> {edge.target} skips vertex "
                    f"{middle.index} {format_set(middle.character_set)}"
                )
    return None


def is_covering(diagram: HasseDiagram) -> bool:
    """
    Return True if every edge is a covering relation: C(u) ⊊ C(v) with no
    vertex strictly between them.
    """
    return _covering_violation(diagram) is None


def check_diagram(diagram: HasseDiagram, covering: bool = True) -> None:
    """
    Raise HasseInvariantError describing the first violated invariant.

    Args:
        diagram: The diagram to check
        covering: Also require every edge to be a covering relation
    """
    problems: List[str] = []
    if not has_unique_character_sets(diagram):
        problems.append("two vertices share a character set")
    if not is_acyclic(diagram):
        problems.append("the diagram contains a directed cycle")
    if covering:
        violation = _covering_violation(diagram)
        if violation is not None:
            problems.append(violation)

    if problems:
        message = "Invalid Hasse diagram: " + problems[0]
        hd_logger.error(message)
        raise HasseInvariantError(message)
