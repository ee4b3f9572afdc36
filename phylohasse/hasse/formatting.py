"""Text rendering of Hasse diagrams for diagnostics and verbose logs."""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from phylohasse.hasse.diagram import HasseDiagram, HasseEdge, HasseVertex


def format_vertex(vertex: HasseVertex) -> str:
    """Render a vertex as '[ s1 s2 ( c1 c2 ) ]'."""
    parts = ["["]
    parts.extend(vertex.species)
    parts.append("(")
    parts.extend(vertex.characters)
    parts.append(") ]")
    return " ".join(parts)


def format_label(edge: HasseEdge) -> str:
    """Render the signed characters of an edge as 'c1+,c2+'."""
    return ",".join(str(sc) for sc in edge.signed_characters)


def format_diagram(diagram: HasseDiagram) -> str:
    """
    Render the diagram one vertex per line.

    Each line is the vertex followed by one ' -labels-> [ target ];' segment
    per outgoing edge, for example:

        [ s3 ( c2 c3 c4 ) ]: -c1+,c5+,c7+-> [ s5 ( c1 c2 c3 c4 c5 c7 ) ];

    Lines are joined by newlines without a trailing one.
    """
    lines: List[str] = []
    for vertex in diagram.vertices():
        line = format_vertex(vertex) + ":"
        for edge in diagram.out_edges(vertex.index):
            target = diagram.vertex(edge.target)
            line += f" -{format_label(edge)}-> {format_vertex(target)};"
        lines.append(line)
    return "\n".join(lines)


def diagram_table(diagram: HasseDiagram) -> Tuple[List[List[str]], List[str]]:
    """
    Rows and headers describing every vertex, for TableLogger.table().
    """
    headers = ["Vertex", "Species", "Characters", "Out-edges"]
    rows: List[List[str]] = []
    for vertex in diagram.vertices():
        out = "; ".join(
            f"{format_label(e)} -> {e.target}"
            for e in diagram.out_edges(vertex.index)
        )
        rows.append(
            [
                str(vertex.index),
                " ".join(vertex.species),
                " ".join(vertex.characters),
                out,
            ]
        )
    return rows, headers
