"""Hasse diagrams of species ordered by character inclusion."""

from phylohasse.config import HasseConfig
from phylohasse.elements import Color, RedBlackGraph, SignedCharacter, State
from phylohasse.exceptions import (
    DuplicateCharacterSetError,
    EdgeNotFoundError,
    HasseDiagramError,
    HasseInvariantError,
    PhyloHasseError,
    RedBlackGraphError,
    VertexNotFoundError,
)
from phylohasse.hasse import (
    HasseDiagram,
    HasseEdge,
    HasseVertex,
    check_diagram,
    format_diagram,
    full_transitive_reduction,
    hasse_diagram,
    reduce_diagram,
    transitive_reduction,
)
from phylohasse.logger import hd_logger

__all__ = [
    "HasseConfig",
    "Color",
    "RedBlackGraph",
    "SignedCharacter",
    "State",
    "PhyloHasseError",
    "RedBlackGraphError",
    "HasseDiagramError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "DuplicateCharacterSetError",
    "HasseInvariantError",
    "HasseDiagram",
    "HasseEdge",
    "HasseVertex",
    "check_diagram",
    "format_diagram",
    "full_transitive_reduction",
    "hasse_diagram",
    "reduce_diagram",
    "transitive_reduction",
    "hd_logger",
]
