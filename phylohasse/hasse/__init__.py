"""Hasse diagram construction and maintenance."""

from phylohasse.hasse.diagram import HasseDiagram, HasseEdge, HasseVertex
from phylohasse.hasse.extraction import extract_character_sets
from phylohasse.hasse.ordering import order_species
from phylohasse.hasse.construction import build_poset, hasse_diagram, insert_species
from phylohasse.hasse.transitive_reduction import (
    full_transitive_reduction,
    transitive_reduction,
)
from phylohasse.hasse.active_species import reduce_diagram
from phylohasse.hasse.formatting import diagram_table, format_diagram
from phylohasse.hasse.poset_relations import (
    are_incomparable,
    gained_characters,
    is_included,
    is_proper_subset,
)
from phylohasse.hasse.validation import (
    check_diagram,
    has_unique_character_sets,
    is_acyclic,
    is_covering,
)

__all__ = [
    "HasseDiagram",
    "HasseEdge",
    "HasseVertex",
    "extract_character_sets",
    "order_species",
    "build_poset",
    "hasse_diagram",
    "insert_species",
    "transitive_reduction",
    "full_transitive_reduction",
    "reduce_diagram",
    "diagram_table",
    "format_diagram",
    "are_incomparable",
    "gained_characters",
    "is_included",
    "is_proper_subset",
    "check_diagram",
    "has_unique_character_sets",
    "is_acyclic",
    "is_covering",
]
