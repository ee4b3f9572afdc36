"""
Red-black graph: the bipartite species/character incidence structure.

Species and character vertices are identified by unique names. Every edge
joins a species to a character and is colored black (inactive relation) or
red (active relation). Enumeration order is insertion order, which drives the
order in which Hasse diagram construction sees species and characters.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from phylohasse.exceptions import RedBlackGraphError


class Color(Enum):
    """Color of a red-black graph edge."""

    BLACK = "black"
    RED = "red"


class VertexKind(Enum):
    """Kind of a red-black graph vertex."""

    SPECIES = "species"
    CHARACTER = "character"


class RedBlackGraph:
    """
    Bipartite graph of species and characters with colored edges.

    Attributes:
        _kinds: Vertex name to its kind, in insertion order
        _adjacency: Vertex name to {neighbour name: edge color}, in edge insertion order
    """

    def __init__(self) -> None:
        self._kinds: Dict[str, VertexKind] = {}
        self._adjacency: Dict[str, Dict[str, Color]] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_matrix(
        cls,
        matrix: Union[NDArray[np.int_], Sequence[Sequence[int]]],
        species_names: Optional[Sequence[str]] = None,
        character_names: Optional[Sequence[str]] = None,
    ) -> "RedBlackGraph":
        """
        Build a red-black graph from a binary species x character matrix.

        Row i is species i, column j is character j. A 1 at (i, j) becomes a
        black edge between them.

        Args:
            matrix: 2D array-like of 0/1 values
            species_names: Optional names for the rows (default s1..sn)
            character_names: Optional names for the columns (default c1..cm)

        Returns:
            The populated RedBlackGraph

        Raises:
            RedBlackGraphError: If the matrix is not 2D, not binary, or the
                name lists do not match its shape
        """
        try:
            array = np.asarray(matrix)
        except ValueError as e:
            raise RedBlackGraphError(
                "Incidence matrix must be a rectangular array of 0 and 1"
            ) from e
        if array.ndim != 2:
            raise RedBlackGraphError(
                f"Incidence matrix must be two-dimensional, got {array.ndim} dimension(s)"
            )
        if array.size and not np.isin(array, (0, 1)).all():
            raise RedBlackGraphError("Incidence matrix must contain only 0 and 1")

        n_species, n_characters = array.shape
        if species_names is None:
            species_names = [f"s{i + 1}" for i in range(n_species)]
        if character_names is None:
            character_names = [f"c{j + 1}" for j in range(n_characters)]
        if len(species_names) != n_species:
            raise RedBlackGraphError(
                f"Expected {n_species} species names, got {len(species_names)}"
            )
        if len(character_names) != n_characters:
            raise RedBlackGraphError(
                f"Expected {n_characters} character names, got {len(character_names)}"
            )

        graph = cls()
        for name in species_names:
            graph.add_species(name)
        for name in character_names:
            graph.add_character(name)
        for i, j in zip(*np.nonzero(array)):
            graph.add_edge(species_names[int(i)], character_names[int(j)])
        return graph

    def _add_vertex(self, name: str, kind: VertexKind) -> None:
        if name in self._kinds:
            raise RedBlackGraphError(
                f"Vertex {name!r} already exists as a {self._kinds[name].value}"
            )
        self._kinds[name] = kind
        self._adjacency[name] = {}

    def add_species(self, name: str) -> None:
        """Add a species vertex."""
        self._add_vertex(name, VertexKind.SPECIES)

    def add_character(self, name: str) -> None:
        """Add a character vertex."""
        self._add_vertex(name, VertexKind.CHARACTER)

    def add_edge(self, species: str, character: str, color: Color = Color.BLACK) -> None:
        """
        Join a species to a character.

        Re-adding an existing edge only updates its color.

        Raises:
            RedBlackGraphError: If either endpoint is unknown or of the wrong kind
        """
        self._require(species, VertexKind.SPECIES)
        self._require(character, VertexKind.CHARACTER)
        self._adjacency[species][character] = color
        self._adjacency[character][species] = color

    def _require(self, name: str, kind: VertexKind) -> None:
        found = self._kinds.get(name)
        if found is None:
            raise RedBlackGraphError(f"Unknown vertex {name!r}")
        if found is not kind:
            raise RedBlackGraphError(
                f"Vertex {name!r} is a {found.value}, expected a {kind.value}"
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def species(self) -> List[str]:
        """Species names in enumeration order."""
        return [n for n, k in self._kinds.items() if k is VertexKind.SPECIES]

    def characters(self) -> List[str]:
        """Character names in enumeration order."""
        return [n for n, k in self._kinds.items() if k is VertexKind.CHARACTER]

    def is_species(self, name: str) -> bool:
        return self._kinds.get(name) is VertexKind.SPECIES

    def adjacent_characters(self, species: str) -> List[str]:
        """Characters adjacent to a species, in edge insertion order."""
        self._require(species, VertexKind.SPECIES)
        return list(self._adjacency[species])

    def edge_color(self, species: str, character: str) -> Optional[Color]:
        """Color of the edge between species and character, or None if absent."""
        return self._adjacency.get(species, {}).get(character)

    def is_active(self, species: str) -> bool:
        """A species is active when at least one red edge is incident to it."""
        self._require(species, VertexKind.SPECIES)
        return any(c is Color.RED for c in self._adjacency[species].values())

    def is_universal(self, character: str) -> bool:
        """A character is universal when black edges join it to every species."""
        self._require(character, VertexKind.CHARACTER)
        neighbours = self._adjacency[character]
        return all(neighbours.get(s) is Color.BLACK for s in self.species())

    @property
    def num_species(self) -> int:
        return sum(1 for k in self._kinds.values() if k is VertexKind.SPECIES)

    @property
    def num_characters(self) -> int:
        return sum(1 for k in self._kinds.values() if k is VertexKind.CHARACTER)

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def __repr__(self) -> str:
        return (
            f"RedBlackGraph(species={self.num_species}, "
            f"characters={self.num_characters})"
        )
