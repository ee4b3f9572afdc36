"""
Hasse Diagram Data Model
========================

Given a red-black graph GM, the diagram P for GM is the Hasse diagram of the
poset (Ps, ≤) of all species of GM, where s1 ≤ s2 if C(s1) ⊆ C(s2) and C(s)
is the set of characters of s. Species with equal character sets share a
single vertex.

The diagram is an arena: vertices are addressed by stable integer indices
that are never reused, and every vertex keeps explicit in-edge and out-edge
lists in insertion order. Enumeration order is vertex creation order.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
)

from phylohasse.elements.signed_character import SignedCharacter
from phylohasse.exceptions import (
    DuplicateCharacterSetError,
    EdgeNotFoundError,
    VertexNotFoundError,
)

if TYPE_CHECKING:
    from phylohasse.elements.red_black_graph import RedBlackGraph


@dataclass
class HasseVertex:
    """
    A vertex of the Hasse diagram.

    Attributes:
        index: Stable index of the vertex inside its diagram
        species: Species labelling the vertex, in insertion order
        characters: Characters of the species, in display order
    """

    index: int
    species: List[str]
    characters: Tuple[str, ...]
    character_set: FrozenSet[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.character_set = frozenset(self.characters)


@dataclass
class HasseEdge:
    """
    A covering edge source -> target labelled by signed characters.
    """

    source: int
    target: int
    signed_characters: List[SignedCharacter] = field(default_factory=list)


class HasseDiagram:
    """
    Directed acyclic graph of species groups ordered by character inclusion.

    Attributes:
        graph: The red-black graph the diagram was built from
        maximal_reducible: The maximal reducible graph of the same reduction step
    """

    def __init__(
        self,
        graph: Optional[RedBlackGraph] = None,
        maximal_reducible: Optional[RedBlackGraph] = None,
    ) -> None:
        self.graph = graph
        self.maximal_reducible = (
            maximal_reducible if maximal_reducible is not None else graph
        )
        self._vertices: Dict[int, HasseVertex] = {}
        self._edges: Dict[Tuple[int, int], HasseEdge] = {}
        self._out: Dict[int, List[int]] = {}
        self._in: Dict[int, List[int]] = {}
        self._by_characters: Dict[FrozenSet[str], int] = {}
        self._next_index = 0

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(
        self, species: Sequence[str] | str, characters: Iterable[str]
    ) -> HasseVertex:
        """
        Add a vertex labelled by species with the given characters.

        Raises:
            DuplicateCharacterSetError: If another vertex already holds the
                same character set
        """
        if isinstance(species, str):
            species = [species]
        vertex = HasseVertex(
            self._next_index, list(species), tuple(dict.fromkeys(characters))
        )
        existing = self._by_characters.get(vertex.character_set)
        if existing is not None:
            DuplicateCharacterSetError.raise_duplicate(vertex.character_set, existing)

        self._next_index += 1
        self._vertices[vertex.index] = vertex
        self._out[vertex.index] = []
        self._in[vertex.index] = []
        self._by_characters[vertex.character_set] = vertex.index
        return vertex

    def remove_vertex(self, index: int) -> HasseVertex:
        """
        Remove a vertex and every edge incident to it.

        Edges between the remaining vertices are left untouched.

        Returns:
            The removed vertex
        """
        vertex = self.vertex(index)
        for source in list(self._in[index]):
            self.remove_edge(source, index)
        for target in list(self._out[index]):
            self.remove_edge(index, target)

        del self._vertices[index]
        del self._in[index]
        del self._out[index]
        del self._by_characters[vertex.character_set]
        return vertex

    def vertex(self, index: int) -> HasseVertex:
        try:
            return self._vertices[index]
        except KeyError:
            raise VertexNotFoundError(f"Vertex {index} is not in the diagram") from None

    def vertices(self) -> List[HasseVertex]:
        """Vertices in enumeration order."""
        return list(self._vertices.values())

    def find_vertex(self, characters: Iterable[str]) -> Optional[HasseVertex]:
        """Return the vertex holding exactly this character set, if any."""
        index = self._by_characters.get(frozenset(characters))
        return None if index is None else self._vertices[index]

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, index: object) -> bool:
        return index in self._vertices

    def __iter__(self) -> Iterator[HasseVertex]:
        return iter(self.vertices())

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(
        self,
        source: int,
        target: int,
        signed_characters: Iterable[SignedCharacter] = (),
    ) -> Tuple[HasseEdge, bool]:
        """
        Add the edge source -> target labelled by signed characters.

        Returns:
            The edge and True when it was created. If the edge already exists
            no duplicate is added: the existing edge is returned unchanged
            together with False.
        """
        self.vertex(source)
        self.vertex(target)
        existing = self._edges.get((source, target))
        if existing is not None:
            return existing, False

        edge = HasseEdge(source, target, list(signed_characters))
        self._edges[(source, target)] = edge
        self._out[source].append(target)
        self._in[target].append(source)
        return edge, True

    def remove_edge(self, source: int, target: int) -> HasseEdge:
        try:
            edge = self._edges.pop((source, target))
        except KeyError:
            raise EdgeNotFoundError(
                f"Edge {source} -> {target} is not in the diagram"
            ) from None
        self._out[source].remove(target)
        self._in[target].remove(source)
        return edge

    def edge(self, source: int, target: int) -> Optional[HasseEdge]:
        return self._edges.get((source, target))

    def has_edge(self, source: int, target: int) -> bool:
        return (source, target) in self._edges

    def edges(self) -> List[HasseEdge]:
        """Edges grouped by source vertex in enumeration order."""
        return [edge for vertex in self._vertices for edge in self.out_edges(vertex)]

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def out_edges(self, index: int) -> List[HasseEdge]:
        self.vertex(index)
        return [self._edges[(index, t)] for t in self._out[index]]

    def in_edges(self, index: int) -> List[HasseEdge]:
        self.vertex(index)
        return [self._edges[(s, index)] for s in self._in[index]]

    def successors(self, index: int) -> List[int]:
        self.vertex(index)
        return list(self._out[index])

    def predecessors(self, index: int) -> List[int]:
        self.vertex(index)
        return list(self._in[index])

    def in_degree(self, index: int) -> int:
        self.vertex(index)
        return len(self._in[index])

    def out_degree(self, index: int) -> int:
        self.vertex(index)
        return len(self._out[index])

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    def find_source(self) -> Optional[HasseVertex]:
        """
        Return the first vertex, in enumeration order, with no incoming edges.

        A poset may have several minimal elements; this is the first one
        encountered, not a canonical minimum. Use sources() for all of them.
        """
        for index, vertex in self._vertices.items():
            if not self._in[index]:
                return vertex
        return None

    def sources(self) -> List[HasseVertex]:
        """All vertices with no incoming edges, in enumeration order."""
        return [v for i, v in self._vertices.items() if not self._in[i]]

    def __str__(self) -> str:
        from phylohasse.hasse.formatting import format_diagram

        return format_diagram(self)

    def __repr__(self) -> str:
        return f"HasseDiagram(vertices={self.num_vertices}, edges={self.num_edges})"
