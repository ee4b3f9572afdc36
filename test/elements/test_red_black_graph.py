import numpy as np
import pytest

from phylohasse.elements.red_black_graph import Color, RedBlackGraph
from phylohasse.exceptions import RedBlackGraphError


def test_enumeration_follows_insertion_order(universal_graph):
    assert universal_graph.species() == ["s3", "s4", "s5"]
    assert universal_graph.characters() == [
        "c1", "c2", "c3", "c4", "c5", "c6", "c7", "c8"
    ]
    assert universal_graph.num_species == 3
    assert universal_graph.num_characters == 8
    assert universal_graph.adjacent_characters("s5") == [
        "c1", "c2", "c3", "c4", "c5", "c7"
    ]


def test_universal_characters(universal_graph):
    """c2 is joined to every species by black edges; c4 only by red ones."""
    assert universal_graph.is_universal("c2") is True
    assert universal_graph.is_universal("c4") is False
    assert universal_graph.is_universal("c5") is False


def test_active_species(make_graph):
    graph = make_graph(
        {"s1": ["c1", "c2"], "s2": ["c2"]}, colors={("s1", "c1"): Color.RED}
    )
    assert graph.is_active("s1") is True
    assert graph.is_active("s2") is False
    assert graph.edge_color("s1", "c1") is Color.RED
    assert graph.edge_color("s2", "c1") is None


def test_readding_edge_updates_color():
    graph = RedBlackGraph()
    graph.add_species("s1")
    graph.add_character("c1")
    graph.add_edge("s1", "c1")
    graph.add_edge("s1", "c1", Color.RED)
    assert graph.adjacent_characters("s1") == ["c1"]
    assert graph.edge_color("s1", "c1") is Color.RED


def test_invalid_vertices_and_edges():
    graph = RedBlackGraph()
    graph.add_species("s1")
    graph.add_character("c1")

    with pytest.raises(RedBlackGraphError):
        graph.add_character("s1")
    with pytest.raises(RedBlackGraphError):
        graph.add_edge("s1", "c9")
    with pytest.raises(RedBlackGraphError):
        graph.add_edge("c1", "s1")
    with pytest.raises(RedBlackGraphError):
        graph.adjacent_characters("c1")


def test_from_matrix_default_names():
    matrix = np.array(
        [
            [0, 1, 1, 0],
            [1, 1, 0, 0],
            [0, 0, 0, 0],
        ]
    )
    graph = RedBlackGraph.from_matrix(matrix)

    assert graph.species() == ["s1", "s2", "s3"]
    assert graph.characters() == ["c1", "c2", "c3", "c4"]
    assert graph.adjacent_characters("s1") == ["c2", "c3"]
    assert graph.adjacent_characters("s2") == ["c1", "c2"]
    assert graph.adjacent_characters("s3") == []
    assert graph.edge_color("s1", "c2") is Color.BLACK


def test_from_matrix_accepts_nested_lists_and_names():
    graph = RedBlackGraph.from_matrix(
        [[1, 0], [1, 1]], species_names=["A", "B"], character_names=["x", "y"]
    )
    assert graph.adjacent_characters("B") == ["x", "y"]


@pytest.mark.parametrize(
    "matrix",
    [
        [1, 0, 1],
        [[0, 2], [1, 0]],
        [[1, 0], [1]],
    ],
)
def test_from_matrix_rejects_invalid_input(matrix):
    with pytest.raises(RedBlackGraphError):
        RedBlackGraph.from_matrix(matrix)


def test_from_matrix_rejects_name_mismatch():
    with pytest.raises(RedBlackGraphError):
        RedBlackGraph.from_matrix([[1, 0]], species_names=["a", "b"])
