from phylohasse.elements.signed_character import SignedCharacter
from phylohasse.hasse.construction import build_poset, hasse_diagram
from phylohasse.hasse.diagram import HasseDiagram
from phylohasse.hasse.extraction import extract_character_sets
from phylohasse.hasse.ordering import order_species
from phylohasse.hasse.transitive_reduction import (
    full_transitive_reduction,
    transitive_reduction,
)
from phylohasse.hasse.validation import is_covering


def edge_pairs(diagram):
    return [(e.source, e.target) for e in diagram.edges()]


def chain_with_long_shortcut() -> HasseDiagram:
    """a -> b -> c -> d plus the three-hop shortcut a -> d."""
    diagram = HasseDiagram()
    a = diagram.add_vertex("a", [])
    b = diagram.add_vertex("b", ["c1"])
    c = diagram.add_vertex("c", ["c1", "c2"])
    d = diagram.add_vertex("d", ["c1", "c2", "c3"])
    diagram.add_edge(a.index, b.index, [SignedCharacter("c1")])
    diagram.add_edge(b.index, c.index, [SignedCharacter("c2")])
    diagram.add_edge(c.index, d.index, [SignedCharacter("c3")])
    diagram.add_edge(
        a.index,
        d.index,
        [SignedCharacter("c1"), SignedCharacter("c2"), SignedCharacter("c3")],
    )
    return diagram


def test_single_pass_removes_two_hop_shortcuts(chain_graph):
    raw = build_poset(
        order_species(extract_character_sets(chain_graph)), HasseDiagram(chain_graph)
    )
    removed = transitive_reduction(raw)

    assert removed == 3
    assert edge_pairs(raw) == [(0, 1), (1, 2), (2, 3)]


def test_single_pass_keeps_labels_of_surviving_edges(chain_graph):
    diagram = hasse_diagram(chain_graph)
    assert [str(sc) for sc in diagram.edge(0, 1).signed_characters] == ["c2+"]


def test_single_pass_misses_longer_shortcuts():
    diagram = chain_with_long_shortcut()
    assert transitive_reduction(diagram) == 0
    assert diagram.has_edge(0, 3)
    assert not is_covering(diagram)


def test_full_reduction_removes_longer_shortcuts():
    diagram = chain_with_long_shortcut()
    assert full_transitive_reduction(diagram) == 1
    assert edge_pairs(diagram) == [(0, 1), (1, 2), (2, 3)]
    assert is_covering(diagram)


def test_reduction_is_idempotent(universal_graph, chain_graph):
    for graph in (universal_graph, chain_graph):
        diagram = hasse_diagram(graph)
        before = edge_pairs(diagram)
        assert transitive_reduction(diagram) == 0
        assert full_transitive_reduction(diagram) == 0
        assert edge_pairs(diagram) == before


def test_reduction_on_empty_diagram():
    diagram = HasseDiagram()
    assert transitive_reduction(diagram) == 0
    assert full_transitive_reduction(diagram) == 0


def test_diamond_is_left_intact(make_graph):
    graph = make_graph(
        {"bottom": [], "left": ["c1"], "right": ["c2"], "top": ["c1", "c2"]}
    )
    diagram = hasse_diagram(graph)
    assert diagram.num_edges == 4
    assert not diagram.has_edge(0, 3)
