import logging

import pytest

from phylohasse.elements.red_black_graph import Color, RedBlackGraph
from phylohasse.logger import hd_logger


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Exercise the logging calls in every algorithm under test
    hd_logger.disabled = False


def build_graph(species_characters, colors=None) -> RedBlackGraph:
    """
    Build a red-black graph from {species: [characters]}.

    Characters are created in order of first appearance. colors maps
    (species, character) to an edge color; edges default to black.
    """
    colors = colors or {}
    graph = RedBlackGraph()
    characters = []
    for species, chars in species_characters.items():
        graph.add_species(species)
        for c in chars:
            if c not in characters:
                characters.append(c)
    for c in characters:
        graph.add_character(c)
    for species, chars in species_characters.items():
        for c in chars:
            graph.add_edge(species, c, colors.get((species, c), Color.BLACK))
    return graph


@pytest.fixture
def make_graph():
    return build_graph


@pytest.fixture
def universal_graph() -> RedBlackGraph:
    """
    Three species over eight characters; c4 is joined to every species by a
    red edge, c6 and c8 are isolated characters.
    """
    graph = RedBlackGraph()
    for s in ("s3", "s4", "s5"):
        graph.add_species(s)
    for c in ("c1", "c2", "c3", "c4", "c5", "c6", "c7", "c8"):
        graph.add_character(c)

    graph.add_edge("s3", "c2")
    graph.add_edge("s3", "c3")
    graph.add_edge("s3", "c4", Color.RED)
    graph.add_edge("s4", "c1")
    graph.add_edge("s4", "c2")
    graph.add_edge("s4", "c4", Color.RED)
    graph.add_edge("s5", "c1")
    graph.add_edge("s5", "c2")
    graph.add_edge("s5", "c3")
    graph.add_edge("s5", "c4", Color.RED)
    graph.add_edge("s5", "c5")
    graph.add_edge("s5", "c7")
    return graph


@pytest.fixture
def chain_graph() -> RedBlackGraph:
    """Four nested species: a ⊊ b ⊊ c ⊊ d."""
    return build_graph(
        {
            "d": ["c1", "c2", "c3", "c4"],
            "b": ["c1", "c2"],
            "a": ["c1"],
            "c": ["c1", "c2", "c3"],
        }
    )


@pytest.fixture(autouse=True)
def clear_log_buffer():
    """Drop the HTML accumulated by hd_logger during a test."""
    yield
    hd_logger.clear()
