from phylohasse.elements.red_black_graph import Color, RedBlackGraph, VertexKind
from phylohasse.elements.signed_character import SignedCharacter, State

__all__ = ["Color", "RedBlackGraph", "VertexKind", "SignedCharacter", "State"]
