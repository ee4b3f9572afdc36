"""
Custom exceptions for Hasse diagram construction.
"""

from __future__ import annotations
from typing import FrozenSet, NoReturn


class PhyloHasseError(Exception):
    """Base exception for phylohasse errors."""

    pass


class RedBlackGraphError(PhyloHasseError):
    """Raised when a red-black graph is built with inconsistent vertices or edges."""

    pass


class HasseDiagramError(PhyloHasseError):
    """Base exception for Hasse diagram operations."""

    pass


class VertexNotFoundError(HasseDiagramError, KeyError):
    """Raised when a vertex index is not part of the diagram."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class EdgeNotFoundError(HasseDiagramError, KeyError):
    """Raised when an edge is not part of the diagram."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DuplicateCharacterSetError(HasseDiagramError):
    """Raised when a second vertex would carry an existing character set."""

    @staticmethod
    def raise_duplicate(characters: FrozenSet[str], existing: int) -> NoReturn:
        """
        Raise a DuplicateCharacterSetError for a character set already held by a vertex.

        Args:
            characters: The character set that was about to be inserted
            existing: Index of the vertex that already holds it

        Raises:
            DuplicateCharacterSetError: Always raised with the offending set
        """
        from phylohasse.logger import hd_logger

        message = (
            f"Character set {{{', '.join(sorted(characters))}}} already belongs "
            f"to vertex {existing}; species with equal character sets must be merged."
        )
        if not hd_logger.disabled:
            hd_logger.error(message)
        raise DuplicateCharacterSetError(message)


class HasseInvariantError(HasseDiagramError):
    """Raised when a diagram violates an invariant of the Hasse diagram."""

    pass
