"""Text formatting utilities for logging."""

from typing import Any, Iterable, Set


def format_set(s: Set[Any]) -> str:
    """Format set for consistent display."""
    if not s:
        return "∅"
    return "{" + ", ".join(str(x) for x in sorted(s)) + "}"


def format_names(names: Iterable[Any]) -> str:
    """Format an ordered collection of names, keeping its order."""
    values = [str(x) for x in names]
    if not values:
        return "∅"
    return "{" + ", ".join(values) + "}"
