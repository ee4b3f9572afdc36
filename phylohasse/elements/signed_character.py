from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class State(Enum):
    """State change of a character along a Hasse diagram edge."""

    LOSE = "-"
    GAIN = "+"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SignedCharacter:
    """
    A character paired with its state change.

    The character c is gained on the edge (x, y) when c has state 0 in x and
    state 1 in y; the edge is then labeled c+. Conversely a lost character is
    labeled c-.
    """

    character: str
    state: State = State.GAIN

    def __str__(self) -> str:
        return f"{self.character}{self.state}"
