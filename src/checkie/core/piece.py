"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import ALL_DIRECTIONS, Direction, Team
from checkie.core.types import Square

# Diagram character ↔ (Team, is_king)
_CHAR_MAP: dict[str, tuple[Team, bool]] = {
    "r": (Team.RED, False),
    "R": (Team.RED, True),
    "b": (Team.BLACK, False),
    "B": (Team.BLACK, True),
}

_CHARS: dict[tuple[Team, bool], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a checkers piece on its square.

    A piece has no identity beyond its fields; "the piece on square N" is
    whatever the board holds there.
    """

    position: Square
    team: Team
    is_king: bool = False

    @property
    def directions(self) -> tuple[Direction, ...]:
        """Directions this piece may move and capture in."""
        return ALL_DIRECTIONS if self.is_king else self.team.forward

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (lowercase = man, uppercase = king)."""
        return _CHARS[(self.team, self.is_king)]

    @classmethod
    def from_char(cls, char: str, position: Square) -> Piece:
        """Create piece from diagram character, e.g. 'R' → red king."""
        try:
            team, is_king = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(position, team, is_king)

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛀."""
        if self.team == Team.RED:
            return "⛃" if self.is_king else "⛂"
        return "⛁" if self.is_king else "⛀"
