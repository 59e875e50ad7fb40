"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Direction(IntEnum):
    """Diagonal step direction; "up" means towards row 0."""

    UP_RIGHT = 0
    UP_LEFT = 1
    DOWN_RIGHT = 2
    DOWN_LEFT = 3


ALL_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


class Team(IntEnum):
    """Side color. Red starts on rows 0-2, Black on rows 5-7."""

    RED = 0
    BLACK = 1

    @property
    def opposite(self) -> Team:
        return Team(1 - self.value)

    @property
    def forward(self) -> tuple[Direction, ...]:
        """Directions a man of this team may move and capture in."""
        if self == Team.RED:
            return (Direction.DOWN_RIGHT, Direction.DOWN_LEFT)
        return (Direction.UP_RIGHT, Direction.UP_LEFT)

    def __str__(self) -> str:
        return self.name.lower()
