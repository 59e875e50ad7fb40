"""Action value objects: a plain move, a single jump, or a chain of jumps.

``Action`` is a closed union; consumers dispatch on it with ``match`` and
treat any other value as a programming error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from checkie.core.errors import IllegalActionError
from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Non-capturing one-step diagonal relocation."""

    origin: Square
    destination: Square

    @property
    def captured_positions(self) -> tuple[Square, ...]:
        return ()

    @property
    def path(self) -> tuple[Square, ...]:
        return (self.origin, self.destination)

    def __str__(self) -> str:
        return f"{square_name(self.origin)}-{square_name(self.destination)}"


@dataclass(frozen=True, slots=True)
class Capture:
    """Single jump over the opponent piece on *captured_position*."""

    origin: Square
    captured_position: Square
    destination: Square

    @property
    def captured_positions(self) -> tuple[Square, ...]:
        return (self.captured_position,)

    @property
    def path(self) -> tuple[Square, ...]:
        return (self.origin, self.destination)

    def __str__(self) -> str:
        return f"{square_name(self.origin)}x{square_name(self.destination)}"


@dataclass(frozen=True, slots=True)
class ChainCapture:
    """Consecutive jumps made by one piece in a single turn."""

    captures: tuple[Capture, ...]

    def __post_init__(self) -> None:
        # Accept any iterable but store a hashable tuple.
        object.__setattr__(self, "captures", tuple(self.captures))
        if not self.captures:
            raise IllegalActionError("Chain capture needs at least one capture")
        for prev, nxt in zip(self.captures, self.captures[1:]):
            if nxt.origin != prev.destination:
                raise IllegalActionError(
                    f"Chain capture is not contiguous: {prev} then {nxt}"
                )
        captured = self.captured_positions
        if len(set(captured)) != len(captured):
            raise IllegalActionError(
                f"Chain capture jumps a square twice: {captured}"
            )

    @property
    def origin(self) -> Square:
        return self.captures[0].origin

    @property
    def destination(self) -> Square:
        return self.captures[-1].destination

    @property
    def captured_positions(self) -> tuple[Square, ...]:
        return tuple(c.captured_position for c in self.captures)

    @property
    def path(self) -> tuple[Square, ...]:
        return (self.origin, *(c.destination for c in self.captures))

    def __len__(self) -> int:
        return len(self.captures)

    def __str__(self) -> str:
        return "x".join(square_name(sq) for sq in self.path)


Action: TypeAlias = Move | Capture | ChainCapture
