"""Board - immutable snapshot of the pieces on the 32 playable squares."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from checkie.core.action import Action, Capture, ChainCapture, Move
from checkie.core.enums import Team
from checkie.core.errors import IllegalActionError
from checkie.core.piece import Piece
from checkie.core.types import (
    BOARD_SIZE,
    SQUARE_COUNT,
    Square,
    in_kingmaker_row,
    is_valid_square,
    make_square,
)

_LOGGER = logging.getLogger(__name__)

_RED_HOME = range(0, 12)
_BLACK_HOME = range(SQUARE_COUNT - 12, SQUARE_COUNT)


class Board:
    """Immutable 32-square board.

    Every transition returns a new :class:`Board`; no instance is ever
    modified after construction, so snapshots can be shared freely between
    readers.
    """

    __slots__ = ("_squares",)

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        squares: list[Piece | None] = [None] * SQUARE_COUNT
        for piece in pieces:
            if not is_valid_square(piece.position):
                raise ValueError(f"Piece off the board: {piece!r}")
            if squares[piece.position] is not None:
                raise ValueError(f"Two pieces on square {piece.position}")
            squares[piece.position] = piece
        self._squares: tuple[Piece | None, ...] = tuple(squares)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            raise ValueError(f"Square {sq} is off the board")
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    @property
    def pieces(self) -> tuple[Piece, ...]:
        """All pieces, ordered by square."""
        return tuple(p for p in self._squares if p is not None)

    def pieces_of(self, team: Team) -> tuple[Piece, ...]:
        """Pieces belonging to *team*, ordered by square."""
        return tuple(p for p in self._squares if p is not None and p.team == team)

    def piece_count(self, team: Team) -> int:
        return len(self.pieces_of(team))

    # -- Transitions --------------------------------------------------------

    def apply(self, action: Action) -> Board:
        """Return the board that results from playing *action*.

        Raises:
            IllegalActionError: No piece stands on the action's origin.
        """
        match action:
            case Move():
                board = self._apply_move(action)
            case Capture():
                board = self.with_capture(action, promote=True)
            case ChainCapture():
                board = self._apply_chain(action)
            case _:
                raise TypeError(f"Unknown action: {action!r}")
        _LOGGER.debug("Applied %s", action)
        return board

    def with_capture(self, capture: Capture, *, promote: bool) -> Board:
        """Single jump; with ``promote=False`` the piece keeps its king status.

        The chain search walks through unpromoted intermediate boards and
        leaves crowning to the final :meth:`apply`.
        """
        piece = self._acting_piece(capture.origin)
        is_king = piece.is_king
        if promote and not is_king:
            is_king = in_kingmaker_row(capture.destination, piece.team)
        return self._replace(
            (capture.origin, capture.captured_position),
            replace(piece, position=capture.destination, is_king=is_king),
        )

    def _apply_move(self, move: Move) -> Board:
        piece = self._acting_piece(move.origin)
        is_king = piece.is_king or in_kingmaker_row(move.destination, piece.team)
        return self._replace(
            (move.origin,),
            replace(piece, position=move.destination, is_king=is_king),
        )

    def _apply_chain(self, chain: ChainCapture) -> Board:
        piece = self._acting_piece(chain.origin)
        # Crowned if any landing square was on the kingmaker row, not only
        # the last one.
        is_king = piece.is_king or any(
            in_kingmaker_row(c.destination, piece.team) for c in chain.captures
        )
        return self._replace(
            (piece.position, *chain.captured_positions),
            replace(piece, position=chain.destination, is_king=is_king),
        )

    def _acting_piece(self, origin: Square) -> Piece:
        piece = self._squares[origin] if is_valid_square(origin) else None
        if piece is None:
            raise IllegalActionError(f"No piece at origin square {origin}")
        return piece

    def _replace(self, removed: Iterable[Square], added: Piece) -> Board:
        gone = set(removed)
        if not is_valid_square(added.position):
            raise IllegalActionError(f"Destination square {added.position} is off board")
        if added.position not in gone and self._squares[added.position] is not None:
            raise IllegalActionError(f"Destination square {added.position} is taken")
        kept = [p for p in self._squares if p is not None and p.position not in gone]
        return Board([*kept, added])

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: Red on squares 0-11, Black on 20-31."""
        red = [Piece(sq, Team.RED) for sq in _RED_HOME]
        black = [Piece(sq, Team.BLACK) for sq in _BLACK_HOME]
        return cls(red + black)

    # -- Dunder helpers -----------------------------------------------------

    def __len__(self) -> int:
        return sum(1 for p in self._squares if p is not None)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.pieces)

    def __contains__(self, piece: object) -> bool:
        if not isinstance(piece, Piece) or not is_valid_square(piece.position):
            return False
        return self._squares[piece.position] == piece

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for file in range(BOARD_SIZE):
                if (file + row) % 2 == 0:
                    cells.append(" ")
                    continue
                p = self._squares[make_square(file, row)]
                cells.append(str(p) if p else ".")
            rows.append(" ".join(cells))
        return "\n".join(rows)
