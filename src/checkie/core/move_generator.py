"""Per-piece move, capture and chain-capture generation."""

from __future__ import annotations

import logging
from collections.abc import Callable

from checkie.core.action import Action, Capture, ChainCapture, Move
from checkie.core.board import Board
from checkie.core.enums import Direction
from checkie.core.errors import IllegalActionError
from checkie.core.piece import Piece
from checkie.core.types import SQUARE_COUNT, Square, one_step, two_step

_LOGGER = logging.getLogger(__name__)


# -- Precomputed lookup tables ---------------------------------------------


def _build_steps(
    step: Callable[[Square, Direction], Square | None],
) -> dict[Direction, tuple[Square | None, ...]]:
    # [direction][square] -> target square, or None off the board.
    return {
        direction: tuple(step(sq, direction) for sq in range(SQUARE_COUNT))
        for direction in Direction
    }


_ONE_STEP = _build_steps(one_step)
_TWO_STEP = _build_steps(two_step)


def _captures_on(board: Board, piece: Piece) -> list[Capture]:
    """At most one jump per direction the piece is allowed to use."""
    captures: list[Capture] = []
    sq = piece.position
    for direction in piece.directions:
        landing = _TWO_STEP[direction][sq]
        if landing is None or not board.is_empty(landing):
            continue
        over = _ONE_STEP[direction][sq]
        assert over is not None
        target = board[over]
        if target is not None and target.team != piece.team:
            captures.append(Capture(sq, over, landing))
    return captures


class MoveGenerator:
    """Generates actions for single pieces on a given :class:`Board`.

    The board is immutable, so a generator can be shared between threads
    and queried repeatedly with identical results.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_actions(self, piece: Piece) -> list[Action]:
        """Chain captures when the piece can jump, otherwise plain moves."""
        self._require_on_board(piece)
        chains = self.generate_chain_captures(piece)
        if chains:
            return list(chains)
        return list(self.generate_moves(piece))

    def generate_moves(self, piece: Piece) -> list[Move]:
        """One-step moves onto empty neighbouring squares."""
        self._require_on_board(piece)
        board = self._board
        moves: list[Move] = []
        for direction in piece.directions:
            to_sq = _ONE_STEP[direction][piece.position]
            if to_sq is not None and board.is_empty(to_sq):
                moves.append(Move(piece.position, to_sq))
        return moves

    def generate_captures(self, piece: Piece) -> list[Capture]:
        """Single jumps available to *piece* right now."""
        self._require_on_board(piece)
        return _captures_on(self._board, piece)

    def generate_chain_captures(self, piece: Piece) -> list[ChainCapture]:
        """Every maximal jump sequence starting with *piece*.

        All terminal branches are returned, not only the longest ones; a
        sequence that can still be extended is never returned on its own.
        """
        self._require_on_board(piece)
        chains: list[ChainCapture] = []
        self._search(piece, self._board, (), chains)
        if chains:
            _LOGGER.debug(
                "%d chain capture(s) from square %d, longest %d",
                len(chains),
                piece.position,
                max(len(c) for c in chains),
            )
        return chains

    # -- Search (private) ---------------------------------------------------

    def _require_on_board(self, piece: Piece) -> None:
        # Exact match, so a stale king flag is rejected too.
        if piece not in self._board:
            raise IllegalActionError(f"{piece!r} is not on the board")

    def _search(
        self,
        piece: Piece,
        board: Board,
        branch: tuple[Capture, ...],
        chains: list[ChainCapture],
    ) -> None:
        captures = _captures_on(board, piece)
        if not captures:
            if branch:
                chains.append(ChainCapture(branch))
            return

        for capture in captures:
            # Crowning is decided once the whole chain is applied.
            scratch = board.with_capture(capture, promote=False)
            moved = scratch[capture.destination]
            assert moved is not None
            self._search(moved, scratch, branch + (capture,), chains)
