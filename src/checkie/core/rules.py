"""High-level rules facade used by interaction layers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.board import Board
from checkie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from checkie.core.action import Action
    from checkie.core.enums import Team
    from checkie.core.piece import Piece


class Rules:
    """Static entry points over immutable :class:`Board` snapshots."""

    # Product policy:
    # - Captures are mandatory per piece: a piece that can jump is never
    #   offered plain moves.
    # - Turn order, the maximum-capture rule across pieces and game end are
    #   left to the caller.

    @staticmethod
    def initial_board() -> Board:
        return Board.initial()

    @staticmethod
    def legal_actions_for(board: Board, piece: Piece) -> list[Action]:
        """Chain captures for *piece* if any exist, else its plain moves."""
        return MoveGenerator(board).generate_legal_actions(piece)

    @staticmethod
    def apply_action(board: Board, action: Action) -> Board:
        """Return the successor of *board*; the argument is left untouched."""
        return board.apply(action)

    @staticmethod
    def has_capture(board: Board, piece: Piece) -> bool:
        return bool(MoveGenerator(board).generate_captures(piece))

    @staticmethod
    def movable_pieces(board: Board, team: Team) -> list[Piece]:
        """Pieces of *team* with at least one legal action."""
        gen = MoveGenerator(board)
        return [p for p in board.pieces_of(team) if gen.generate_legal_actions(p)]
