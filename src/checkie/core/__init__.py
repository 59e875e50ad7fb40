"""Core domain layer — pure checkers logic with zero external dependencies.

Quick start::

    from checkie.core import Rules

    board = Rules.initial_board()
    piece = board[21]
    for action in Rules.legal_actions_for(board, piece):
        print(action)
    board = Rules.apply_action(board, action)
"""

from checkie.core.action import Action, Capture, ChainCapture, Move
from checkie.core.board import Board
from checkie.core.enums import ALL_DIRECTIONS, Direction, Team
from checkie.core.errors import IllegalActionError
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import (
    STARTING_FEN,
    action_to_str,
    board_from_fen,
    board_to_fen,
    parse_action,
)
from checkie.core.piece import Piece
from checkie.core.rules import Rules
from checkie.core.types import (
    Square,
    column_of,
    file_of,
    in_kingmaker_row,
    make_square,
    one_step,
    parse_square,
    row_of,
    square_name,
    two_step,
)

__all__ = [
    # Enums
    "ALL_DIRECTIONS",
    "Direction",
    "Team",
    # Types / helpers
    "Square",
    "column_of",
    "file_of",
    "in_kingmaker_row",
    "make_square",
    "one_step",
    "parse_square",
    "row_of",
    "square_name",
    "two_step",
    # Domain objects
    "Action",
    "Board",
    "Capture",
    "ChainCapture",
    "IllegalActionError",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_FEN",
    "action_to_str",
    "board_from_fen",
    "board_to_fen",
    "parse_action",
]
