"""Board FEN and move-text parsing and serialisation.

Board FEN follows the PDN piece lists without the side-to-move field::

    R1,2,K3:B21,22,K32

Squares are 1-based, kings carry a ``K`` prefix and ``a-b`` ranges expand
to every square in between (``R1-12``).  Moves are written ``9-13``,
captures ``9x18`` and chains ``9x18x27``.
"""

from __future__ import annotations

from checkie.core.action import Action, Capture, ChainCapture, Move
from checkie.core.board import Board
from checkie.core.enums import Team
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.types import Square, parse_square, square_name

_TEAM_CHARS: dict[str, Team] = {"R": Team.RED, "B": Team.BLACK}
_TEAM_LETTERS: dict[Team, str] = {v: k for k, v in _TEAM_CHARS.items()}


# ── Board FEN ────────────────────────────────────────────────────────────────


def board_from_fen(fen: str) -> Board:
    """Parse a board FEN string into a :class:`Board`."""
    fields = fen.strip().split(":")
    if len(fields) != 2:
        raise ValueError(f"Invalid FEN (need 2 team fields): {fen!r}")

    pieces: list[Piece] = []
    seen_teams: set[Team] = set()
    for field in fields:
        team = _TEAM_CHARS.get(field[:1])
        if team is None:
            raise ValueError(f"Invalid FEN team field: {field!r}")
        if team in seen_teams:
            raise ValueError(f"Duplicate FEN team field: {field!r}")
        seen_teams.add(team)

        body = field[1:]
        if not body:
            continue
        for token in body.split(","):
            is_king = token.startswith("K")
            for sq in _parse_squares(token[1:] if is_king else token, fen):
                pieces.append(Piece(sq, team, is_king))

    # Board() rejects duplicate squares.
    return Board(pieces)


def board_to_fen(board: Board) -> str:
    """Serialise *board* as a board FEN string."""
    fields = []
    for team in (Team.RED, Team.BLACK):
        tokens = [
            ("K" if p.is_king else "") + square_name(p.position)
            for p in board.pieces_of(team)
        ]
        fields.append(_TEAM_LETTERS[team] + ",".join(tokens))
    return ":".join(fields)


def _parse_squares(token: str, fen: str) -> list[Square]:
    start, sep, end = token.partition("-")
    try:
        first = parse_square(start)
        last = parse_square(end) if sep else first
    except ValueError:
        raise ValueError(f"Invalid FEN square {token!r}: {fen!r}") from None
    if last < first:
        raise ValueError(f"Invalid FEN range {token!r}: {fen!r}")
    return list(range(first, last + 1))


STARTING_FEN = board_to_fen(Board.initial())


# ── Move text ────────────────────────────────────────────────────────────────


def action_to_str(action: Action) -> str:
    """Move text for *action*, e.g. ``'9-13'`` or ``'9x18x27'``."""
    match action:
        case Move() | Capture() | ChainCapture():
            return str(action)
        case _:
            raise TypeError(f"Unknown action: {action!r}")


def parse_action(board: Board, text: str) -> Action:
    """Resolve move text against the legal actions of the moving piece.

    A capture may be written with only its first and last squares
    (``9x27``) when that identifies a single chain.
    """
    text = text.strip()
    is_capture = "x" in text
    parts = text.split("x" if is_capture else "-")
    if len(parts) < 2 or (not is_capture and len(parts) != 2):
        raise ValueError(f"Invalid move text: {text!r}")
    try:
        squares = tuple(parse_square(p) for p in parts)
    except ValueError:
        raise ValueError(f"Invalid move text: {text!r}") from None

    piece = board[squares[0]]
    if piece is None:
        raise ValueError(f"No piece on square {parts[0]} for {text!r}")

    legal = MoveGenerator(board).generate_legal_actions(piece)
    candidates = [a for a in legal if isinstance(a, Move) != is_capture]

    exact = [a for a in candidates if a.path == squares]
    if exact:
        return exact[0]

    if is_capture and len(squares) == 2:
        shortened = [a for a in candidates if a.destination == squares[1]]
        if len(shortened) == 1:
            return shortened[0]
        if len(shortened) > 1:
            raise ValueError(f"Ambiguous capture {text!r}: give every square")

    raise ValueError(f"Illegal move {text!r}")
