"""Square type alias and coordinate helpers.

Board layout (32 dark squares, four per row, row 0 at the top):

     file:  0  1  2  3  4  5  6  7
    row 0:  .  0  .  1  .  2  .  3
    row 1:  4  .  5  .  6  .  7  .
    row 2:  .  8  .  9  . 10  . 11
    row 3: 12  . 13  . 14  . 15  .
    row 4:  . 16  . 17  . 18  . 19
    row 5: 20  . 21  . 22  . 23  .
    row 6:  . 24  . 25  . 26  . 27
    row 7: 28  . 29  . 30  . 31  .

Even rows hold their squares on odd files and odd rows on even files, so the
index delta of a diagonal step depends on the parity of the starting row.
The ``position_*`` helpers return raw arithmetic and are only meaningful when
the matching ``board_exists_*`` probe is true.
"""

from __future__ import annotations

from typing import TypeAlias

from checkie.core.enums import Direction, Team

Square: TypeAlias = int  # 0–31

BOARD_SIZE = 8
SQUARES_PER_ROW = BOARD_SIZE // 2
SQUARE_COUNT = BOARD_SIZE * SQUARES_PER_ROW


def row_of(sq: Square) -> int:
    """Row index 0–7, top to bottom."""
    return sq // SQUARES_PER_ROW


def column_of(sq: Square) -> int:
    """Position among the row's four dark squares, 0–3."""
    return sq % SQUARES_PER_ROW


def file_of(sq: Square) -> int:
    """Horizontal coordinate 0–7 on the full 8x8 grid."""
    offset = 1 if row_of(sq) % 2 == 0 else 0
    return column_of(sq) * 2 + offset


def make_square(file: int, row: int) -> Square:
    """Create square from grid file (0–7) and row (0–7)."""
    if not (0 <= file < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise ValueError(f"Coordinates off the board: ({file}, {row})")
    if (file + row) % 2 == 0:
        raise ValueError(f"Not a playable square: ({file}, {row})")
    return row * SQUARES_PER_ROW + file // 2


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < SQUARE_COUNT


def square_name(sq: Square) -> str:
    """Standard 1-based checkers number, e.g. 0 → '1', 31 → '32'."""
    return str(sq + 1)


def parse_square(name: str) -> Square:
    """Parse a 1-based checkers number, e.g. '14' → 13."""
    if not name.isdigit() or not (1 <= int(name) <= SQUARE_COUNT):
        raise ValueError(f"Invalid square name: {name!r}")
    return int(name) - 1


# -- Edge probes --------------------------------------------------------------


def board_exists_up_one(sq: Square) -> bool:
    return row_of(sq) > 0


def board_exists_up_two(sq: Square) -> bool:
    return row_of(sq) > 1


def board_exists_down_one(sq: Square) -> bool:
    return row_of(sq) < BOARD_SIZE - 1


def board_exists_down_two(sq: Square) -> bool:
    return row_of(sq) < BOARD_SIZE - 2


def board_exists_left_one(sq: Square) -> bool:
    return row_of(sq) % 2 == 0 or column_of(sq) > 0


def board_exists_left_two(sq: Square) -> bool:
    return column_of(sq) > 0


def board_exists_right_one(sq: Square) -> bool:
    return row_of(sq) % 2 == 1 or column_of(sq) < SQUARES_PER_ROW - 1


def board_exists_right_two(sq: Square) -> bool:
    return column_of(sq) < SQUARES_PER_ROW - 1


# -- One-step diagonals -------------------------------------------------------


def board_exists_one_diagonal_up_left(sq: Square) -> bool:
    return board_exists_up_one(sq) and board_exists_left_one(sq)


def board_exists_one_diagonal_up_right(sq: Square) -> bool:
    return board_exists_up_one(sq) and board_exists_right_one(sq)


def board_exists_one_diagonal_down_left(sq: Square) -> bool:
    return board_exists_down_one(sq) and board_exists_left_one(sq)


def board_exists_one_diagonal_down_right(sq: Square) -> bool:
    return board_exists_down_one(sq) and board_exists_right_one(sq)


def position_one_diagonal_up_left(sq: Square) -> Square:
    if row_of(sq) % 2 == 0:
        return sq - SQUARES_PER_ROW
    return sq - SQUARES_PER_ROW - 1


def position_one_diagonal_up_right(sq: Square) -> Square:
    if row_of(sq) % 2 == 0:
        return sq - SQUARES_PER_ROW + 1
    return sq - SQUARES_PER_ROW


def position_one_diagonal_down_left(sq: Square) -> Square:
    if row_of(sq) % 2 == 0:
        return sq + SQUARES_PER_ROW
    return sq + SQUARES_PER_ROW - 1


def position_one_diagonal_down_right(sq: Square) -> Square:
    if row_of(sq) % 2 == 0:
        return sq + SQUARES_PER_ROW + 1
    return sq + SQUARES_PER_ROW


# -- Two-step diagonals (capture landings) ------------------------------------


def board_exists_two_diagonal_up_left(sq: Square) -> bool:
    return board_exists_up_two(sq) and board_exists_left_two(sq)


def board_exists_two_diagonal_up_right(sq: Square) -> bool:
    return board_exists_up_two(sq) and board_exists_right_two(sq)


def board_exists_two_diagonal_down_left(sq: Square) -> bool:
    return board_exists_down_two(sq) and board_exists_left_two(sq)


def board_exists_two_diagonal_down_right(sq: Square) -> bool:
    return board_exists_down_two(sq) and board_exists_right_two(sq)


def position_two_diagonal_up_left(sq: Square) -> Square:
    return position_one_diagonal_up_left(position_one_diagonal_up_left(sq))


def position_two_diagonal_up_right(sq: Square) -> Square:
    return position_one_diagonal_up_right(position_one_diagonal_up_right(sq))


def position_two_diagonal_down_left(sq: Square) -> Square:
    return position_one_diagonal_down_left(position_one_diagonal_down_left(sq))


def position_two_diagonal_down_right(sq: Square) -> Square:
    return position_one_diagonal_down_right(position_one_diagonal_down_right(sq))


# -- Direction dispatch -------------------------------------------------------

_ONE_STEP_PROBES = {
    Direction.UP_RIGHT: (
        board_exists_one_diagonal_up_right,
        position_one_diagonal_up_right,
    ),
    Direction.UP_LEFT: (
        board_exists_one_diagonal_up_left,
        position_one_diagonal_up_left,
    ),
    Direction.DOWN_RIGHT: (
        board_exists_one_diagonal_down_right,
        position_one_diagonal_down_right,
    ),
    Direction.DOWN_LEFT: (
        board_exists_one_diagonal_down_left,
        position_one_diagonal_down_left,
    ),
}

_TWO_STEP_PROBES = {
    Direction.UP_RIGHT: (
        board_exists_two_diagonal_up_right,
        position_two_diagonal_up_right,
    ),
    Direction.UP_LEFT: (
        board_exists_two_diagonal_up_left,
        position_two_diagonal_up_left,
    ),
    Direction.DOWN_RIGHT: (
        board_exists_two_diagonal_down_right,
        position_two_diagonal_down_right,
    ),
    Direction.DOWN_LEFT: (
        board_exists_two_diagonal_down_left,
        position_two_diagonal_down_left,
    ),
}


def one_step(sq: Square, direction: Direction) -> Square | None:
    """Neighbouring square in *direction*, or None at the board edge."""
    exists, position = _ONE_STEP_PROBES[direction]
    return position(sq) if exists(sq) else None


def two_step(sq: Square, direction: Direction) -> Square | None:
    """Square two diagonal steps away in *direction*, or None if off-board."""
    exists, position = _TWO_STEP_PROBES[direction]
    return position(sq) if exists(sq) else None


def in_kingmaker_row(sq: Square, team: Team) -> bool:
    """Whether a man of *team* landing on *sq* is crowned."""
    if team == Team.RED:
        return not board_exists_down_one(sq)
    return not board_exists_up_one(sq)

