"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from checkie.core.board import Board
from checkie.core.enums import Team
from checkie.core.piece import Piece


@pytest.fixture
def initial_board() -> Board:
    """Standard starting position."""
    return Board.initial()


@pytest.fixture
def fork_board() -> Board:
    """Red man on 1 with two capture branches of different length.

    Down-left: 1x8 over 5, then 8x17 over 13.  Down-right: 1x10 over 6, then
    nothing further.
    """
    return Board(
        [
            Piece(1, Team.RED),
            Piece(5, Team.BLACK),
            Piece(6, Team.BLACK),
            Piece(13, Team.BLACK),
        ]
    )
