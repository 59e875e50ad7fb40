"""Tests for Board construction and action application."""

import logging

import pytest

from checkie.core.action import Capture, ChainCapture, Move
from checkie.core.board import Board
from checkie.core.enums import Team
from checkie.core.errors import IllegalActionError
from checkie.core.piece import Piece


class TestBoardInitial:
    def test_piece_counts(self, initial_board: Board) -> None:
        assert len(initial_board) == 24
        assert initial_board.piece_count(Team.RED) == 12
        assert initial_board.piece_count(Team.BLACK) == 12

    def test_red_home_rows(self, initial_board: Board) -> None:
        for sq in range(12):
            assert initial_board[sq] == Piece(sq, Team.RED)

    def test_black_home_rows(self, initial_board: Board) -> None:
        for sq in range(20, 32):
            assert initial_board[sq] == Piece(sq, Team.BLACK)

    def test_empty_middle(self, initial_board: Board) -> None:
        assert all(initial_board.is_empty(sq) for sq in range(12, 20))

    def test_no_kings(self, initial_board: Board) -> None:
        assert not any(p.is_king for p in initial_board)


class TestBoardConstruction:
    def test_duplicate_square_rejected(self) -> None:
        with pytest.raises(ValueError, match="Two pieces on square 5"):
            Board([Piece(5, Team.RED), Piece(5, Team.BLACK)])

    def test_off_board_rejected(self) -> None:
        with pytest.raises(ValueError, match="off the board"):
            Board([Piece(32, Team.RED)])

    def test_pieces_ordered_by_square(self) -> None:
        board = Board([Piece(20, Team.BLACK), Piece(3, Team.RED)])
        assert [p.position for p in board.pieces] == [3, 20]

    def test_pieces_of(self, initial_board: Board) -> None:
        assert all(p.team == Team.BLACK for p in initial_board.pieces_of(Team.BLACK))

    def test_contains(self, initial_board: Board) -> None:
        assert Piece(0, Team.RED) in initial_board
        assert Piece(0, Team.RED, is_king=True) not in initial_board
        assert Piece(16, Team.RED) not in initial_board

    def test_equality_ignores_insertion_order(self) -> None:
        a = Board([Piece(1, Team.RED), Piece(30, Team.BLACK)])
        b = Board([Piece(30, Team.BLACK), Piece(1, Team.RED)])
        assert a == b
        assert hash(a) == hash(b)

    def test_repr_diagram(self, initial_board: Board) -> None:
        lines = repr(initial_board).splitlines()
        assert len(lines) == 8
        assert lines[0].split() == ["r"] * 4
        assert lines[3].split() == ["."] * 4
        assert lines[7].split() == ["b"] * 4

    @pytest.mark.parametrize("sq", [-1, 32])
    def test_read_off_board_square_rejected(
        self, initial_board: Board, sq: int
    ) -> None:
        with pytest.raises(ValueError, match=f"Square {sq} is off the board"):
            initial_board[sq]
        with pytest.raises(ValueError, match="off the board"):
            initial_board.is_empty(sq)


class TestApplyMove:
    def test_relocates_piece(self, initial_board: Board) -> None:
        after = initial_board.apply(Move(21, 16))
        assert after[16] == Piece(16, Team.BLACK)
        assert after.is_empty(21)
        assert len(after) == len(initial_board)

    def test_source_board_untouched(self, initial_board: Board) -> None:
        initial_board.apply(Move(21, 16))
        assert initial_board == Board.initial()

    def test_black_man_crowned_on_top_row(self) -> None:
        board = Board([Piece(5, Team.BLACK)])
        assert board.apply(Move(5, 1))[1] == Piece(1, Team.BLACK, is_king=True)

    def test_black_man_not_crowned_elsewhere(self) -> None:
        board = Board([Piece(9, Team.BLACK)])
        assert board.apply(Move(9, 5))[5] == Piece(5, Team.BLACK)

    def test_red_man_crowned_on_bottom_row(self) -> None:
        board = Board([Piece(26, Team.RED)])
        assert board.apply(Move(26, 30))[30] == Piece(30, Team.RED, is_king=True)

    def test_king_stays_king(self) -> None:
        board = Board([Piece(4, Team.RED, is_king=True)])
        assert board.apply(Move(4, 0))[0] == Piece(0, Team.RED, is_king=True)

    def test_empty_origin_raises(self, initial_board: Board) -> None:
        with pytest.raises(IllegalActionError, match="No piece at origin square 16"):
            initial_board.apply(Move(16, 12))

    def test_occupied_destination_raises(self, initial_board: Board) -> None:
        with pytest.raises(IllegalActionError, match="taken"):
            initial_board.apply(Move(25, 21))

    def test_logs_applied_action(
        self, initial_board: Board, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="checkie.core.board"):
            initial_board.apply(Move(21, 16))
        assert "Applied 22-17" in caplog.text


class TestApplyCapture:
    def test_removes_two_adds_one(self) -> None:
        board = Board(
            [Piece(9, Team.RED), Piece(13, Team.BLACK), Piece(30, Team.BLACK)]
        )
        after = board.apply(Capture(9, 13, 16))
        assert after.pieces == (Piece(16, Team.RED), Piece(30, Team.BLACK))

    def test_capture_into_kingmaker_row_crowns(self) -> None:
        board = Board([Piece(21, Team.RED), Piece(25, Team.BLACK)])
        after = board.apply(Capture(21, 25, 30))
        assert after[30] == Piece(30, Team.RED, is_king=True)
        assert after.piece_count(Team.BLACK) == 0

    def test_empty_origin_raises(self) -> None:
        board = Board([Piece(13, Team.BLACK)])
        with pytest.raises(IllegalActionError):
            board.apply(Capture(9, 13, 16))

    def test_with_capture_without_promotion(self) -> None:
        board = Board([Piece(21, Team.RED), Piece(25, Team.BLACK)])
        after = board.with_capture(Capture(21, 25, 30), promote=False)
        assert after[30] == Piece(30, Team.RED)


class TestApplyChainCapture:
    def test_removes_every_captured_piece(self, fork_board: Board) -> None:
        chain = ChainCapture((Capture(1, 5, 8), Capture(8, 13, 17)))
        after = fork_board.apply(chain)
        assert after.pieces == (Piece(6, Team.BLACK), Piece(17, Team.RED))

    def test_crowned_when_kingmaker_row_visited_mid_chain(self) -> None:
        board = Board(
            [Piece(10, Team.BLACK), Piece(6, Team.RED), Piece(5, Team.RED)]
        )
        chain = ChainCapture((Capture(10, 6, 1), Capture(1, 5, 8)))
        after = board.apply(chain)
        assert after.pieces == (Piece(8, Team.BLACK, is_king=True),)

    def test_not_crowned_without_kingmaker_row(self, fork_board: Board) -> None:
        chain = ChainCapture((Capture(1, 5, 8), Capture(8, 13, 17)))
        assert fork_board.apply(chain)[17] == Piece(17, Team.RED)

    def test_king_stays_king(self) -> None:
        board = Board([Piece(1, Team.RED, is_king=True), Piece(5, Team.BLACK)])
        after = board.apply(ChainCapture((Capture(1, 5, 8),)))
        assert after[8] == Piece(8, Team.RED, is_king=True)

    def test_empty_origin_raises(self, fork_board: Board) -> None:
        chain = ChainCapture((Capture(0, 5, 10),))
        with pytest.raises(IllegalActionError, match="No piece at origin square 0"):
            fork_board.apply(chain)


class TestApplyUnknown:
    def test_unknown_action_type(self, initial_board: Board) -> None:
        with pytest.raises(TypeError, match="Unknown action"):
            initial_board.apply((21, 16))  # type: ignore[arg-type]
