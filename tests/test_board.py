"""Tests for board geometry, Othello rules and game state."""

import numpy as np
import pytest

from engine.board import Board, initial_snapshot, snapshot_from_rows
from engine.pieces import EMPTY, Side, side_from_label
from engine.rules import CORNER_INDICES, index_to_label, index_to_pos, label_to_index, pos_to_index

from tests.boards import BLACK_STUCK_ROWS, EMPTY_ROW


class TestRules:
    def test_labels(self):
        assert index_to_label(0) == "a1"
        assert index_to_label(19) == "d3"
        assert index_to_label(63) == "h8"
        assert label_to_index("D3") == 19
        assert label_to_index("h8") == 63

    @pytest.mark.parametrize("label", ["", "d", "z3", "d0", "d9", "33"])
    def test_bad_labels(self, label):
        with pytest.raises(ValueError):
            label_to_index(label)

    def test_index_position(self):
        assert index_to_pos(19) == (2, 3)
        assert pos_to_index((7, 7)) == 63

    def test_corners(self):
        assert CORNER_INDICES == (0, 7, 56, 63)

    def test_side_helpers(self):
        assert Side.BLACK.opponent() is Side.WHITE
        assert Side.WHITE.opponent() is Side.BLACK
        assert side_from_label("White") is Side.WHITE
        with pytest.raises(ValueError):
            side_from_label("red")


class TestOthelloBoardManager:
    def test_opening_moves(self, manager):
        board = initial_snapshot()
        assert manager.legal_moves(board, Side.BLACK) == [19, 26, 37, 44]
        assert manager.legal_moves(board, Side.WHITE) == [20, 29, 34, 43]

    def test_apply_move_flips_and_copies(self, manager):
        board = initial_snapshot()
        before = board.copy()
        after = manager.apply_move(board, 19, Side.BLACK)
        assert np.array_equal(board, before)
        assert after[19] == Side.BLACK
        assert after[27] == Side.BLACK
        assert manager.count_pieces(after, Side.BLACK) == 4
        assert manager.count_pieces(after, Side.WHITE) == 1

    def test_multi_direction_flip(self, manager):
        board = snapshot_from_rows(
            [
                "B.B.....",
                "WW......",
                "........",
                EMPTY_ROW,
                EMPTY_ROW,
                EMPTY_ROW,
                EMPTY_ROW,
                EMPTY_ROW,
            ]
        )
        assert manager.flips_for(board, label_to_index("a3"), Side.BLACK) == [label_to_index("a2"), label_to_index("b2")]
        assert manager.flips_for(board, label_to_index("b3"), Side.BLACK) == []

    def test_illegal_move_raises(self, manager):
        board = initial_snapshot()
        with pytest.raises(ValueError):
            manager.apply_move(board, 0, Side.BLACK)
        with pytest.raises(ValueError):
            manager.apply_move(board, 27, Side.BLACK)

    def test_count_pieces(self, manager):
        board = initial_snapshot()
        assert manager.count_pieces(board, Side.BLACK) == 2
        assert manager.count_pieces(board, Side.WHITE) == 2
        assert int(np.count_nonzero(board == EMPTY)) == 60


class TestBoard:
    def test_from_rows_validation(self):
        with pytest.raises(ValueError):
            Board.from_rows([EMPTY_ROW] * 7)
        with pytest.raises(ValueError):
            Board.from_rows(["X......."] + [EMPTY_ROW] * 7)
        with pytest.raises(ValueError):
            Board(cells=np.zeros(10, dtype=np.int8))

    def test_apply_move_switches_turn(self):
        board = Board()
        result = board.apply_move(19)
        assert result.placed == 19
        assert result.flipped == (27,)
        assert not result.passed
        assert board.current_turn is Side.WHITE
        assert board.ply_count == 1

    def test_illegal_move(self):
        board = Board()
        with pytest.raises(ValueError):
            board.apply_move(0)
        with pytest.raises(ValueError):
            board.apply_move(99)

    def test_pass_turn(self):
        board = Board.from_rows(BLACK_STUCK_ROWS, current_turn=Side.BLACK)
        assert board.get_legal_moves() == []
        assert board.game_over() == (False, None, False)
        result = board.pass_turn()
        assert result.passed
        assert board.current_turn is Side.WHITE
        assert board.consecutive_passes == 1
        with pytest.raises(ValueError):
            board.pass_turn()

    def test_game_over_winner(self):
        board = Board.from_rows(["BB......"] + [EMPTY_ROW] * 7)
        assert board.game_over() == (True, Side.BLACK, False)

    def test_game_over_draw(self):
        board = Board.from_rows(["B......W"] + [EMPTY_ROW] * 7)
        assert board.game_over() == (True, None, True)

    def test_clone_is_independent(self):
        board = Board()
        cloned = board.clone()
        cloned.apply_move(19)
        assert board.current_turn is Side.BLACK
        assert board.piece_count(Side.BLACK) == 2
        assert not np.shares_memory(board.cells, cloned.cells)

    def test_render_ascii(self):
        board = Board()
        lines = board.render_ascii(highlight=board.get_legal_moves()).splitlines()
        assert lines[0] == "   a b c d e f g h"
        assert lines[3] == " 3 . . . * . . . ."
        assert lines[4] == " 4 . . * W B . . ."
        assert lines[5] == " 5 . . . B W * . ."
