"""Othello board snapshots, move legality and game state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ai.board_manager import BoardManager, MoveId, Snapshot
from engine.pieces import CELL_SYMBOL, EMPTY, SYMBOL_CELL, Side
from engine.rules import (
    BOARD_SIZE,
    COLUMN_LABELS,
    DIRECTIONS,
    NUM_CELLS,
    index_to_label,
    index_to_pos,
    pos_to_index,
    ray,
)


def empty_snapshot() -> Snapshot:
    """Return a board with no discs."""
    return np.zeros(NUM_CELLS, dtype=np.int8)


def initial_snapshot() -> Snapshot:
    """Return the standard Othello opening position."""
    cells = empty_snapshot()
    cells[pos_to_index((3, 3))] = int(Side.WHITE)
    cells[pos_to_index((4, 4))] = int(Side.WHITE)
    cells[pos_to_index((3, 4))] = int(Side.BLACK)
    cells[pos_to_index((4, 3))] = int(Side.BLACK)
    return cells


def snapshot_from_rows(rows: Sequence[str]) -> Snapshot:
    """Build a snapshot from eight strings of ``B``, ``W`` and ``.``."""
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
    cells = empty_snapshot()
    for row, text in enumerate(rows):
        symbols = text.replace(" ", "").upper()
        if len(symbols) != BOARD_SIZE:
            raise ValueError(f"Row {row} must have {BOARD_SIZE} cells: {text!r}")
        for col, symbol in enumerate(symbols):
            if symbol not in SYMBOL_CELL:
                raise ValueError(f"Unknown cell symbol {symbol!r} in row {row}")
            cells[pos_to_index((row, col))] = SYMBOL_CELL[symbol]
    return cells


class OthelloBoardManager(BoardManager):
    """Stateless Othello rules over flat ``int8`` snapshots."""

    def flips_for(self, board: Snapshot, move: MoveId, player: Side) -> List[MoveId]:
        """Indices flipped by ``player`` playing ``move``; empty when illegal."""
        if not 0 <= move < NUM_CELLS or board[move] != EMPTY:
            return []
        opponent = int(player.opponent())
        origin = index_to_pos(move)
        flipped: List[MoveId] = []
        for direction in DIRECTIONS:
            run: List[MoveId] = []
            for pos in ray(origin, direction):
                cell = int(board[pos_to_index(pos)])
                if cell == opponent:
                    run.append(pos_to_index(pos))
                    continue
                if cell == int(player) and run:
                    flipped.extend(run)
                break
        return flipped

    def is_legal(self, board: Snapshot, move: MoveId, player: Side) -> bool:
        return bool(self.flips_for(board, move, player))

    def legal_moves(self, board: Snapshot, player: Side) -> List[MoveId]:
        """Legal moves in ascending cell order."""
        return [index for index in range(NUM_CELLS) if self.is_legal(board, index, player)]

    def apply_move(self, board: Snapshot, move: MoveId, player: Side) -> Snapshot:
        flipped = self.flips_for(board, move, player)
        if not flipped:
            raise ValueError(f"Illegal move for {player.label}: {index_to_label(move)}")
        result = board.copy()
        result[move] = int(player)
        result[flipped] = int(player)
        return result

    def count_pieces(self, board: Snapshot, player: Side) -> int:
        return int(np.count_nonzero(board == int(player)))


@dataclass(frozen=True)
class MoveResult:
    """Result metadata for an applied move or pass."""

    placed: Optional[MoveId]
    flipped: Tuple[MoveId, ...]
    passed: bool


class Board:
    """Othello game state: snapshot plus turn sequencing and pass handling."""

    size: int = BOARD_SIZE

    def __init__(
        self,
        cells: Optional[Snapshot] = None,
        current_turn: Side = Side.BLACK,
        manager: Optional[OthelloBoardManager] = None,
    ) -> None:
        self.cells = initial_snapshot() if cells is None else np.array(cells, dtype=np.int8)
        if self.cells.shape != (NUM_CELLS,):
            raise ValueError(f"Board snapshot must have {NUM_CELLS} cells, got shape {self.cells.shape}")
        self.current_turn = current_turn
        self.manager = manager or OthelloBoardManager()
        self.ply_count = 0
        self.consecutive_passes = 0

    @classmethod
    def from_rows(cls, rows: Sequence[str], current_turn: Side = Side.BLACK) -> "Board":
        return cls(cells=snapshot_from_rows(rows), current_turn=current_turn)

    def clone(self) -> "Board":
        """Copy board state; the snapshot is never shared."""
        cloned = Board(cells=self.cells.copy(), current_turn=self.current_turn, manager=self.manager)
        cloned.ply_count = self.ply_count
        cloned.consecutive_passes = self.consecutive_passes
        return cloned

    def get_legal_moves(self, side: Optional[Side] = None) -> List[MoveId]:
        """Generate legal moves for ``side`` (default: the side to move)."""
        return self.manager.legal_moves(self.cells, side or self.current_turn)

    def piece_count(self, side: Side) -> int:
        return self.manager.count_pieces(self.cells, side)

    def apply_move(self, move: MoveId) -> MoveResult:
        """Apply a legal move and switch turn."""
        mover = self.current_turn
        flipped = self.manager.flips_for(self.cells, move, mover)
        if not flipped:
            raise ValueError(f"Illegal move: {index_to_label(move) if 0 <= move < NUM_CELLS else move}")
        self.cells = self.manager.apply_move(self.cells, move, mover)
        self.ply_count += 1
        self.consecutive_passes = 0
        self.current_turn = mover.opponent()
        return MoveResult(placed=move, flipped=tuple(flipped), passed=False)

    def pass_turn(self) -> MoveResult:
        """Hand the turn over when the side to move has no legal move."""
        if self.get_legal_moves():
            raise ValueError(f"{self.current_turn.label} has legal moves and cannot pass")
        self.ply_count += 1
        self.consecutive_passes += 1
        self.current_turn = self.current_turn.opponent()
        return MoveResult(placed=None, flipped=(), passed=True)

    def game_over(self) -> Tuple[bool, Optional[Side], bool]:
        """Return (is_terminal, winner, is_draw)."""
        if self.get_legal_moves(Side.BLACK) or self.get_legal_moves(Side.WHITE):
            return False, None, False
        black = self.piece_count(Side.BLACK)
        white = self.piece_count(Side.WHITE)
        if black == white:
            return True, None, True
        return True, (Side.BLACK if black > white else Side.WHITE), False

    def render_ascii(self, highlight: Iterable[MoveId] = ()) -> str:
        """Return a simple human-readable board representation."""
        marked = set(highlight)
        lines: List[str] = ["   " + " ".join(COLUMN_LABELS[: self.size])]
        for row in range(self.size):
            row_cells: List[str] = []
            for col in range(self.size):
                index = pos_to_index((row, col))
                cell = int(self.cells[index])
                if cell == EMPTY and index in marked:
                    row_cells.append("*")
                else:
                    row_cells.append(CELL_SYMBOL[cell])
            lines.append(f"{row + 1:>2d} " + " ".join(row_cells))
        return "\n".join(lines)
