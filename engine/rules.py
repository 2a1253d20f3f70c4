"""Board geometry helpers for 8x8 Othello."""

from __future__ import annotations

from typing import Iterable, Tuple

BOARD_SIZE = 8
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

Position = Tuple[int, int]

CORNER_INDICES: Tuple[int, ...] = (
    0,
    BOARD_SIZE - 1,
    NUM_CELLS - BOARD_SIZE,
    NUM_CELLS - 1,
)

DIRECTIONS: Tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

COLUMN_LABELS = "abcdefgh"


def in_bounds(pos: Position) -> bool:
    """Return whether a position is inside the board."""
    row, col = pos
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def pos_to_index(pos: Position) -> int:
    """Convert a board position to flattened index."""
    return pos[0] * BOARD_SIZE + pos[1]


def index_to_pos(index: int) -> Position:
    """Convert flattened index to board position."""
    return (index // BOARD_SIZE, index % BOARD_SIZE)


def ray(pos: Position, direction: Position) -> Iterable[Position]:
    """Yield in-bounds positions stepping away from ``pos`` (exclusive)."""
    dr, dc = direction
    row, col = pos[0] + dr, pos[1] + dc
    while in_bounds((row, col)):
        yield (row, col)
        row += dr
        col += dc


def index_to_label(index: int) -> str:
    """Human-readable coordinate, e.g. 19 -> ``d3``."""
    row, col = index_to_pos(index)
    return f"{COLUMN_LABELS[col]}{row + 1}"


def label_to_index(label: str) -> int:
    """Parse a coordinate such as ``d3`` into a flattened index."""
    text = label.strip().lower()
    if len(text) != 2 or text[0] not in COLUMN_LABELS or not text[1].isdigit():
        raise ValueError(f"Invalid coordinate: {label!r}")
    row = int(text[1]) - 1
    col = COLUMN_LABELS.index(text[0])
    if not in_bounds((row, col)):
        raise ValueError(f"Coordinate out of range: {label!r}")
    return pos_to_index((row, col))
