"""Disc states for Othello cells."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict


class Side(IntEnum):
    """Player side. Values double as the cell state of a disc of that colour."""

    BLACK = 1
    WHITE = -1

    def opponent(self) -> "Side":
        return Side.WHITE if self is Side.BLACK else Side.BLACK

    @property
    def symbol(self) -> str:
        return SIDE_SYMBOL[self]

    @property
    def label(self) -> str:
        return self.name.lower()


EMPTY = 0

SIDE_SYMBOL: Dict[Side, str] = {
    Side.BLACK: "B",
    Side.WHITE: "W",
}

CELL_SYMBOL: Dict[int, str] = {
    EMPTY: ".",
    int(Side.BLACK): "B",
    int(Side.WHITE): "W",
}

SYMBOL_CELL: Dict[str, int] = {symbol: value for value, symbol in CELL_SYMBOL.items()}


def side_from_label(label: str) -> Side:
    """Parse ``black``/``white`` (or ``b``/``w``) into a side."""
    normalized = label.strip().lower()
    if normalized in {"black", "b"}:
        return Side.BLACK
    if normalized in {"white", "w"}:
        return Side.WHITE
    raise ValueError(f"Unknown side: {label!r}")
