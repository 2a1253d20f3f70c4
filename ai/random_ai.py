"""Uniform random baseline agent."""

from __future__ import annotations

import random
from typing import Optional

from ai.base_ai import BaseAI
from ai.board_manager import MoveId
from engine.board import Board


class RandomAI(BaseAI):
    """Plays a uniformly random legal move."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def choose_move(self, board: Board) -> Optional[MoveId]:
        legal_moves = board.get_legal_moves()
        if not legal_moves:
            return None
        return self._rng.choice(legal_moves)

    def reseed(self, seed: Optional[int]) -> None:
        self._rng = random.Random(seed)
