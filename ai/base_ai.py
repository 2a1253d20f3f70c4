"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ai.board_manager import MoveId
from engine.board import Board


class BaseAI(ABC):
    """Abstract AI strategy contract."""

    @abstractmethod
    def choose_move(self, board: Board) -> Optional[MoveId]:
        """Choose a legal move for the side to move, or ``None`` when it must pass."""
        raise NotImplementedError

    def reseed(self, seed: Optional[int]) -> None:
        """Reset any internal randomness; deterministic agents ignore this."""
