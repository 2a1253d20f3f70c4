"""Board collaborator contract consumed by the search agents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

import numpy as np

from engine.pieces import Side

Snapshot = np.ndarray
MoveId = int


class BoardManager(ABC):
    """Rules oracle handed to an agent at construction time.

    Implementations must be deterministic: ``legal_moves`` returns the same
    ordering for the same snapshot, since move selection maps the winning
    child back to a move by position in that list.
    """

    @abstractmethod
    def legal_moves(self, board: Snapshot, player: Side) -> List[MoveId]:
        """Ordered legal moves for ``player``; empty when none."""
        raise NotImplementedError

    @abstractmethod
    def apply_move(self, board: Snapshot, move: MoveId, player: Side) -> Snapshot:
        """Return a new snapshot with ``move`` played; ``board`` is left untouched."""
        raise NotImplementedError

    @abstractmethod
    def count_pieces(self, board: Snapshot, player: Side) -> int:
        """Number of discs ``player`` has on ``board``."""
        raise NotImplementedError
