"""Weighted leaf evaluation for Othello positions."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Mapping

from ai.board_manager import BoardManager, Snapshot
from engine.pieces import Side
from engine.rules import CORNER_INDICES


@dataclass(frozen=True)
class EvalWeights:
    """Feature weights and game-phase multipliers."""

    material: float = 1.0
    mobility: float = 2.0
    stability: float = 5.0
    corners: float = 3.0
    opening_max_pieces: int = 20
    midgame_max_pieces: int = 40
    opening_multiplier: float = 0.5
    midgame_multiplier: float = 1.0
    endgame_multiplier: float = 1.5

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "EvalWeights":
        """Build weights from a config section, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values: Dict[str, object] = {}
        for key, value in payload.items():
            if key not in known:
                continue
            values[key] = int(value) if key.endswith("_pieces") else float(value)
        return cls(**values)


DEFAULT_WEIGHTS = EvalWeights()


@dataclass(frozen=True)
class EvalBreakdown:
    """Per-feature differences (searching player minus opponent) and the weighted total."""

    material: int
    mobility: int
    stability: int
    corners: int
    total_pieces: int
    phase_multiplier: float
    total: float


def phase_multiplier(total_pieces: int, weights: EvalWeights = DEFAULT_WEIGHTS) -> float:
    """Scale factor for the opening, midgame and endgame."""
    if total_pieces <= weights.opening_max_pieces:
        return weights.opening_multiplier
    if total_pieces <= weights.midgame_max_pieces:
        return weights.midgame_multiplier
    return weights.endgame_multiplier


def corner_count(board: Snapshot, player: Side) -> int:
    return sum(1 for index in CORNER_INDICES if int(board[index]) == int(player))


def stable_count(board: Snapshot, player: Side) -> int:
    """Discs that can never be flipped.

    Only corners are detected for now, so this matches ``corner_count`` and
    adds no signal beyond the corner feature.
    """
    return corner_count(board, player)


def evaluate_breakdown(
    board: Snapshot,
    player: Side,
    manager: BoardManager,
    weights: EvalWeights = DEFAULT_WEIGHTS,
) -> EvalBreakdown:
    opponent = player.opponent()
    own_pieces = manager.count_pieces(board, player)
    opp_pieces = manager.count_pieces(board, opponent)

    material = own_pieces - opp_pieces
    mobility = len(manager.legal_moves(board, player)) - len(manager.legal_moves(board, opponent))
    stability = stable_count(board, player) - stable_count(board, opponent)
    corners = corner_count(board, player) - corner_count(board, opponent)

    total_pieces = own_pieces + opp_pieces
    multiplier = phase_multiplier(total_pieces, weights)
    score = (
        weights.material * material
        + weights.mobility * mobility
        + weights.stability * stability
        + weights.corners * corners
    )
    return EvalBreakdown(
        material=material,
        mobility=mobility,
        stability=stability,
        corners=corners,
        total_pieces=total_pieces,
        phase_multiplier=multiplier,
        total=score * multiplier,
    )


def evaluate(
    board: Snapshot,
    player: Side,
    manager: BoardManager,
    weights: EvalWeights = DEFAULT_WEIGHTS,
) -> float:
    """Heuristic value of ``board`` from ``player``'s fixed perspective."""
    return evaluate_breakdown(board, player, manager, weights).total
