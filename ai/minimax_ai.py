"""Minimax AI with alpha-beta pruning for Othello."""

from __future__ import annotations

import json
import logging
import math
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional

import numpy as np

from ai.base_ai import BaseAI
from ai.board_manager import BoardManager, MoveId, Snapshot
from ai.evaluation import DEFAULT_WEIGHTS, EvalWeights, evaluate
from ai.tree import Node, make_child, mover
from engine.board import Board
from engine.pieces import Side
from engine.rules import index_to_label

LOGGER = logging.getLogger(__name__)

NO_MOVE = -1
DEFAULT_DEPTH = 4


class MoveIndexMismatchError(RuntimeError):
    """The best root child cannot be mapped back onto the root's legal moves."""


@dataclass
class SearchConfig:
    """Search settings."""

    depth: int = DEFAULT_DEPTH
    time_limit_ms: Optional[int] = None  # None means depth-only
    debug_top_k: int = 3

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {self.depth}")
        if self.time_limit_ms is not None and self.time_limit_ms <= 0:
            raise ValueError(f"time_limit_ms must be positive, got {self.time_limit_ms}")
        self.debug_top_k = max(1, self.debug_top_k)

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "SearchConfig":
        time_limit = payload.get("time_limit_ms")
        return cls(
            depth=int(payload.get("depth", DEFAULT_DEPTH)),
            time_limit_ms=None if time_limit is None else int(time_limit),
            debug_top_k=int(payload.get("debug_top_k", 3)),
        )


class AgentConfig:
    """Search and evaluation settings loaded from a config file."""

    def __init__(self, payload: Mapping[str, object]) -> None:
        self.search = SearchConfig.from_dict(payload.get("search") or {})
        self.weights = EvalWeights.from_dict(payload.get("evaluation") or {})

    @classmethod
    def from_json(cls, path: str | Path) -> "AgentConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(payload)


@dataclass
class SearchStats:
    """Work counters for one search."""

    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0
    pruned_siblings: int = 0
    timed_out: bool = False
    elapsed_ms: float = 0.0


@dataclass
class _SearchRun:
    """Transient per-call search state."""

    player: Side
    max_depth: int
    clock: Callable[[], float]
    deadline: Optional[float] = None
    stats: SearchStats = field(default_factory=SearchStats)

    def expired(self) -> bool:
        return self.deadline is not None and self.clock() >= self.deadline


def select_best_move(root: Node) -> int:
    """Index of the first root child with the greatest utility, or ``NO_MOVE``."""
    best_index = NO_MOVE
    best_utility = -math.inf
    for index, child in enumerate(root.children):
        if child.utility is not None and child.utility > best_utility:
            best_utility = child.utility
            best_index = index
    return best_index


class MinimaxAI(BaseAI):
    """Depth-limited alpha-beta agent over a weighted heuristic."""

    def __init__(
        self,
        manager: BoardManager,
        config: Optional[SearchConfig] = None,
        weights: EvalWeights = DEFAULT_WEIGHTS,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.manager = manager
        self.config = config or SearchConfig()
        self.weights = weights
        self._clock = clock
        self.last_stats: Optional[SearchStats] = None
        self.last_root_utility: Optional[float] = None

    @property
    def depth(self) -> int:
        return self.config.depth

    def choose_move(self, board: Board) -> Optional[MoveId]:
        """Pick a move for the side to move on a game board."""
        move = self.select_move(board.cells, board.current_turn)
        return None if move == NO_MOVE else move

    def select_move(self, board: Snapshot, player: Side) -> MoveId:
        """Choose a legal move for ``player`` or return ``NO_MOVE``."""
        legal_moves = self.manager.legal_moves(board, player)
        if not legal_moves:
            LOGGER.warning("No moves available for %s.", player.label)
            return NO_MOVE

        depth = self.config.depth
        if depth < 1:
            LOGGER.debug("Depth %d cannot rank moves; searching 1 ply instead.", depth)
            depth = 1

        root = self.search(board, player, depth)
        best_index = select_best_move(root)
        move = self._map_to_move(root, best_index, legal_moves, board, player)
        self._log_diagnostics(root, legal_moves, best_index)
        LOGGER.debug(
            "Minimax selected %s with score %.3f (nodes=%d leaves=%d cutoffs=%d)",
            index_to_label(move),
            root.utility,
            self.last_stats.nodes,
            self.last_stats.leaves,
            self.last_stats.cutoffs,
        )
        return move

    def search(self, board: Snapshot, player: Side, max_depth: Optional[int] = None) -> Node:
        """Run alpha-beta from a fresh MAX root and return the searched tree."""
        run = _SearchRun(
            player=player,
            max_depth=self.config.depth if max_depth is None else max_depth,
            clock=self._clock,
        )
        started = self._clock()
        if self.config.time_limit_ms is not None:
            run.deadline = started + self.config.time_limit_ms / 1000.0

        root = Node.root(board)
        self._alphabeta(run, root, 0, -math.inf, math.inf)

        run.stats.elapsed_ms = (self._clock() - started) * 1000.0
        if run.stats.timed_out:
            LOGGER.info("Search deadline reached after %.1f ms; using partial results.", run.stats.elapsed_ms)
        self.last_stats = run.stats
        self.last_root_utility = root.utility
        return root

    def _alphabeta(self, run: _SearchRun, node: Node, depth: int, alpha: float, beta: float) -> float:
        run.stats.nodes += 1
        if depth > 0 and run.expired():
            run.stats.timed_out = True
            return self._evaluate_leaf(run, node)
        if depth >= run.max_depth:
            return self._evaluate_leaf(run, node)

        acting = mover(node, run.player)
        moves = self.manager.legal_moves(node.board, acting)
        if not moves:
            return self._evaluate_leaf(run, node)

        for index, move in enumerate(moves):
            child = make_child(node, move, self.manager, acting)
            value = self._alphabeta(run, child, depth + 1, alpha, beta)
            if node.is_max:
                alpha = max(alpha, value)
            else:
                beta = min(beta, value)
            if beta <= alpha:
                run.stats.cutoffs += 1
                run.stats.pruned_siblings += len(moves) - index - 1
                break

        node.utility = alpha if node.is_max else beta
        return node.utility

    def _evaluate_leaf(self, run: _SearchRun, node: Node) -> float:
        run.stats.leaves += 1
        node.utility = evaluate(node.board, run.player, self.manager, self.weights)
        return node.utility

    def _map_to_move(
        self,
        root: Node,
        best_index: int,
        legal_moves: List[MoveId],
        board: Snapshot,
        player: Side,
    ) -> MoveId:
        """Recover the move for ``best_index``; fail loudly on any ordering drift."""
        consistent = 0 <= best_index < len(legal_moves) and len(root.children) <= len(legal_moves)
        if consistent:
            expected = self.manager.apply_move(board, legal_moves[best_index], player)
            consistent = np.array_equal(root.children[best_index].board, expected)
        if not consistent:
            LOGGER.critical(
                "Best child %d does not match legal move list (children=%d legal=%d).",
                best_index,
                len(root.children),
                len(legal_moves),
            )
            raise MoveIndexMismatchError(
                f"Root child {best_index} cannot be mapped onto {len(legal_moves)} legal moves"
            )
        return legal_moves[best_index]

    def _log_diagnostics(self, root: Node, legal_moves: List[MoveId], best_index: int) -> None:
        """Emit top-k candidate breakdown when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        candidates: Dict[int, float] = {
            index: child.utility for index, child in enumerate(root.children) if child.utility is not None
        }
        ranked = sorted(candidates.items(), key=lambda item: item[1], reverse=True)
        for rank, (index, utility) in enumerate(ranked[: self.config.debug_top_k], start=1):
            LOGGER.debug(
                "Candidate #%d move=%s utility=%.3f chosen=%s",
                rank,
                index_to_label(legal_moves[index]),
                utility,
                index == best_index,
            )


def select_move(
    board: Snapshot,
    player: Side,
    manager: BoardManager,
    max_depth: int = DEFAULT_DEPTH,
    weights: EvalWeights = DEFAULT_WEIGHTS,
) -> MoveId:
    """One-shot move selection with a throwaway agent."""
    agent = MinimaxAI(manager, config=SearchConfig(depth=max_depth), weights=weights)
    return agent.select_move(board, player)
