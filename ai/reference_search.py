"""Unpruned two-pass minimax, kept as an oracle for the alpha-beta search."""

from __future__ import annotations

from ai.board_manager import BoardManager, Snapshot
from ai.evaluation import DEFAULT_WEIGHTS, EvalWeights, evaluate
from ai.tree import Node, generate_tree
from engine.pieces import Side


def propagate_utility(
    node: Node,
    manager: BoardManager,
    searching_player: Side,
    weights: EvalWeights = DEFAULT_WEIGHTS,
) -> float:
    """Evaluate leaves and fold a fully generated tree with plain max/min."""
    if node.is_leaf:
        node.utility = evaluate(node.board, searching_player, manager, weights)
        return node.utility
    values = [propagate_utility(child, manager, searching_player, weights) for child in node.children]
    node.utility = max(values) if node.is_max else min(values)
    return node.utility


def build_reference_tree(board: Snapshot, player: Side, manager: BoardManager, max_depth: int) -> Node:
    root = Node.root(board)
    generate_tree(root, 0, max_depth, manager, player)
    return root


def reference_root_utility(
    board: Snapshot,
    player: Side,
    manager: BoardManager,
    max_depth: int,
    weights: EvalWeights = DEFAULT_WEIGHTS,
) -> float:
    root = build_reference_tree(board, player, manager, max_depth)
    return propagate_utility(root, manager, player, weights)
