"""Game-tree nodes and full-width tree generation."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from ai.board_manager import BoardManager, MoveId, Snapshot
from engine.pieces import Side


class NodeType(str, Enum):
    """Whose objective governs a ply."""

    MAX = "max"
    MIN = "min"

    def opposite(self) -> "NodeType":
        return NodeType.MIN if self is NodeType.MAX else NodeType.MAX


@dataclass(eq=False)
class Node:
    """One ply of search state.

    The node owns its snapshot and its children. ``parent`` is a weak
    reference kept for diagnostics only.
    """

    board: Snapshot
    node_type: NodeType
    depth: int = 0
    children: List["Node"] = field(default_factory=list)
    utility: Optional[float] = None
    parent: Optional[Callable[[], Optional["Node"]]] = field(default=None, repr=False)

    @classmethod
    def root(cls, board: Snapshot) -> "Node":
        return cls(board=board.copy(), node_type=NodeType.MAX)

    @property
    def is_max(self) -> bool:
        return self.node_type is NodeType.MAX

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def parent_node(self) -> Optional["Node"]:
        return self.parent() if self.parent is not None else None

    def path(self) -> List["Node"]:
        """Nodes from the root down to this node."""
        chain: List[Node] = []
        current: Optional[Node] = self
        while current is not None:
            chain.append(current)
            current = current.parent_node()
        chain.reverse()
        return chain


def mover(node: Node, searching_player: Side) -> Side:
    """Side to act at ``node``: the searching player on MAX plies."""
    return searching_player if node.is_max else searching_player.opponent()


def make_child(node: Node, move: MoveId, manager: BoardManager, acting: Side) -> Node:
    """Build the child reached by ``acting`` playing ``move`` and attach it to ``node``."""
    child = Node(
        board=manager.apply_move(node.board.copy(), move, acting),
        node_type=node.node_type.opposite(),
        depth=node.depth + 1,
        parent=weakref.ref(node),
    )
    node.children.append(child)
    return child


def generate_tree(
    node: Node,
    current_depth: int,
    max_depth: int,
    manager: BoardManager,
    searching_player: Side,
) -> None:
    """Expand ``node`` to ``max_depth`` plies without pruning.

    A node whose mover has no legal move is a leaf; passes are not modelled.
    """
    if current_depth >= max_depth:
        return
    acting = mover(node, searching_player)
    for move in manager.legal_moves(node.board, acting):
        child = make_child(node, move, manager, acting)
        generate_tree(child, current_depth + 1, max_depth, manager, searching_player)


def count_nodes(root: Node) -> int:
    """Number of nodes in the tree rooted at ``root``."""
    total = 0
    stack = [root]
    while stack:
        current = stack.pop()
        total += 1
        stack.extend(current.children)
    return total
