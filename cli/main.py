"""CLI entrypoint for playing Othello against the minimax AI."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from ai.board_manager import MoveId
from ai.evaluation import evaluate_breakdown
from ai.minimax_ai import AgentConfig, MinimaxAI, SearchConfig
from engine.board import Board, MoveResult
from engine.pieces import Side, side_from_label
from engine.rules import BOARD_SIZE, index_to_label, label_to_index, pos_to_index


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Othello in terminal.")
    parser.add_argument("--config", type=str, default=None, help="Path to agent config JSON")
    parser.add_argument("--depth", type=int, default=None, help="Minimax depth (overrides config)")
    parser.add_argument("--time-limit-ms", type=int, default=None, help="Per-move search deadline")
    parser.add_argument(
        "--human-side",
        type=str,
        default="black",
        choices=["black", "white"],
        help="Which side the human controls",
    )
    parser.add_argument("--watch", action="store_true", help="Let the AI play both sides")
    parser.add_argument("--explain", action="store_true", help="Print the evaluation breakdown each turn")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args(argv)


def build_agent(args: argparse.Namespace, board: Board) -> MinimaxAI:
    """Create the agent from the optional config file and CLI overrides."""
    agent_config = AgentConfig.from_json(args.config) if args.config else AgentConfig({})
    base = agent_config.search
    search = SearchConfig(
        depth=base.depth if args.depth is None else args.depth,
        time_limit_ms=base.time_limit_ms if args.time_limit_ms is None else args.time_limit_ms,
        debug_top_k=base.debug_top_k,
    )
    return MinimaxAI(board.manager, config=search, weights=agent_config.weights)


def parse_user_move(command: str) -> Optional[MoveId]:
    """Accept ``d3`` or ``<row> <col>`` (1-based)."""
    parts = command.strip().split()
    if len(parts) == 1:
        return label_to_index(parts[0])
    if len(parts) == 2:
        row, col = int(parts[0]) - 1, int(parts[1]) - 1
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise ValueError(f"Coordinate out of range: {command!r}")
        return pos_to_index((row, col))
    return None


def describe(result: MoveResult, who: str) -> str:
    if result.passed:
        return f"{who} passed."
    return f"{who} played {index_to_label(result.placed)} flipping {len(result.flipped)}."


def run_cli(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("othello.cli")

    board = Board()
    ai = build_agent(args, board)
    human_side: Optional[Side] = None if args.watch else side_from_label(args.human_side)

    logger.info(
        "Starting Othello game. Human=%s depth=%d",
        human_side.label if human_side else "none",
        ai.depth,
    )
    print("Commands: <col><row> e.g. d3 | <row> <col> | help | quit")

    while True:
        terminal, winner, is_draw = board.game_over()
        legal_moves = board.get_legal_moves()
        print()
        print(board.render_ascii(highlight=legal_moves))
        print(
            f"Turn: {board.current_turn.label} | "
            f"B:{board.piece_count(Side.BLACK)} W:{board.piece_count(Side.WHITE)}"
        )
        if args.explain:
            breakdown = evaluate_breakdown(board.cells, board.current_turn, board.manager, ai.weights)
            print(f"Eval ({board.current_turn.label}): {breakdown}")

        if terminal:
            if is_draw:
                print("Game ended in draw.")
            else:
                print(f"Winner: {winner.label if winner else 'none'}")
            break

        if board.current_turn is human_side:
            if not legal_moves:
                print(describe(board.pass_turn(), "You"))
                continue
            user_input = input("Your move> ").strip()
            if user_input.lower() in {"quit", "exit"}:
                print("Exiting game.")
                break
            if user_input.lower() == "help":
                print("Legal: " + " ".join(index_to_label(move) for move in legal_moves))
                continue

            try:
                move = parse_user_move(user_input)
            except ValueError:
                print("Invalid coordinate.")
                continue
            if move is None:
                print("Invalid command format.")
                continue
            if move not in legal_moves:
                print("Illegal move for current state.")
                continue
            print(describe(board.apply_move(move), "You"))
        else:
            ai_side = board.current_turn
            ai_move = ai.choose_move(board)
            if ai_move is None:
                result = board.pass_turn()
            else:
                result = board.apply_move(ai_move)
            print(describe(result, f"AI ({ai_side.label})"))


if __name__ == "__main__":
    run_cli()
