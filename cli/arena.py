"""CLI command to pit the minimax AI against a baseline."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from ai.base_ai import BaseAI
from ai.minimax_ai import AgentConfig, MinimaxAI, SearchConfig
from ai.random_ai import RandomAI
from arena.match import MatchConfig, MatchRunner
from engine.board import OthelloBoardManager


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run an Othello AI-vs-AI match.")
    parser.add_argument("--config", type=str, default=None, help="Path to agent config JSON")
    parser.add_argument("--games", type=int, default=10, help="Number of games")
    parser.add_argument("--depth", type=int, default=None, help="Depth of the challenger")
    parser.add_argument(
        "--opponent",
        type=str,
        default="random",
        choices=["random", "minimax"],
        help="Baseline agent",
    )
    parser.add_argument("--opponent-depth", type=int, default=1, help="Depth when the opponent is minimax")
    parser.add_argument("--max-plies", type=int, default=200, help="Ply cap per game")
    parser.add_argument("--seed", type=int, default=None, help="Base seed for per-game agent seeding")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args(argv)


def build_opponent(args: argparse.Namespace, manager: OthelloBoardManager) -> BaseAI:
    if args.opponent == "minimax":
        return MinimaxAI(manager, config=SearchConfig(depth=args.opponent_depth))
    return RandomAI(seed=args.seed)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    agent_config = AgentConfig.from_json(args.config) if args.config else AgentConfig({})
    search = agent_config.search if args.depth is None else replace(agent_config.search, depth=args.depth)

    manager = OthelloBoardManager()
    challenger = MinimaxAI(manager, config=search, weights=agent_config.weights)
    opponent = build_opponent(args, manager)

    runner = MatchRunner(MatchConfig(games=args.games, max_plies=args.max_plies, base_seed=args.seed))
    summary = runner.run_match(challenger, opponent)
    print(
        f"minimax(depth={challenger.depth}) vs {args.opponent}: "
        f"W:{summary.agent_a_wins} L:{summary.agent_b_wins} D:{summary.draws} "
        f"score={summary.score_rate:.3f}"
    )


if __name__ == "__main__":
    main()
