"""AI-vs-AI match runner for Othello agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ai.base_ai import BaseAI
from engine.board import Board
from engine.pieces import Side

LOGGER = logging.getLogger(__name__)


@dataclass
class MatchConfig:
    """Match settings."""

    games: int = 10
    max_plies: int = 200
    swap_colors: bool = True
    log_every: int = 1
    base_seed: Optional[int] = None


@dataclass
class GameRecord:
    """Summary of one finished game."""

    winner: Optional[Side]
    is_draw: bool
    black_discs: int
    white_discs: int
    plies: int
    passes: int


@dataclass
class MatchSummary:
    """Aggregate result from agent A's point of view."""

    agent_a_wins: int
    agent_b_wins: int
    draws: int
    games: int

    @property
    def score_rate(self) -> float:
        """Agent A score with draws counted as half a win."""
        return (self.agent_a_wins + 0.5 * self.draws) / max(1, self.games)


def play_game(black_ai: BaseAI, white_ai: BaseAI, max_plies: int = 200) -> GameRecord:
    """Play one game from the opening position."""
    board = Board()
    passes = 0
    terminal, winner, is_draw = board.game_over()

    while not terminal and board.ply_count < max_plies:
        actor = black_ai if board.current_turn is Side.BLACK else white_ai
        move = actor.choose_move(board)
        if move is None:
            board.pass_turn()
            passes += 1
        else:
            board.apply_move(move)
        terminal, winner, is_draw = board.game_over()

    if not terminal:
        # Ply cap reached: decide by disc count.
        black = board.piece_count(Side.BLACK)
        white = board.piece_count(Side.WHITE)
        is_draw = black == white
        winner = None if is_draw else (Side.BLACK if black > white else Side.WHITE)

    return GameRecord(
        winner=winner,
        is_draw=is_draw,
        black_discs=board.piece_count(Side.BLACK),
        white_discs=board.piece_count(Side.WHITE),
        plies=board.ply_count,
        passes=passes,
    )


class MatchRunner:
    """Runs a series of games between two agents."""

    def __init__(self, config: MatchConfig | None = None) -> None:
        self.config = config or MatchConfig()

    def run_match(self, agent_a: BaseAI, agent_b: BaseAI) -> MatchSummary:
        records: List[GameRecord] = []
        a_sides: List[Side] = []
        for game_index in range(self.config.games):
            if self.config.base_seed is not None:
                agent_a.reseed(self.config.base_seed + game_index)
                agent_b.reseed(self.config.base_seed + game_index + 9973)
            a_side = Side.WHITE if self.config.swap_colors and game_index % 2 == 1 else Side.BLACK
            black_ai, white_ai = (agent_a, agent_b) if a_side is Side.BLACK else (agent_b, agent_a)
            record = play_game(black_ai, white_ai, max_plies=self.config.max_plies)
            records.append(record)
            a_sides.append(a_side)
            if (game_index + 1) % max(1, self.config.log_every) == 0:
                LOGGER.info(
                    "Game %d/%d | agent_a=%s winner=%s draw=%s discs=%d-%d plies=%d",
                    game_index + 1,
                    self.config.games,
                    a_side.label,
                    record.winner.label if record.winner else None,
                    record.is_draw,
                    record.black_discs,
                    record.white_discs,
                    record.plies,
                )
        summary = self.summarize(records, a_sides)
        LOGGER.info(
            "Match finished | A:%d B:%d D:%d score_rate=%.3f",
            summary.agent_a_wins,
            summary.agent_b_wins,
            summary.draws,
            summary.score_rate,
        )
        return summary

    @staticmethod
    def summarize(records: Sequence[GameRecord], a_sides: Sequence[Side]) -> MatchSummary:
        a_wins = b_wins = draws = 0
        for record, a_side in zip(records, a_sides):
            if record.is_draw:
                draws += 1
            elif record.winner is a_side:
                a_wins += 1
            else:
                b_wins += 1
        return MatchSummary(agent_a_wins=a_wins, agent_b_wins=b_wins, draws=draws, games=len(records))
