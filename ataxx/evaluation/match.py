from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ataxx.core import GameResult, PieceColor, encode_move
from ataxx.env import AtaxxEnv
from ataxx.players import Player

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    games_played: int
    red_wins: int
    blue_wins: int
    draws: int
    average_length: float

    def winrate_red(self) -> float:
        return self.red_wins / max(1, self.games_played)

    def winrate_blue(self) -> float:
        return self.blue_wins / max(1, self.games_played)


def evaluate_players(
    red: Player,
    blue: Player,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], AtaxxEnv]] = None,
) -> MatchResult:
    if red.color != PieceColor.RED or blue.color != PieceColor.BLUE:
        raise ValueError("Players must be given as (red, blue).")
    env_factory = env_factory or AtaxxEnv

    red_wins = 0
    blue_wins = 0
    draws = 0
    total_ply = 0

    for episode in range(episodes):
        env = env_factory()
        env.reset()
        terminated = env.board.game_over()
        ply = 0

        while not terminated:
            player = red if env.board.whose_move == PieceColor.RED else blue
            move = player.choose_move(env.board.copy())
            _, _, terminated, truncated, _ = env.step(encode_move(move))
            ply += 1
            if truncated:
                terminated = True

        total_ply += ply
        result = env.board.result()
        if result == GameResult.RED_WIN:
            red_wins += 1
        elif result == GameResult.BLUE_WIN:
            blue_wins += 1
        else:
            draws += 1
        logger.debug("episode %d finished after %d plies: %s", episode + 1, ply, result.value)

    average_length = total_ply / max(1, episodes)
    return MatchResult(
        games_played=episodes,
        red_wins=red_wins,
        blue_wins=blue_wins,
        draws=draws,
        average_length=average_length,
    )
