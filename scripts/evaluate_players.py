#!/usr/bin/env python3
"""Play the negamax player against a baseline and print a JSON summary."""

import argparse
import json
import logging

import numpy as np

from ataxx.core import PieceColor
from ataxx.evaluation import evaluate_players
from ataxx.players import AIPlayer, Player, RandomPlayer
from ataxx.search import EVALUATORS, SearchConfig


def player_from_identifier(identifier: str, color: PieceColor, args: argparse.Namespace) -> Player:
    key = identifier.lower()
    if key == "random":
        return RandomPlayer(color, np.random.default_rng(args.seed))
    if key == "ai":
        return AIPlayer(color, SearchConfig(depth=args.depth, evaluator=args.evaluator))
    raise ValueError(f"Unknown player {identifier!r}; expected 'ai' or 'random'.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run Ataxx matches between two players.")
    parser.add_argument("red", help="'ai' or 'random'")
    parser.add_argument("blue", help="'ai' or 'random'")
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--depth", type=int, default=2)
    parser.add_argument("--evaluator", choices=sorted(EVALUATORS), default="centrality")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(message)s")

    red = player_from_identifier(args.red, PieceColor.RED, args)
    blue = player_from_identifier(args.blue, PieceColor.BLUE, args)
    result = evaluate_players(red, blue, episodes=args.episodes)

    output = {
        "games": result.games_played,
        "red": args.red,
        "blue": args.blue,
        "red_wins": result.red_wins,
        "blue_wins": result.blue_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "red_winrate": result.winrate_red(),
        "depth": args.depth,
        "evaluator": args.evaluator,
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
