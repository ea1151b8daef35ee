#!/usr/bin/env python3
"""Play Ataxx from the console (or a command file) against the negamax player."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from ataxx.game import PLAYER_KINDS, CommandSources, Game, GameConfig, LineSource, TextReporter
from ataxx.search import EVALUATORS, SearchConfig


def load_config(path: Optional[str]) -> Dict:
    if not path:
        return {}
    cfg_path = Path(path)
    if not cfg_path.exists():
        return {}
    return yaml.safe_load(cfg_path.read_text()) or {}


def build_game_config(args: argparse.Namespace, cfg: Dict) -> GameConfig:
    search_cfg = dict(cfg.get("search") or {})
    if args.depth is not None:
        search_cfg["depth"] = args.depth
    if args.evaluator is not None:
        search_cfg["evaluator"] = args.evaluator
    return GameConfig(
        red=args.red if args.red is not None else cfg.get("red", "manual"),
        blue=args.blue if args.blue is not None else cfg.get("blue", "ai"),
        search=SearchConfig(**search_cfg),
        seed=args.seed if args.seed is not None else cfg.get("seed"),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Ataxx in the console.")
    parser.add_argument("--config", type=str, default="configs/play.yaml")
    parser.add_argument("--red", choices=PLAYER_KINDS)
    parser.add_argument("--blue", choices=PLAYER_KINDS)
    parser.add_argument("--depth", type=int, help="Search depth for AI players")
    parser.add_argument("--evaluator", choices=sorted(EVALUATORS))
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-level", type=str)
    parser.add_argument(
        "inputs",
        nargs="*",
        help="Command files to run before reading standard input",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)

    logging.basicConfig(
        level=(args.log_level or cfg.get("log_level", "WARNING")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sources = CommandSources([LineSource(sys.stdin, interactive=sys.stdin.isatty(), name="<stdin>")])
    # Later sources are read first, so push the files in reverse order.
    for path in reversed(args.inputs):
        sources.push_file(path)

    game = Game(sources, TextReporter(sys.stdout), build_game_config(args, cfg))
    game.process()


if __name__ == "__main__":
    main()
