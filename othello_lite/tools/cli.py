from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from othello_lite.engine.game import Game
from othello_lite.engine.search import Searcher
from othello_lite.engine.strength import DEFAULT_LEVEL, PROFILES
from othello_lite.logging_setup import level_from_name, setup_logging
from othello_lite.tools.diag import ensure_config, load_config
from othello_lite.ui.console import ConsoleGame


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="othello-lite", description="Play Othello against the computer")
    p.add_argument("--difficulty", type=int, choices=sorted(PROFILES), default=None,
                   help="computer lookahead 1-5; skips the first difficulty prompt")
    p.add_argument("--seed", type=int, default=None, help="seed for tie-breaks between equal moves")
    p.add_argument("--config", default=None, help="config file path (default ~/.othello_lite/config.toml)")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    p.add_argument("--log-console", action="store_true", help="also log to stderr")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.config is None:
        ensure_config()
    cfg = load_config(args.config)
    game_cfg = cfg.get("game", {}) or {}
    log_cfg = cfg.get("logging", {}) or {}

    try:
        level = level_from_name(args.log_level or log_cfg.get("level", "INFO"))
    except ValueError as e:
        build_parser().error(str(e))
    setup_logging(overwrite=bool(log_cfg.get("overwrite", True)), level=level, console=args.log_console)

    difficulty = args.difficulty
    if difficulty is None and "difficulty" in game_cfg:
        raw = game_cfg["difficulty"]
        try:
            difficulty = int(raw)
        except (TypeError, ValueError):
            difficulty = None
        if difficulty not in PROFILES:
            logging.getLogger(__name__).warning("Ignoring difficulty %r from config, using %d", raw, DEFAULT_LEVEL)
            difficulty = DEFAULT_LEVEL
    seed = args.seed if args.seed is not None else game_cfg.get("seed")

    logging.getLogger(__name__).info("Starting othello-lite difficulty=%s seed=%s", difficulty, seed)
    game = Game(Searcher(seed=seed))
    sys.exit(ConsoleGame(game, difficulty=difficulty).run())


if __name__ == "__main__":
    main()
