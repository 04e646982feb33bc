from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from .app import SnakeApp
from .config import ConfigError, load_settings
from .engine import SnakeEngine
from .logging_setup import setup_logging
from .screenshots import generate_screenshots

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mobile-snake", description="Single-screen Snake game")
    parser.add_argument(
        "--screenshots",
        action="store_true",
        help="Render deterministic screenshots instead of playing",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Screenshot output directory (defaults to SNAKE_SCREENSHOTS_DIR)",
    )
    return parser.parse_args(list(argv))


async def _run_async(args: argparse.Namespace) -> None:
    settings = load_settings()
    setup_logging(settings.log_level)

    if args.screenshots:
        out_dir = args.out_dir or settings.screenshots_dir
        seed = settings.seed if settings.seed is not None else 7
        paths = generate_screenshots(out_dir, seed=seed, screen_size=(settings.screen_width, settings.screen_height))
        print("Rendered screenshots:")
        for path in paths:
            print(path)
        return

    engine = SnakeEngine(rng=random.Random(settings.seed))
    app = SnakeApp(engine, settings)
    logger.info("starting game, tick=%dms", settings.tick_ms)
    await app.run()


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        asyncio.run(_run_async(args))
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        print("Hint: check the SNAKE_* variables in your environment or .env file.", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
