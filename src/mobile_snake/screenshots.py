"""Deterministic screenshot rendering for docs and visual checks."""

from __future__ import annotations

import logging
import os
import random
from pathlib import Path

import pygame

from .engine import SnakeEngine
from .models import Heading
from .render import load_fonts, save_frame

logger = logging.getLogger(__name__)

MIDGAME_SCRIPT: tuple[tuple[Heading, int], ...] = (
    (Heading.RIGHT, 3),
    (Heading.DOWN, 4),
    (Heading.RIGHT, 2),
)


def generate_screenshots(
    output_dir: Path,
    seed: int = 7,
    screen_size: tuple[int, int] = (360, 640),
) -> list[Path]:
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    try:
        fonts = load_fonts()
        output_dir.mkdir(parents=True, exist_ok=True)
        engine = SnakeEngine(rng=random.Random(seed))
        paths: list[Path] = []

        start = output_dir / "snake_01_start.png"
        save_frame(start, engine.snapshot(), fonts, screen_size)
        paths.append(start)

        for heading, steps in MIDGAME_SCRIPT:
            engine.set_heading(heading)
            for _ in range(steps):
                engine.advance()

        midgame = output_dir / "snake_02_midgame.png"
        save_frame(midgame, engine.snapshot(), fonts, screen_size)
        paths.append(midgame)

        # Steer into the top wall for a game-over frame.
        engine.set_heading(Heading.UP)
        for _ in range(engine.height + 2):
            if engine.terminal:
                break
            engine.advance()

        gameover = output_dir / "snake_03_gameover.png"
        save_frame(gameover, engine.snapshot(), fonts, screen_size)
        paths.append(gameover)
    finally:
        pygame.quit()

    logger.info("rendered %d screenshots to %s", len(paths), output_dir)
    return paths
