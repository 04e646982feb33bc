from __future__ import annotations

import asyncio
import logging

import pygame

from .clock import GameClock
from .config import Settings
from .engine import SnakeEngine
from .models import GameSnapshot, Heading
from .render import draw_game, load_fonts
from .touch import TouchController

logger = logging.getLogger(__name__)

DIRECTION_BY_KEY = {
    pygame.K_UP: Heading.UP,
    pygame.K_w: Heading.UP,
    pygame.K_DOWN: Heading.DOWN,
    pygame.K_s: Heading.DOWN,
    pygame.K_LEFT: Heading.LEFT,
    pygame.K_a: Heading.LEFT,
    pygame.K_RIGHT: Heading.RIGHT,
    pygame.K_d: Heading.RIGHT,
}


class SnakeApp:
    """pygame front end: draws snapshots and forwards input to the core.

    Rendering and input run on the asyncio loop alongside the game clock, so
    a heading change never interleaves with a half-applied tick.
    """

    def __init__(self, engine: SnakeEngine, settings: Settings) -> None:
        self._engine = engine
        self._settings = settings
        self._clock = GameClock(engine, interval=settings.tick_interval)
        self._touch = TouchController(engine, self._clock, settings.screen_width, settings.screen_height)
        self._running = False
        self._needs_redraw = True
        self._clock.add_listener(self._on_tick)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def clock(self) -> GameClock:
        return self._clock

    @property
    def touch(self) -> TouchController:
        return self._touch

    def take_redraw(self) -> bool:
        """Return whether the screen is stale and mark it as drawn."""
        stale = self._needs_redraw
        self._needs_redraw = False
        return stale

    def _on_tick(self, snapshot: GameSnapshot) -> None:
        self._needs_redraw = True

    async def handle_event(self, event: pygame.event.Event) -> None:
        # Any input may change the heading or restart the game.
        self._needs_redraw = True
        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._running = False
            elif event.key == pygame.K_r:
                await self._clock.restart()
            elif event.key in DIRECTION_BY_KEY:
                self._engine.set_heading(DIRECTION_BY_KEY[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
            x, y = event.pos
            await self._touch.tap(x, y)
        elif event.type == pygame.FINGERDOWN:
            # Finger coordinates are normalized to [0, 1].
            await self._touch.tap(
                event.x * self._settings.screen_width,
                event.y * self._settings.screen_height,
            )

    async def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("Snake Game")
        screen = pygame.display.set_mode((self._settings.screen_width, self._settings.screen_height))
        fonts = load_fonts()
        frame_delay = 1 / self._settings.fps

        self._running = True
        try:
            async with self._clock:
                while self._running:
                    for event in pygame.event.get():
                        await self.handle_event(event)
                    if self.take_redraw():
                        draw_game(screen, self._engine.snapshot(), fonts)
                        pygame.display.flip()
                    await asyncio.sleep(frame_delay)
        finally:
            pygame.quit()
            logger.info("app closed after %d ticks", self._clock.ticks)
