from __future__ import annotations

import logging
from enum import StrEnum

from .clock import GameClock
from .engine import SnakeEngine
from .models import Heading

logger = logging.getLogger(__name__)


class TapAction(StrEnum):
    TURN = "turn"
    IGNORED = "ignored"
    RESTART = "restart"


def heading_for_touch(x: float, y: float, screen_width: float, screen_height: float) -> Heading:
    """Map a touch point to a heading by the screen quadrant it falls in.

    Top-left steers LEFT, top-right UP, bottom-left DOWN and bottom-right
    RIGHT. Points on a centre line belong to the right/bottom half.
    """
    left = x < screen_width / 2
    top = y < screen_height / 2
    if top:
        return Heading.LEFT if left else Heading.UP
    return Heading.DOWN if left else Heading.RIGHT


class TouchController:
    def __init__(
        self,
        engine: SnakeEngine,
        clock: GameClock,
        screen_width: float,
        screen_height: float,
    ) -> None:
        self._engine = engine
        self._clock = clock
        self._screen_width = screen_width
        self._screen_height = screen_height

    async def tap(self, x: float, y: float) -> TapAction:
        if self._engine.terminal:
            logger.info("tap on finished game, restarting")
            await self._clock.restart()
            return TapAction.RESTART

        heading = heading_for_touch(x, y, self._screen_width, self._screen_height)
        if self._engine.set_heading(heading):
            return TapAction.TURN
        return TapAction.IGNORED
