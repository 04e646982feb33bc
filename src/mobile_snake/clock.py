from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable

from .engine import SnakeEngine
from .models import DEFAULT_TICK_MS, ClockState, GameSnapshot

logger = logging.getLogger(__name__)

TickListener = Callable[[GameSnapshot], None]


class GameClock:
    """Advances a :class:`SnakeEngine` on a fixed interval while the game is live.

    At most one tick task exists at any time. The terminal flag is checked
    after every tick, so a finished game never consumes another one. Use it
    as an async context manager to release the timer on every exit path::

        async with GameClock(engine) as clock:
            ...
    """

    def __init__(self, engine: SnakeEngine, interval: float = DEFAULT_TICK_MS / 1000) -> None:
        if interval <= 0:
            raise ValueError(f"tick interval must be positive, got {interval}")
        self._engine = engine
        self._interval = interval
        self._listeners: list[TickListener] = []
        self._tick_task: asyncio.Task | None = None
        self.ticks = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._tick_task is not None and not self._tick_task.done()

    @property
    def state(self) -> ClockState:
        return ClockState.RUNNING if self.is_running else ClockState.STOPPED

    def add_listener(self, listener: TickListener) -> None:
        self._listeners.append(listener)

    async def start(self) -> None:
        if self.is_running:
            return
        if self._engine.terminal:
            logger.debug("clock start ignored: game is over")
            return
        self._tick_task = asyncio.create_task(self._tick_loop(), name="snake-tick-loop")

    async def stop(self) -> None:
        task = self._tick_task
        self._tick_task = None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def restart(self) -> None:
        await self.stop()
        self._engine.reset()
        await self.start()

    async def __aenter__(self) -> GameClock:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def _tick_loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            snapshot = self._engine.advance()
            self.ticks += 1
            self._notify(snapshot)
            if snapshot.terminal:
                logger.info("clock stopped after %d ticks: game over", self.ticks)
                return

    def _notify(self, snapshot: GameSnapshot) -> None:
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("tick listener error")
