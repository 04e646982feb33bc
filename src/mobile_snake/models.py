from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

CELL_SIZE = 20
BOARD_SIZE = 300
GRID_WIDTH = BOARD_SIZE // CELL_SIZE
GRID_HEIGHT = BOARD_SIZE // CELL_SIZE
DEFAULT_TICK_MS = 200


class Heading(StrEnum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> Heading:
        return _OPPOSITE[self]

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTA[self]


_OPPOSITE = {
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
}

_DELTA = {
    Heading.UP: (0, -1),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
    Heading.RIGHT: (1, 0),
}


class ClockState(StrEnum):
    STOPPED = "stopped"
    RUNNING = "running"


@dataclass(frozen=True, slots=True)
class Cell:
    x: int
    y: int

    def shifted(self, heading: Heading) -> Cell:
        dx, dy = heading.delta
        return Cell(self.x + dx, self.y + dy)


INITIAL_SNAKE: tuple[Cell, ...] = (Cell(2, 2), Cell(2, 1), Cell(2, 0))
INITIAL_HEADING = Heading.RIGHT


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only view of the game handed to presentation once per tick."""

    snake: tuple[Cell, ...]
    food: Cell
    heading: Heading
    terminal: bool

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)
