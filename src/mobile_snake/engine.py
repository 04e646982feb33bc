from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from .models import (
    GRID_HEIGHT,
    GRID_WIDTH,
    INITIAL_HEADING,
    INITIAL_SNAKE,
    Cell,
    GameSnapshot,
    Heading,
)

logger = logging.getLogger(__name__)


def next_head(head: Cell, heading: Heading) -> Cell:
    return head.shifted(heading)


def is_opposite(current: Heading, requested: Heading) -> bool:
    return requested == current.opposite


def out_of_bounds(cell: Cell, width: int, height: int) -> bool:
    return cell.x < 0 or cell.x >= width or cell.y < 0 or cell.y >= height


def collides(cell: Cell, snake: Sequence[Cell], width: int, height: int) -> bool:
    # The whole pre-move body counts, tail included.
    if out_of_bounds(cell, width, height):
        return True
    return cell in snake


def random_food(rng: random.Random, width: int, height: int) -> Cell:
    # Occupied cells are not excluded; food may land on the snake.
    return Cell(rng.randrange(width), rng.randrange(height))


class SnakeEngine:
    """Owns the game state and applies one simulation step per ``advance``.

    Every operation is total: opposite-direction requests and calls made
    after game over are ignored instead of raising.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
    ) -> None:
        self._rng = rng or random.Random()
        self._width = width
        self._height = height
        self._snake: list[Cell] = []
        self._food = Cell(0, 0)
        self._heading = INITIAL_HEADING
        self._terminal = False
        self.reset()

    @property
    def height(self) -> int:
        return self._height

    @property
    def heading(self) -> Heading:
        return self._heading

    @property
    def terminal(self) -> bool:
        return self._terminal

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            snake=tuple(self._snake),
            food=self._food,
            heading=self._heading,
            terminal=self._terminal,
        )

    def set_heading(self, requested: Heading) -> bool:
        if self._terminal:
            return False
        if is_opposite(self._heading, requested):
            logger.debug("ignored opposite heading %s while moving %s", requested, self._heading)
            return False
        self._heading = requested
        return True

    def advance(self) -> GameSnapshot:
        if self._terminal:
            return self.snapshot()

        new_head = next_head(self._snake[0], self._heading)
        if collides(new_head, self._snake, self._width, self._height):
            self._terminal = True
            cause = "wall" if out_of_bounds(new_head, self._width, self._height) else "self"
            logger.info("game over: %s collision at length %d", cause, len(self._snake))
            return self.snapshot()

        if new_head == self._food:
            new_snake = [new_head, *self._snake]
            self._food = random_food(self._rng, self._width, self._height)
            logger.debug("food eaten, length=%d next food=%s", len(new_snake), self._food)
        else:
            new_snake = [new_head, *self._snake[:-1]]

        self._snake = new_snake
        return self.snapshot()

    def load(self, snapshot: GameSnapshot) -> None:
        """Replace the current state with ``snapshot``, e.g. to resume a saved position."""
        if not snapshot.snake:
            raise ValueError("snake must have at least one segment")
        self._snake = list(snapshot.snake)
        self._food = snapshot.food
        self._heading = snapshot.heading
        self._terminal = snapshot.terminal

    def reset(self) -> GameSnapshot:
        self._snake = list(INITIAL_SNAKE)
        self._food = random_food(self._rng, self._width, self._height)
        self._heading = INITIAL_HEADING
        self._terminal = False
        logger.info("game reset, food at (%d, %d)", self._food.x, self._food.y)
        return self.snapshot()
