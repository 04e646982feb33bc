import random

import pytest

from mobile_snake.engine import SnakeEngine, collides, is_opposite, next_head, random_food
from mobile_snake.models import INITIAL_SNAKE, Cell, GameSnapshot, Heading


def _engine_with(snake: list[tuple[int, int]], heading: Heading, food: tuple[int, int] = (10, 10), seed: int = 1) -> SnakeEngine:
    engine = SnakeEngine(rng=random.Random(seed))
    engine.load(
        GameSnapshot(
            snake=tuple(Cell(x, y) for x, y in snake),
            food=Cell(*food),
            heading=heading,
            terminal=False,
        )
    )
    return engine


def test_initial_state() -> None:
    engine = SnakeEngine(rng=random.Random(3))
    snap = engine.snapshot()

    assert snap.snake == INITIAL_SNAKE
    assert snap.heading == Heading.RIGHT
    assert snap.terminal is False
    assert 0 <= snap.food.x < 15 and 0 <= snap.food.y < 15


def test_next_head_moves_one_cell_per_heading() -> None:
    head = Cell(5, 5)
    assert next_head(head, Heading.UP) == Cell(5, 4)
    assert next_head(head, Heading.DOWN) == Cell(5, 6)
    assert next_head(head, Heading.LEFT) == Cell(4, 5)
    assert next_head(head, Heading.RIGHT) == Cell(6, 5)


def test_is_opposite_pairs() -> None:
    assert is_opposite(Heading.UP, Heading.DOWN)
    assert is_opposite(Heading.LEFT, Heading.RIGHT)
    assert not is_opposite(Heading.UP, Heading.LEFT)
    assert not is_opposite(Heading.UP, Heading.UP)


def test_collides_checks_bounds_and_body() -> None:
    body = [Cell(1, 1), Cell(1, 2)]
    assert collides(Cell(-1, 0), body, 15, 15)
    assert collides(Cell(0, 15), body, 15, 15)
    assert collides(Cell(1, 2), body, 15, 15)
    assert not collides(Cell(14, 14), body, 15, 15)


def test_random_food_stays_on_grid() -> None:
    rng = random.Random(42)
    cells = {random_food(rng, 15, 15) for _ in range(500)}
    assert all(0 <= c.x < 15 and 0 <= c.y < 15 for c in cells)


def test_first_advance_drops_tail() -> None:
    engine = _engine_with([(2, 2), (2, 1), (2, 0)], Heading.RIGHT)

    snap = engine.advance()

    assert snap.snake == (Cell(3, 2), Cell(2, 2), Cell(2, 1))
    assert snap.terminal is False
    assert snap.food == Cell(10, 10)


def test_set_heading_accepts_perpendicular_and_rejects_opposite() -> None:
    engine = SnakeEngine(rng=random.Random(1))

    assert engine.set_heading(Heading.LEFT) is False
    assert engine.heading == Heading.RIGHT

    assert engine.set_heading(Heading.DOWN) is True
    assert engine.heading == Heading.DOWN

    assert engine.set_heading(Heading.UP) is False
    assert engine.heading == Heading.DOWN


def test_opposite_is_rejected_even_for_single_segment_snake() -> None:
    engine = _engine_with([(7, 7)], Heading.UP)

    engine.set_heading(Heading.DOWN)

    assert engine.heading == Heading.UP


def test_wall_collision_sets_terminal_and_keeps_snake() -> None:
    engine = _engine_with([(14, 4), (13, 4), (12, 4)], Heading.RIGHT)
    before = engine.snapshot()

    after = engine.advance()

    assert after.terminal is True
    assert after.snake == before.snake
    assert after.food == before.food
    assert after.heading == Heading.RIGHT


def test_self_collision_sets_terminal() -> None:
    engine = _engine_with([(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)], Heading.DOWN)

    snap = engine.advance()

    assert snap.terminal is True
    assert snap.head == Cell(5, 5)


def test_moving_into_current_tail_is_a_collision() -> None:
    engine = _engine_with([(2, 2), (2, 3), (1, 3), (1, 2)], Heading.LEFT)

    assert engine.advance().terminal is True


def test_eating_food_grows_by_one_and_rerolls_food() -> None:
    seed = 11
    engine = _engine_with([(2, 2), (2, 1), (2, 0)], Heading.RIGHT, food=(3, 2), seed=seed)
    expected_rng = random.Random(seed)
    # reset() in the constructor consumes one food roll.
    random_food(expected_rng, 15, 15)
    expected_food = random_food(expected_rng, 15, 15)

    snap = engine.advance()

    assert snap.length == 4
    assert snap.snake == (Cell(3, 2), Cell(2, 2), Cell(2, 1), Cell(2, 0))
    assert snap.food == expected_food
    assert snap.terminal is False


def test_growth_keeps_tail_only_for_one_tick() -> None:
    engine = _engine_with([(2, 2), (2, 1), (2, 0)], Heading.RIGHT, food=(3, 2))
    engine.advance()
    engine.load(
        GameSnapshot(
            snake=engine.snapshot().snake,
            food=Cell(0, 14),
            heading=Heading.RIGHT,
            terminal=False,
        )
    )

    snap = engine.advance()

    assert snap.snake == (Cell(4, 2), Cell(3, 2), Cell(2, 2), Cell(2, 1))


def test_advance_and_set_heading_are_noops_after_game_over() -> None:
    engine = _engine_with([(0, 0), (1, 0)], Heading.UP)
    engine.advance()
    frozen = engine.snapshot()

    assert engine.advance() == frozen
    assert engine.set_heading(Heading.LEFT) is False
    assert engine.snapshot() == frozen


def test_advance_is_deterministic_for_same_state() -> None:
    first = _engine_with([(4, 4), (4, 5), (4, 6)], Heading.UP, seed=1)
    second = _engine_with([(4, 4), (4, 5), (4, 6)], Heading.UP, seed=99)

    assert first.advance() == second.advance()


def test_reset_restores_initial_layout() -> None:
    engine = _engine_with([(14, 4), (13, 4), (12, 4)], Heading.RIGHT)
    engine.advance()
    assert engine.terminal is True

    snap = engine.reset()

    assert snap.snake == (Cell(2, 2), Cell(2, 1), Cell(2, 0))
    assert snap.heading == Heading.RIGHT
    assert snap.terminal is False


def test_reset_takes_next_food_draw() -> None:
    seed = 11
    engine = SnakeEngine(rng=random.Random(seed))
    expected_rng = random.Random(seed)
    first_food = random_food(expected_rng, 15, 15)
    second_food = random_food(expected_rng, 15, 15)
    assert engine.snapshot().food == first_food

    snap = engine.reset()

    assert snap.food == second_food


class _FixedRandom:
    def __init__(self, value: int) -> None:
        self._value = value

    def randrange(self, stop: int) -> int:
        return self._value


def test_food_may_spawn_on_the_snake() -> None:
    engine = SnakeEngine(rng=_FixedRandom(2))  # type: ignore[arg-type]

    snap = engine.snapshot()

    assert snap.food == Cell(2, 2)
    assert snap.food in snap.snake
    assert engine.reset().food == Cell(2, 2)


def test_load_rejects_empty_snake() -> None:
    engine = SnakeEngine(rng=random.Random(1))
    with pytest.raises(ValueError):
        engine.load(GameSnapshot(snake=(), food=Cell(0, 0), heading=Heading.UP, terminal=False))
