"""
Движок змейки: состояние игры, шаг по таймеру, еда и столкновения.

Никакой отрисовки здесь нет - внешний цикл (play.py) вызывает tick()
с фиксированным интервалом и рисует полученный снимок.

Жизненный цикл:
  IDLE    -> start() -> RUNNING
  RUNNING -> pause() -> PAUSED -> start() -> RUNNING
  RUNNING -> столкновение -> ENDED -> reset() -> IDLE
"""
import logging
import numbers
from enum import Enum
from typing import NamedTuple, Optional, Tuple

import numpy as np

import config

logger = logging.getLogger(__name__)


class Direction(Enum):
    UP = config.UP
    DOWN = config.DOWN
    LEFT = config.LEFT
    RIGHT = config.RIGHT

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


class Lifecycle(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


class Cell(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> "Cell":
        dx, dy = direction.value
        return Cell(self.x + dx, self.y + dy)


class Snapshot(NamedTuple):
    """Копия состояния для отрисовки (только чтение)"""
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    lifecycle: Lifecycle
    won: bool = False


def place_food(grid_count, occupied, rng):
    """
    Случайная свободная клетка (равномерно по всему полю).

    Сначала обычный перебор случайных клеток, как в браузерной версии.
    Если поле почти заполнено и попытки кончились - явный поиск пустых
    клеток через маску. None, если свободных клеток нет вообще.
    """
    attempts = grid_count * grid_count
    for _ in range(attempts):
        x, y = rng.integers(0, grid_count, size=2)
        cell = Cell(int(x), int(y))
        if cell not in occupied:
            return cell

    free = np.ones((grid_count, grid_count), dtype=bool)
    for x, y in occupied:
        if 0 <= x < grid_count and 0 <= y < grid_count:
            free[y, x] = False

    empty = np.argwhere(free)
    if len(empty) == 0:
        return None
    y, x = empty[rng.integers(len(empty))]
    return Cell(int(x), int(y))


def check_collision(head, body, grid_count):
    """Стена или собственное тело (body - сегменты без головы)"""
    if head[0] < 0 or head[0] >= grid_count or head[1] < 0 or head[1] >= grid_count:
        return True
    return head in body


def _check_positive(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


class SnakeGame:
    def __init__(self, grid_count=None, tick_interval_ms=None,
                 score_per_food=None, initial_length=None,
                 auto_reset=False, seed=None):
        self.tick_interval_ms = _check_positive(
            "tick_interval_ms",
            config.TICK_INTERVAL_MS if tick_interval_ms is None else tick_interval_ms)
        self.score_per_food = _check_positive(
            "score_per_food",
            config.SCORE_FOR_FOOD if score_per_food is None else score_per_food)
        self.initial_length = _check_positive(
            "initial_length",
            config.INITIAL_SNAKE_LENGTH if initial_length is None else initial_length)
        self.auto_reset = auto_reset
        self.rng = np.random.default_rng(seed)

        self.grid_count = config.GRID_COUNT if grid_count is None else grid_count
        self.reset()

    def reset(self, grid_count=None):
        """Сброс игры (змейка в центре, направление вправо)"""
        if grid_count is None:
            grid_count = self.grid_count
        grid_count = _check_positive("grid_count", grid_count)
        center = grid_count // 2
        # Змейка должна влезть слева от центра и оставить место для еды
        if self.initial_length > center + 1 or self.initial_length >= grid_count * grid_count:
            raise ValueError(
                f"initial_length {self.initial_length} does not fit "
                f"on a {grid_count}x{grid_count} grid")
        self.grid_count = grid_count

        # Голова в центре, хвост уходит влево
        self.snake = [Cell(center - i, center) for i in range(self.initial_length)]
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT
        self.score = 0
        self.won = False
        self.lifecycle = Lifecycle.IDLE
        self.food = place_food(self.grid_count, set(self.snake), self.rng)

        logger.debug("reset: grid %dx%d, food at %s",
                     self.grid_count, self.grid_count, self.food)
        return self.snapshot()

    def start(self):
        """Старт новой игры или продолжение после паузы"""
        if self.lifecycle not in (Lifecycle.IDLE, Lifecycle.PAUSED):
            return False
        logger.debug("%s -> running", self.lifecycle.value)
        self.lifecycle = Lifecycle.RUNNING
        return True

    def pause(self):
        if self.lifecycle is not Lifecycle.RUNNING:
            return False
        logger.debug("running -> paused")
        self.lifecycle = Lifecycle.PAUSED
        return True

    def toggle_pause(self):
        """Пробел: пауза / продолжение"""
        if self.lifecycle is Lifecycle.PAUSED:
            return self.start()
        return self.pause()

    def set_direction(self, requested):
        """
        Запоминаем следующее направление.
        Разворот на 180 градусов относительно текущего (уже применённого)
        направления игнорируется, иначе змейка врежется в свою шею.
        """
        if self.lifecycle is not Lifecycle.RUNNING:
            return False
        if requested is self.direction.opposite:
            return False
        self.next_direction = requested
        return True

    def tick(self):
        """Один шаг змейки"""
        if self.lifecycle is not Lifecycle.RUNNING:
            return self.snapshot()

        self.direction = self.next_direction
        head = self.snake[0].step(self.direction)
        self.snake.insert(0, head)

        if head == self.food:
            # Растём: хвост не убираем
            self.score += self.score_per_food
            self.food = place_food(self.grid_count, set(self.snake), self.rng)
            logger.debug("food eaten, score %d, new food at %s", self.score, self.food)
        else:
            self.snake.pop()

        if check_collision(head, self.snake[1:], self.grid_count):
            return self._end_game()

        # Победа: змейка заняла всё поле
        if self.food is None:
            self.won = True
            return self._end_game()

        return self.snapshot()

    def _end_game(self):
        self.lifecycle = Lifecycle.ENDED
        logger.info("game over: score %d, length %d%s",
                    self.score, len(self.snake), " (win)" if self.won else "")
        final = self.snapshot()
        if self.auto_reset:
            self.reset()
        return final

    def snapshot(self):
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            lifecycle=self.lifecycle,
            won=self.won,
        )

    @property
    def head(self):
        return self.snake[0]

    @property
    def length(self):
        return len(self.snake)
