from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from config import *


class Cell(NamedTuple):
    x: int
    y: int

    def in_bounds(self):
        return 0 <= self.x < GRID_SIZE and 0 <= self.y < GRID_SIZE

    def shifted(self, direction):
        dx, dy = direction.value
        return Cell(self.x + dx, self.y + dy)


class Direction(Enum):
    """Unit movement vectors on the grid (y grows downwards)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    def is_orthogonal(self, other):
        """True when `other` moves along the axis this direction leaves still."""
        return (self.dx == 0) != (other.dx == 0)


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """Whole game at one instant. Transitions build a new value."""

    snake: Tuple[Cell, ...]
    direction: Direction
    food: Optional[Cell]
    score: int
    phase: Phase

    @property
    def head(self):
        return self.snake[0]

    @property
    def tail(self):
        return self.snake[-1]

    def evolve(self, **changes):
        return replace(self, **changes)


def initial_state(phase=Phase.NOT_STARTED):
    return GameState(
        snake=tuple(Cell(*c) for c in INITIAL_SNAKE),
        direction=Direction(INITIAL_DIRECTION),
        food=Cell(*INITIAL_FOOD),
        score=0,
        phase=phase,
    )


# Events fed to the reducer


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class Turn:
    direction: Direction


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Reset:
    pass
