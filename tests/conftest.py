import os

# pygame tests run without a real display or audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from apple_eater.state import Cell, Direction, GameState, Phase


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_state():
    """Build a GameState from plain tuples."""

    def _make(snake, direction=Direction.RIGHT, food=(0, 0), score=0, phase=Phase.RUNNING):
        return GameState(
            snake=tuple(Cell(*c) for c in snake),
            direction=direction,
            food=Cell(*food) if food is not None else None,
            score=score,
            phase=phase,
        )

    return _make
