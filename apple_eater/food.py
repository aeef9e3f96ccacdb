import logging

import numpy as np

from config import *
from apple_eater.state import Cell

logger = logging.getLogger(__name__)


def random_cell(rng):
    """Uniformly pick any cell on the board."""
    x, y = rng.integers(0, GRID_SIZE, size=2)
    return Cell(int(x), int(y))


def free_cells(snake):
    """Return an (N, 2) array of the (x, y) cells not covered by the snake."""
    occupied = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)
    for x, y in snake:
        occupied[y, x] = True
    ys, xs = np.nonzero(~occupied)
    return np.column_stack([xs, ys])


def generate_food(snake, rng, max_attempts=FOOD_MAX_ATTEMPTS):
    """Place food on a random cell the snake does not cover.

    Draws uniformly from the whole board and rejects cells on the snake. After
    `max_attempts` rejections the remaining free cells are listed and one is
    picked directly, so the call always terminates. Returns None when the
    snake covers every cell.
    """
    body = set(snake)
    for _ in range(max_attempts):
        candidate = random_cell(rng)
        if candidate not in body:
            return candidate

    choices = free_cells(snake)
    if len(choices) == 0:
        logger.info("Board is full, no room left for food")
        return None
    logger.debug("Food rejection sampling gave up after %d draws, %d free cells left",
                 max_attempts, len(choices))
    x, y = choices[rng.integers(len(choices))]
    return Cell(int(x), int(y))
