import logging

import numpy as np

from config import *
from apple_eater.food import generate_food
from apple_eater.state import (
    Phase, Reset, Tick, TogglePause, Turn, initial_state,
)

logger = logging.getLogger(__name__)


def tick(state, rng):
    """Advance the snake by one cell.

    Only a running game moves; any other phase returns `state` itself. Hitting
    a wall or any current body cell (the tail too, since it has not moved yet)
    ends the game and leaves the snake where it was. Reaching the food grows
    the snake by one and scores FOOD_REWARD.
    """
    if state.phase is not Phase.RUNNING:
        return state

    new_head = state.head.shifted(state.direction)
    if not new_head.in_bounds() or new_head in state.snake:
        return state.evolve(phase=Phase.GAME_OVER)

    snake = (new_head,) + state.snake
    if new_head == state.food:
        return state.evolve(
            snake=snake,
            score=state.score + FOOD_REWARD,
            food=generate_food(snake, rng),
        )
    return state.evolve(snake=snake[:-1])


def set_direction(state, requested):
    """Steer the snake. Reversals and same-axis turns are ignored.

    Any directional input starts a game that has not started yet, even when
    the turn itself is rejected.
    """
    if state.phase is Phase.GAME_OVER:
        return state

    changes = {}
    if state.phase is Phase.NOT_STARTED:
        changes["phase"] = Phase.RUNNING
    if state.direction.is_orthogonal(requested):
        changes["direction"] = requested
    if not changes:
        return state
    return state.evolve(**changes)


def toggle_pause(state):
    if state.phase is Phase.RUNNING:
        return state.evolve(phase=Phase.PAUSED)
    if state.phase is Phase.PAUSED:
        return state.evolve(phase=Phase.RUNNING)
    return state


def reset(state=None):
    """Fresh game, already running."""
    return initial_state(phase=Phase.RUNNING)


def transition(state, event, rng):
    if isinstance(event, Tick):
        return tick(state, rng)
    if isinstance(event, Turn):
        return set_direction(state, event.direction)
    if isinstance(event, TogglePause):
        return toggle_pause(state)
    if isinstance(event, Reset):
        return reset(state)
    return state


class GameEngine:
    """Owns the current game state and feeds events through `transition`."""

    def __init__(self, seed=None, state=None):
        self.rng = np.random.default_rng(seed)
        self.state = state if state is not None else initial_state()
        self.listeners = []

    def subscribe(self, listener):
        """Call `listener(state)` after every transition that changes the state.

        Returns a function that removes the listener again.
        """
        self.listeners.append(listener)

        def unsubscribe():
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event):
        previous = self.state
        self.state = transition(previous, event, self.rng)
        if self.state is previous:
            return self.state

        if self.state.phase is not previous.phase:
            logger.info("Phase %s -> %s (score %d)",
                        previous.phase.name, self.state.phase.name, self.state.score)
        if self.state.score != previous.score:
            logger.debug("Ate food at %s, score %d, new food %s",
                         self.state.head, self.state.score, self.state.food)

        for listener in list(self.listeners):
            listener(self.state)
        return self.state

    def tick(self):
        return self.dispatch(Tick())

    def set_direction(self, direction):
        return self.dispatch(Turn(direction))

    def toggle_pause(self):
        return self.dispatch(TogglePause())

    def reset(self):
        return self.dispatch(Reset())
