"""Package initializer for the apple_eater package.

The engine and state modules only need numpy, so importing them does not
open a window or initialise pygame. The window shell is exported lazily::

	from apple_eater import SnakeApp
"""

from apple_eater.engine import GameEngine, transition
from apple_eater.state import Cell, Direction, GameState, Phase, initial_state

__version__ = "0.1"

__all__ = [
	"Cell",
	"Direction",
	"GameEngine",
	"GameState",
	"Phase",
	"SnakeApp",
	"initial_state",
	"transition",
]

def __getattr__(name: str):
	if name == "SnakeApp":
		from .app import SnakeApp

		return SnakeApp
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
