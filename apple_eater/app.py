import logging

import pygame

from config import *
from apple_eater.controls import event_for_click, event_for_key, is_quit
from apple_eater.engine import GameEngine
from apple_eater.renderer import Renderer
from apple_eater.state import Tick

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class SnakeApp:
    """Window, event loop and tick timer around a GameEngine.

    The timer and the window are acquired in `__init__` and released together
    by `close()`. Use the app as a context manager so a crash inside the loop
    still disarms the timer:

        with SnakeApp() as app:
            app.run()
    """

    def __init__(self, engine=None, seed=None):
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Snake Game")
        self.clock = pygame.time.Clock()

        self.engine = engine if engine is not None else GameEngine(seed=seed)
        self.renderer = Renderer(self.screen)
        self.running = True
        self.closed = False

        # The timer only posts TICK_EVENT; the loop applies it to whatever
        # state the engine holds at that moment.
        pygame.time.set_timer(TICK_EVENT, TICK_INTERVAL_MS)
        logger.debug("Tick timer armed every %d ms", TICK_INTERVAL_MS)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def handle_event(self, event):
        """Route one pygame event to the engine."""
        if is_quit(event):
            self.running = False
            return

        game_event = None
        if event.type == TICK_EVENT:
            game_event = Tick()
        elif event.type == pygame.KEYDOWN:
            game_event = event_for_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            game_event = event_for_click(event.pos, self.renderer.buttons)

        if game_event is not None:
            self.engine.dispatch(game_event)

    def draw(self):
        self.renderer.draw(self.engine.state, pygame.mouse.get_pos())
        pygame.display.flip()

    def run(self):
        """Main game loop."""
        logger.info("Starting game loop")
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.draw()
            self.clock.tick(FPS)
        logger.info("Game loop stopped, final score %d", self.engine.state.score)

    def close(self):
        """Disarm the tick timer and shut pygame down. Safe to call twice."""
        if self.closed:
            return
        self.closed = True
        self.running = False
        try:
            pygame.time.set_timer(TICK_EVENT, 0)
        finally:
            pygame.quit()
        logger.debug("Timer released and window closed")
