import pygame

from apple_eater.state import Direction, Reset, TogglePause, Turn

ARROW_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def event_for_key(key):
    """Translate a pressed key into a game event, or None if it means nothing."""
    if key in ARROW_KEYS:
        return Turn(ARROW_KEYS[key])
    if key == pygame.K_SPACE:
        return TogglePause()
    if key == pygame.K_r:
        return Reset()
    return None


def event_for_click(pos, buttons):
    """Return Reset when `pos` falls on one of the visible reset buttons."""
    for rect in buttons:
        if rect is not None and rect.collidepoint(pos):
            return Reset()
    return None


def is_quit(event):
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
