import pygame

from config import *
from apple_eater.state import Phase


class Renderer:
    """Draws a GameState onto a pygame surface.

    Holds no game logic. After each `draw` the rectangles of the reset
    buttons that are currently visible are available in `buttons` so the
    caller can hit-test mouse clicks.
    """

    def __init__(self, surface):
        self.surface = surface
        self.font = pygame.font.Font(None, 36)
        self.big_font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 24)
        self.board_rect = pygame.Rect(BOARD_MARGIN, HEADER_HEIGHT, BOARD_PX, BOARD_PX)
        self.new_game_button = None
        self.play_again_button = None

    @property
    def buttons(self):
        return [self.new_game_button, self.play_again_button]

    def cell_rect(self, cell):
        """Screen rectangle of a grid cell, shrunk by 2 px to leave a gap."""
        return pygame.Rect(
            self.board_rect.x + cell[0] * CELL_SIZE,
            self.board_rect.y + cell[1] * CELL_SIZE,
            CELL_SIZE - 2,
            CELL_SIZE - 2,
        )

    def draw_text(self, text, pos, color=BLACK, font=None):
        """Draw text centred on pos."""
        if font is None:
            font = self.font
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=pos)
        self.surface.blit(text_surface, text_rect)
        return text_rect

    def draw_button(self, label, mouse_pos=None, **anchor):
        """Draw a filled button placed by a pygame.Rect anchor, e.g. center=(x, y)."""
        text_surf = self.small_font.render(label, True, WHITE)
        box = text_surf.get_rect().inflate(32, 16)
        for name, value in anchor.items():
            setattr(box, name, value)
        hovered = mouse_pos is not None and box.collidepoint(mouse_pos)
        pygame.draw.rect(self.surface, BUTTON_HOVER if hovered else BUTTON_COLOR,
                         box, border_radius=4)
        self.surface.blit(text_surf, text_surf.get_rect(center=box.center))
        return box

    def draw_header(self, state, mouse_pos=None):
        center_x = WINDOW_WIDTH // 2
        self.draw_text("Snake Game", (center_x, 30), TITLE_COLOR, self.big_font)
        score_surf = self.font.render(f"Score: {state.score}", True, TITLE_COLOR)
        self.surface.blit(score_surf, score_surf.get_rect(
            midleft=(BOARD_MARGIN, HEADER_HEIGHT - 24)))
        self.new_game_button = self.draw_button(
            "New Game", mouse_pos, midright=(BOARD_MARGIN + BOARD_PX, HEADER_HEIGHT - 24))

    def draw_board(self, state):
        self.surface.fill(BOARD_COLOR, self.board_rect)
        border = self.board_rect.inflate(BORDER_WIDTH * 2, BORDER_WIDTH * 2)
        pygame.draw.rect(self.surface, BORDER_COLOR, border, BORDER_WIDTH)

        for i, segment in enumerate(state.snake):
            rect = self.cell_rect(segment)
            color = HEAD_COLOR if i == 0 else BODY_COLOR
            pygame.draw.rect(self.surface, color, rect, border_radius=2)
            pygame.draw.rect(self.surface, SEGMENT_OUTLINE, rect, 1, border_radius=2)

        if state.food is not None:
            rect = self.cell_rect(state.food)
            pygame.draw.circle(self.surface, RED, rect.center, rect.width // 2)

    def draw_footer(self):
        center_x = WINDOW_WIDTH // 2
        top = HEADER_HEIGHT + BOARD_PX + BORDER_WIDTH + 14
        self.draw_text("Controls: arrow keys", (center_x, top), GREY, self.small_font)
        self.draw_text("Pause: space", (center_x, top + 22), GREY, self.small_font)

    def dim_board(self, alpha):
        overlay = pygame.Surface(self.board_rect.size, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        self.surface.blit(overlay, self.board_rect.topleft)

    def draw_card(self, width, height):
        card = pygame.Rect(0, 0, width, height)
        card.center = self.board_rect.center
        pygame.draw.rect(self.surface, PANEL, card, border_radius=8)
        return card

    def draw_overlay(self, state, mouse_pos=None):
        self.play_again_button = None
        cx, cy = self.board_rect.center

        if state.phase is Phase.NOT_STARTED:
            self.dim_board(OVERLAY_ALPHA)
            self.draw_card(300, 110)
            self.draw_text("Ready to play?", (cx, cy - 18), TITLE_COLOR)
            self.draw_text("Use the arrow keys to start!", (cx, cy + 20), GREY, self.small_font)
        elif state.phase is Phase.PAUSED:
            self.dim_board(OVERLAY_ALPHA)
            self.draw_card(180, 70)
            self.draw_text("PAUSED", (cx, cy), TITLE_COLOR)
        elif state.phase is Phase.GAME_OVER:
            self.dim_board(GAME_OVER_ALPHA)
            self.draw_card(280, 180)
            self.draw_text("Game Over!", (cx, cy - 50), GAME_OVER_COLOR, self.big_font)
            self.draw_text(f"Your score: {state.score}", (cx, cy - 6), GREY)
            self.play_again_button = self.draw_button("Play Again", mouse_pos, center=(cx, cy + 46))

    def draw(self, state, mouse_pos=None):
        self.surface.fill(BACKGROUND)
        panel = pygame.Rect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT).inflate(-8, -8)
        pygame.draw.rect(self.surface, PANEL, panel, border_radius=8)
        self.draw_header(state, mouse_pos)
        self.draw_board(state)
        self.draw_overlay(state, mouse_pos)
        self.draw_footer()
