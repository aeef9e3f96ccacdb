GRID_SIZE = 20
CELL_SIZE = 20

INITIAL_SNAKE = ((10, 10),)
INITIAL_DIRECTION = (1, 0)
INITIAL_FOOD = (15, 15)

FOOD_REWARD = 10
FOOD_MAX_ATTEMPTS = 100

TICK_INTERVAL_MS = 150
FPS = 60

# Board sits below a header (title, score, reset button) and above a hint footer
BOARD_MARGIN = 24
BORDER_WIDTH = 4
HEADER_HEIGHT = 90
FOOTER_HEIGHT = 56

BOARD_PX = GRID_SIZE * CELL_SIZE
WINDOW_WIDTH = BOARD_PX + BOARD_MARGIN * 2
WINDOW_HEIGHT = HEADER_HEIGHT + BOARD_PX + FOOTER_HEIGHT + BOARD_MARGIN

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (239, 68, 68)
GREY = (75, 85, 99)

BACKGROUND = (21, 128, 61)
PANEL = (255, 255, 255)
BOARD_COLOR = (240, 253, 244)
BORDER_COLOR = (22, 101, 52)
HEAD_COLOR = (21, 128, 61)
BODY_COLOR = (34, 197, 94)
SEGMENT_OUTLINE = (0, 0, 0)
TITLE_COLOR = (22, 101, 52)
BUTTON_COLOR = (22, 163, 74)
BUTTON_HOVER = (21, 128, 61)
GAME_OVER_COLOR = (220, 38, 38)

# Alpha of the dimming layer behind overlays
OVERLAY_ALPHA = 128
GAME_OVER_ALPHA = 178
