GRID_ROWS = 4
GRID_COLS = 4
CELL_COUNT = GRID_ROWS * GRID_COLS

# Upcoming tiles held in the queue; only the first two are shown.
QUEUE_LENGTH = 3
QUEUE_VISIBLE = 2

HISTORY_CAPACITY = 20

STARTING_TRASH = 10
TRASH_PER_LEVEL = 2
# A level is gained each time score exceeds level * LEVEL_SCORE_STEP.
LEVEL_SCORE_STEP = 50

# Key the best score is stored under in the save file.
BEST_SCORE_KEY = "justDivideBest"
DATA_DIR_ENV = "JUST_DIVIDE_DATA_DIR"

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Just Divide"
CELL_TEXT_SIZE = 28
CELL_PITCH = 90
BOARD_LEFT = 80
BOARD_TOP = 480
PANEL_LEFT = 500

# Key symbols as reported by arcade.Window.on_key_press (pyglet key codes).
KEY_ESCAPE = 65307
KEY_ENTER = 65293
KEY_SPACE = 32
KEY_1 = 49
KEY_2 = 50
KEY_3 = 51
KEY_G = 103
KEY_H = 104
KEY_K = 107
KEY_R = 114
KEY_T = 116
KEY_Z = 122
