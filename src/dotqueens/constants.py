MIN_BOARD_SIZE = 3

# Level select presets (label -> board size).
DIFFICULTY_PRESETS = {
    "Easy": 4,
    "Medium": 6,
    "Hard": 9,
}

# Rejection sampling budget for Board.create; None disables the cap.
MAX_GENERATION_ATTEMPTS = 2000

# Colour ids in selection order and their display attribute (RGB).
DEFAULT_COLORS = {
    'red':      (214, 69, 65),    # #D64541
    'blue':     (66, 110, 214),   # #426ED6
    'green':    (76, 160, 88),    # #4CA058
    'yellow':   (236, 208, 84),   # #ECD054
    'purple':   (160, 94, 190),   # #A05EBE
    'orange':   (232, 140, 52),   # #E88C34
    'darkRed':  (128, 32, 40),    # #802028
    'darkCyan': (32, 128, 136),   # #208088
    'gray':     (150, 150, 156),  # #96969C
    'white':    (236, 236, 232),  # #ECECE8
}

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 640
WINDOW_TITLE = "DotQueens"

BOTTOM_MARGIN = 110
TOP_MARGIN = 40

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.80
BOARD_MAX_HEIGHT_PCT = 0.85
MIN_CELL_SIZE = 20

# Colour channel sum above which a cell counts as bright (dark glyphs are drawn on it).
BRIGHT_COLOR_THRESHOLD = 500

# Raw pyglet key codes; arcade.key mirrors these values.
KEY_ENTER = 65293
KEY_RETURN = 13
KEY_SPACE = 32
KEY_ESCAPE = 65307
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_H = 104
KEY_R = 114

MOUSE_BUTTON_LEFT = 1
