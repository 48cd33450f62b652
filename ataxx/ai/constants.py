# Ataxx Game Constants
SIDE = 7
# Playable side plus a 2-deep blocked border on each edge
EXTENDED_SIDE = SIDE + 4
BOARD_CELLS = EXTENDED_SIDE * EXTENDED_SIDE
PLAYABLE_CELLS = SIDE * SIDE

COLUMNS = "abcdefg"
ROWS = "1234567"
PASS_COLUMN = "-"

# Consecutive jumps without an extend that end the game
JUMP_LIMIT = 25

# Default agent parameters
DEFAULT_MINIMAX_DEPTH = 4

# Search values
WINNING_VALUE = 1_000_000
INFTY = float('inf')

# Start layout
RED_CORNERS = (("a", "7"), ("g", "1"))
BLUE_CORNERS = (("a", "1"), ("g", "7"))
CORNERS = RED_CORNERS + BLUE_CORNERS

# Mirror images used for symmetric block placement
REFLECTIONS = {
    "a": "g", "g": "a",
    "b": "f", "f": "b",
    "c": "e", "e": "c",
    "d": "d",
    "1": "7", "7": "1",
    "2": "6", "6": "2",
    "3": "5", "5": "3",
    "4": "4",
}

# (dc, dr) offsets: 8 adjacent squares, and the 24 squares within two steps,
# both in scan order (larger offsets first)
ADJACENT_POSITIONS = tuple(
    (dc, dr) for dc in (1, 0, -1) for dr in (1, 0, -1) if (dc, dr) != (0, 0)
)
MOVE_POSITIONS = tuple(
    (dc, dr) for dc in (2, 1, 0, -1, -2) for dr in (2, 1, 0, -1, -2) if (dc, dr) != (0, 0)
)
