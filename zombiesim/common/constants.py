DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 128
DEFAULT_ZOMBIES = 60
DEFAULT_SURVIVORS = 30
DEFAULT_WALLS = 5
DEFAULT_WALL_MIN_LENGTH = 10
DEFAULT_WALL_MAX_LENGTH = 30
DEFAULT_WALL_THICKNESS = 3
DEFAULT_TICK_SECONDS = 0.25

# Movement offsets are drawn from randrange(MOVE_MIN, MOVE_MAX), i.e. -1, 0 or 1.
MOVE_MIN = -1
MOVE_MAX = 2

# Width of the outer ring excluded from random placement.
INTERIOR_MARGIN = 1
