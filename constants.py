# constants.py

# Edge directions on a piece, clockwise from the top
TOP, RIGHT, BOTTOM, LEFT = 0, 1, 2, 3

GRID_SIZE = 3
NUM_SLOTS = GRID_SIZE * GRID_SIZE
NUM_EDGES = 4
NUM_ORIENTATIONS = 4

# (row, col) of each slot. Slot 0 is the center, the rest spiral clockwise
# starting right of the center:
#
#   6 7 8
#   5 0 1
#   4 3 2
SLOT_POSITIONS = [
    (1, 1),  # Slot 0
    (1, 2),  # Slot 1
    (2, 2),  # Slot 2
    (2, 1),  # Slot 3
    (2, 0),  # Slot 4
    (1, 0),  # Slot 5
    (0, 0),  # Slot 6
    (0, 1),  # Slot 7
    (0, 2),  # Slot 8
]

# Slots of each grid row, top to bottom
DISPLAY_ROWS = [
    [6, 7, 8],
    [5, 0, 1],
    [4, 3, 2],
]

# For every slot, the checks a candidate must pass against slots filled
# before it: (candidate_direction, earlier_slot, earlier_direction).
# The first check is always against the previous slot; slots 3, 5, 7 and 8
# close a loop and have a second neighbour already placed.
ADJACENCY_TABLE = (
    (),
    ((LEFT, 0, RIGHT),),
    ((TOP, 1, BOTTOM),),
    ((RIGHT, 2, LEFT), (TOP, 0, BOTTOM)),
    ((RIGHT, 3, LEFT),),
    ((BOTTOM, 4, TOP), (RIGHT, 0, LEFT)),
    ((BOTTOM, 5, TOP),),
    ((LEFT, 6, RIGHT), (BOTTOM, 0, TOP)),
    ((LEFT, 7, RIGHT), (BOTTOM, 1, TOP)),
)

# Edge values are stored as 32-bit integers, so no sum of two can overflow
EDGE_VALUE_MIN = -(2 ** 31)
EDGE_VALUE_MAX = 2 ** 31 - 1
