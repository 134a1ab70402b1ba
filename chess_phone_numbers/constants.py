# Number of digits in a phone number
WALK_LENGTH = 7

# Phone numbers cannot start with 0 or 1
ALLOWED_FIRST_DIGITS = frozenset([2, 3, 4, 5, 6, 7, 8, 9])

# Persisted copy of the console report
OUTPUT_FILENAME = "count_for_each_pieces.txt"

# Report order
PIECE_ORDER = ("Pawn", "Knight", "Bishop", "Rook", "Queen", "King")

# Rows a pawn may double-step from (row 0 is the top of the keypad).
# Rows 2 and 3 hold 7, 8, 9 and 0.
PAWN_DOUBLE_STEP_ROWS = frozenset([2, 3])
PAWN_DOUBLE_STEP_ROWS_BOTTOM_ONLY = frozenset([3])

KEYPAD_ROWS = 4
KEYPAD_COLUMNS = 3
