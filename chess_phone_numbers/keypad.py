"""
Keypad data for the phone number walks.

The layout is kept as pure data; the rest of the package only asks
whether a cell holds a digit and where a digit sits.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional

from chess_phone_numbers.constants import KEYPAD_COLUMNS, KEYPAD_ROWS
from chess_phone_numbers.walk_types import Digit, Position


# The telephone keypad as pure data, row 0 at the top.
# None marks the * and # buttons, which are not part of the graph.
_KEYPAD_DATA = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (None, 0, None),
)

_DIGIT_POSITIONS = {
    digit: Position(row, column)
    for row, cells in enumerate(_KEYPAD_DATA)
    for column, digit in enumerate(cells)
    if digit is not None
}


# Expose immutable views of the layout
KEYPAD_LAYOUT = _KEYPAD_DATA
DIGIT_POSITIONS: Mapping[Digit, Position] = MappingProxyType(_DIGIT_POSITIONS)


def is_valid_position(row: int, column: int) -> bool:
    """Check whether (row, column) is a digit button on the keypad."""
    if not (0 <= row < KEYPAD_ROWS and 0 <= column < KEYPAD_COLUMNS):
        return False
    return _KEYPAD_DATA[row][column] is not None


def position_to_digit(row: int, column: int) -> Optional[Digit]:
    """Digit at (row, column), or None for off-grid and excluded cells."""
    if not is_valid_position(row, column):
        return None
    return _KEYPAD_DATA[row][column]


def digit_to_position(digit: Digit) -> Position:
    if digit not in _DIGIT_POSITIONS:
        raise ValueError(f"Digit {digit!r} is not on the keypad")
    return _DIGIT_POSITIONS[digit]


def all_digits() -> List[Digit]:
    """All keypad digits in ascending order."""
    return sorted(_DIGIT_POSITIONS)
