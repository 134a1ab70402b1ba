from typing import Dict, FrozenSet, List, Literal, Mapping, NamedTuple, Tuple

from chess_phone_numbers.constants import ALLOWED_FIRST_DIGITS


# Type aliases for clarity
Digit = int
Walk = List[Digit]
MoveGraph = Mapping[Digit, Tuple[Digit, ...]]
PieceName = Literal["Pawn", "Knight", "Bishop", "Rook", "Queen", "King"]


class Position(NamedTuple):
    """A cell on the keypad grid, row 0 at the top."""

    row: int
    column: int


class WalkConstraints(NamedTuple):
    """Immutable constraints for walk generation.

    Length is measured in digits (nodes), so a walk of length n takes
    n - 1 moves.
    """

    length: int
    allowed_first_digits: FrozenSet[Digit] = ALLOWED_FIRST_DIGITS


class CountingResult(NamedTuple):
    """Result of walk counting operations."""

    count: int
    by_start_digit: Dict[Digit, int]


class InvalidWalkLength(ValueError):
    """Raised when a walk length below one is requested."""
