"""
Move rules for the chess pieces on the keypad.

Each piece is a pure function from a digit to the set of digits it can
reach in one move. Candidate cells are generated from the piece geometry
and filtered through the keypad validity check, so a piece stuck on a
cell with no reachable buttons simply gets an empty set.
"""

from functools import partial
from types import MappingProxyType
from typing import Callable, FrozenSet, Iterable, Mapping, Tuple

from chess_phone_numbers.constants import (
    KEYPAD_COLUMNS,
    KEYPAD_ROWS,
    PAWN_DOUBLE_STEP_ROWS,
    PIECE_ORDER,
)
from chess_phone_numbers.keypad import all_digits, digit_to_position, position_to_digit
from chess_phone_numbers.walk_types import Digit, MoveGraph

MoveRule = Callable[[Digit], FrozenSet[Digit]]

KNIGHT_OFFSETS = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)

DIAGONAL_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def _reachable(cells: Iterable[Tuple[int, int]]) -> FrozenSet[Digit]:
    """Keep only the cells that hold a digit."""
    digits = (position_to_digit(row, column) for row, column in cells)
    return frozenset(digit for digit in digits if digit is not None)


def _offset_cells(digit: Digit, offsets) -> FrozenSet[Digit]:
    row, column = digit_to_position(digit)
    return _reachable((row + dr, column + dc) for dr, dc in offsets)


def knight_moves(digit: Digit) -> FrozenSet[Digit]:
    return _offset_cells(digit, KNIGHT_OFFSETS)


def king_moves(digit: Digit) -> FrozenSet[Digit]:
    return _offset_cells(digit, KING_OFFSETS)


def rook_moves(digit: Digit) -> FrozenSet[Digit]:
    """Every other button in the same row or column, at any distance."""
    row, column = digit_to_position(digit)
    same_column = [(r, column) for r in range(KEYPAD_ROWS) if r != row]
    same_row = [(row, c) for c in range(KEYPAD_COLUMNS) if c != column]
    return _reachable(same_column + same_row)


def bishop_moves(digit: Digit) -> FrozenSet[Digit]:
    """Every button on either diagonal through the digit, at any distance."""
    row, column = digit_to_position(digit)
    cells = []
    for dr, dc in DIAGONAL_DIRECTIONS:
        for distance in range(1, max(KEYPAD_ROWS, KEYPAD_COLUMNS)):
            cells.append((row + dr * distance, column + dc * distance))
    return _reachable(cells)


def queen_moves(digit: Digit) -> FrozenSet[Digit]:
    return rook_moves(digit) | bishop_moves(digit)


def pawn_moves(
    digit: Digit, double_step_rows: FrozenSet[int] = PAWN_DOUBLE_STEP_ROWS
) -> FrozenSet[Digit]:
    """
    Forward moves toward the top row.

    A pawn always advances one row. From one of the double-step rows it may
    advance two rows instead. There is no capture, backward move or
    promotion, so a pawn on the top row has nowhere to go.
    """
    row, column = digit_to_position(digit)
    cells = [(row - 1, column)]
    if row in double_step_rows:
        cells.append((row - 2, column))
    return _reachable(cells)


# Piece name -> move function, read-only
MOVE_RULES: Mapping[str, MoveRule] = MappingProxyType(
    {
        "Pawn": pawn_moves,
        "Knight": knight_moves,
        "Bishop": bishop_moves,
        "Rook": rook_moves,
        "Queen": queen_moves,
        "King": king_moves,
    }
)


def get_move_rule(piece: str) -> MoveRule:
    if piece not in MOVE_RULES:
        raise ValueError(
            f"Unknown piece '{piece}', expected one of: {', '.join(PIECE_ORDER)}"
        )
    return MOVE_RULES[piece]


def build_move_graph(
    piece: str, pawn_double_step_rows: FrozenSet[int] = PAWN_DOUBLE_STEP_ROWS
) -> MoveGraph:
    """
    Evaluate a piece's move rule over every digit.

    Args:
        piece: Name of the chess piece
        pawn_double_step_rows: Rows a pawn may double-step from; ignored
            for the other pieces

    Returns:
        Read-only mapping of digit to its sorted reachable digits
    """
    rule = get_move_rule(piece)
    if piece == "Pawn":
        rule = partial(pawn_moves, double_step_rows=frozenset(pawn_double_step_rows))

    return MappingProxyType(
        {digit: tuple(sorted(rule(digit))) for digit in all_digits()}
    )


# Default move graph for every piece, built once at import
MOVE_GRAPHS: Mapping[str, MoveGraph] = MappingProxyType(
    {piece: build_move_graph(piece) for piece in PIECE_ORDER}
)
