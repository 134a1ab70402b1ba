"""
Chess Phone Numbers

Counts the phone numbers that each chess piece can trace on a
telephone keypad.
"""

from .walk_types import (
    CountingResult,
    Digit,
    InvalidWalkLength,
    MoveGraph,
    PieceName,
    Position,
    Walk,
    WalkConstraints,
)

from .keypad import (
    DIGIT_POSITIONS,
    KEYPAD_LAYOUT,
    all_digits,
    digit_to_position,
    is_valid_position,
    position_to_digit,
)

from .pieces import MOVE_GRAPHS, MOVE_RULES, build_move_graph, get_move_rule

from .walk_counter import count_walks, count_walks_by_length, count_walks_by_start

from .walk_generator import (
    count_walks_recursive,
    format_phone_number,
    generate_all_walks,
    generate_walks_lazy,
)

from .display import format_counts, write_report

from .phone_numbers import PhoneNumberCounter, main

__version__ = "1.0.0"

__all__ = [
    # Types
    "CountingResult",
    "Digit",
    "InvalidWalkLength",
    "MoveGraph",
    "PieceName",
    "Position",
    "Walk",
    "WalkConstraints",
    # Keypad
    "DIGIT_POSITIONS",
    "KEYPAD_LAYOUT",
    "all_digits",
    "digit_to_position",
    "is_valid_position",
    "position_to_digit",
    # Move rules
    "MOVE_GRAPHS",
    "MOVE_RULES",
    "build_move_graph",
    "get_move_rule",
    # Counting
    "count_walks",
    "count_walks_by_length",
    "count_walks_by_start",
    # Generation
    "count_walks_recursive",
    "format_phone_number",
    "generate_all_walks",
    "generate_walks_lazy",
    # Reporting
    "format_counts",
    "write_report",
    # High-level
    "PhoneNumberCounter",
    "main",
]
