"""
Walk generation using depth-first search.

This module enumerates actual digit sequences, complementing the matrix
counting approach with concrete walks. Its exhaustive count serves as an
independent check of the counting code.

IMPORTANT: Walk length is measured in digits (nodes), not in moves.
A walk with n digits takes n-1 moves.
"""

from typing import FrozenSet, Generator, List

from chess_phone_numbers.constants import ALLOWED_FIRST_DIGITS
from chess_phone_numbers.walk_counter import validate_walk_length
from chess_phone_numbers.walk_types import Digit, MoveGraph, Walk, WalkConstraints


def _depth_first_search(
    graph: MoveGraph, current_walk: Walk, length: int
) -> Generator[Walk, None, None]:
    """
    Generator that yields every extension of current_walk to the given length.

    Digits can be revisited, so walks may contain repeats.
    """
    if len(current_walk) == length:
        yield current_walk[:]
        return

    for next_digit in graph.get(current_walk[-1], ()):
        current_walk.append(next_digit)

        yield from _depth_first_search(graph, current_walk, length)

        current_walk.pop()


def generate_walks_lazy(
    graph: MoveGraph, constraints: WalkConstraints
) -> Generator[Walk, None, None]:
    """
    Lazily generate walks satisfying the given constraints.

    Use this when you don't need all walks in memory at once.

    Args:
        graph: The move graph of a piece
        constraints: Walk constraints

    Yields:
        Valid walks one at a time, grouped by ascending first digit
    """
    validate_walk_length(constraints.length)

    for first_digit in sorted(constraints.allowed_first_digits):
        if first_digit not in graph:
            continue
        yield from _depth_first_search(graph, [first_digit], constraints.length)


def generate_all_walks(graph: MoveGraph, constraints: WalkConstraints) -> List[Walk]:
    """Generate all walks satisfying the given constraints."""
    return list(generate_walks_lazy(graph, constraints))


def count_walks_recursive(
    graph: MoveGraph,
    length: int,
    allowed_first_digits: FrozenSet[Digit] = ALLOWED_FIRST_DIGITS,
) -> int:
    """
    Count walks by exhaustive recursion, without materialising them.

    Exponential in the walk length; meant as an oracle for the matrix
    method on short walks.
    """
    validate_walk_length(length)

    def _count_from(digit: Digit, remaining_moves: int) -> int:
        if remaining_moves == 0:
            return 1
        return sum(
            _count_from(next_digit, remaining_moves - 1)
            for next_digit in graph.get(digit, ())
        )

    return sum(
        _count_from(digit, length - 1)
        for digit in sorted(allowed_first_digits)
        if digit in graph
    )


def format_phone_number(walk: Walk) -> str:
    """
    Join a walk into a phone number string.

    Seven digit numbers get the usual dash after the exchange: 314-5289.
    """
    digits = "".join(str(digit) for digit in walk)
    if len(digits) == 7:
        return f"{digits[:3]}-{digits[3:]}"
    return digits
