"""
Walk counting using adjacency matrix propagation.

A count vector holds, for every digit, the number of partial walks of the
current length ending on it. Each step multiplies the vector by the
adjacency matrix of the move graph, so only two rows of the count table
exist at any time.

Counts are kept in object arrays so numpy operates on Python ints and
long walks never overflow.
"""

from typing import Dict, FrozenSet, Iterable, Tuple

import numpy as np

from chess_phone_numbers.constants import ALLOWED_FIRST_DIGITS
from chess_phone_numbers.walk_types import (
    CountingResult,
    Digit,
    InvalidWalkLength,
    MoveGraph,
)


def validate_walk_length(length: int) -> None:
    """Reject lengths that cannot describe a walk."""
    if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
        raise InvalidWalkLength(f"Walk length must be an integer, got {length!r}")
    if length < 1:
        raise InvalidWalkLength(f"Walk length must be at least 1, got {length}")


def _build_adjacency_matrix(graph: MoveGraph) -> Tuple[np.ndarray, Dict[Digit, int]]:
    """
    Build adjacency matrix and digit index mapping from a move graph.

    Args:
        graph: The move graph

    Returns:
        Tuple of (adjacency_matrix, digit_to_index_mapping)
    """
    digits = sorted(graph.keys())
    n = len(digits)
    digit_to_idx = {digit: i for i, digit in enumerate(digits)}

    matrix = np.zeros((n, n), dtype=object)
    for i, digit in enumerate(digits):
        for next_digit in graph[digit]:
            if next_digit in digit_to_idx:
                matrix[i, digit_to_idx[next_digit]] = 1

    return matrix, digit_to_idx


def _initial_counts(
    digit_to_idx: Dict[Digit, int], first_digits: Iterable[Digit]
) -> np.ndarray:
    counts = np.zeros(len(digit_to_idx), dtype=object)
    for digit in first_digits:
        if digit in digit_to_idx:
            counts[digit_to_idx[digit]] = 1
    return counts


def _propagate(matrix: np.ndarray, counts: np.ndarray, steps: int) -> np.ndarray:
    """Advance the count vector by the given number of moves."""
    for _ in range(steps):
        counts = np.dot(counts, matrix)
    return counts


def count_walks(
    graph: MoveGraph,
    length: int,
    allowed_first_digits: FrozenSet[Digit] = ALLOWED_FIRST_DIGITS,
) -> int:
    """
    Count all walks of the given length starting on an allowed digit.

    Only the first digit is restricted; a walk may end anywhere.

    Args:
        graph: The move graph of a piece
        length: Number of digits in each walk
        allowed_first_digits: Digits a walk may start on

    Returns:
        Total number of walks
    """
    validate_walk_length(length)
    matrix, digit_to_idx = _build_adjacency_matrix(graph)

    counts = _initial_counts(digit_to_idx, allowed_first_digits)
    counts = _propagate(matrix, counts, length - 1)

    return int(sum(counts))


def count_walks_by_start(
    graph: MoveGraph,
    length: int,
    allowed_first_digits: FrozenSet[Digit] = ALLOWED_FIRST_DIGITS,
) -> CountingResult:
    """
    Count walks of the given length, broken down by their first digit.

    Each first digit gets its own single-source propagation, so the
    breakdown doubles as a cross-check of the combined total.
    """
    validate_walk_length(length)
    matrix, digit_to_idx = _build_adjacency_matrix(graph)

    by_start_digit = {}
    for digit in sorted(allowed_first_digits):
        if digit not in digit_to_idx:
            continue
        counts = _propagate(matrix, _initial_counts(digit_to_idx, [digit]), length - 1)
        by_start_digit[digit] = int(sum(counts))

    return CountingResult(
        count=sum(by_start_digit.values()), by_start_digit=by_start_digit
    )


def count_walks_by_length(
    graph: MoveGraph,
    max_length: int,
    allowed_first_digits: FrozenSet[Digit] = ALLOWED_FIRST_DIGITS,
    verbose: bool = False,
) -> Dict[int, int]:
    """
    Count walks for every length from 1 to max_length in a single pass.

    Args:
        graph: The move graph of a piece
        max_length: Longest walk length to report
        allowed_first_digits: Digits a walk may start on
        verbose: Whether to print each length as it is computed

    Returns:
        Mapping of walk length to walk count
    """
    validate_walk_length(max_length)
    matrix, digit_to_idx = _build_adjacency_matrix(graph)

    by_length = {}
    counts = _initial_counts(digit_to_idx, allowed_first_digits)

    for length in range(1, max_length + 1):
        if length > 1:
            counts = np.dot(counts, matrix)
        by_length[length] = int(sum(counts))

        if verbose:
            print(f"Length {length}: {by_length[length]:,} walks")

    return by_length
