"""
Tests for the matrix walk counter.

Every count is checked against an exhaustive depth-first enumeration of the
same walks, and the phone number totals are pinned to the values both
methods agree on.
"""

import unittest

import numpy as np

from chess_phone_numbers.constants import (
    ALLOWED_FIRST_DIGITS,
    PAWN_DOUBLE_STEP_ROWS_BOTTOM_ONLY,
    PIECE_ORDER,
    WALK_LENGTH,
)
from chess_phone_numbers.pieces import MOVE_GRAPHS, build_move_graph
from chess_phone_numbers.walk_counter import (
    count_walks,
    count_walks_by_length,
    count_walks_by_start,
)
from chess_phone_numbers.walk_generator import count_walks_recursive
from chess_phone_numbers.walk_types import InvalidWalkLength


# Walk counts for lengths 1..7, starting on digits 2-9
EXPECTED_BY_LENGTH = {
    "Pawn": [8, 9, 3, 0, 0, 0, 0],
    "Knight": [8, 16, 35, 82, 182, 428, 952],
    "Bishop": [8, 20, 49, 126, 327, 870, 2341],
    "Rook": [8, 35, 148, 633, 2702, 11545, 49326],
    "Queen": [8, 55, 367, 2475, 16620, 111797, 751503],
    "King": [8, 40, 202, 1002, 5017, 25007, 124908],
}


def _dict_propagation(graph, length, first_digits):
    """Plain dictionary version of the count propagation."""
    counts = {digit: 1 for digit in first_digits}
    for _ in range(length - 1):
        next_counts = {}
        for digit, count in counts.items():
            for next_digit in graph[digit]:
                next_counts[next_digit] = next_counts.get(next_digit, 0) + count
        counts = next_counts
    return sum(counts.values())


class TestWalkCounting(unittest.TestCase):
    """Test the walk counting functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.simple_graph = {2: (3, 4), 3: (4,), 4: ()}

    def test_simple_walk_counting(self):
        # 2-3-4 is the only three digit walk
        self.assertEqual(count_walks(self.simple_graph, 3, frozenset([2])), 1)
        # 2-3 and 2-4
        self.assertEqual(count_walks(self.simple_graph, 2, frozenset([2])), 2)

    def test_length_one_counts_start_digits(self):
        for piece in PIECE_ORDER:
            self.assertEqual(count_walks(MOVE_GRAPHS[piece], 1), 8, piece)

    def test_phone_number_totals(self):
        for piece in PIECE_ORDER:
            self.assertEqual(
                count_walks(MOVE_GRAPHS[piece], WALK_LENGTH),
                EXPECTED_BY_LENGTH[piece][-1],
                piece,
            )

    def test_counts_by_length(self):
        for piece in PIECE_ORDER:
            by_length = count_walks_by_length(MOVE_GRAPHS[piece], WALK_LENGTH)
            self.assertEqual(
                [by_length[length] for length in range(1, WALK_LENGTH + 1)],
                EXPECTED_BY_LENGTH[piece],
                piece,
            )

    def test_pawn_bottom_row_only_reading(self):
        graph = build_move_graph("Pawn", PAWN_DOUBLE_STEP_ROWS_BOTTOM_ONLY)
        by_length = count_walks_by_length(graph, WALK_LENGTH)

        # 4-1, 5-2, 6-3, 7-4, 8-5, 9-6
        self.assertEqual(by_length[2], 6)
        self.assertEqual(by_length[3], 3)
        self.assertEqual(by_length[WALK_LENGTH], 0)

    def test_ending_digit_is_unrestricted(self):
        # 2 -> 0 is a legal Rook move even though 0 may not start a number
        rook = MOVE_GRAPHS["Rook"]
        self.assertEqual(count_walks(rook, 2, frozenset([2])), len(rook[2]))
        self.assertIn(0, rook[2])

    def test_disallowed_first_digits_are_not_counted(self):
        king = MOVE_GRAPHS["King"]
        everything = count_walks(king, 3, frozenset(range(10)))
        allowed = count_walks(king, 3)
        excluded = count_walks(king, 3, frozenset([0, 1]))
        self.assertEqual(everything, allowed + excluded)


class TestCountDecomposition(unittest.TestCase):
    """The total splits into per-first-digit walk counts."""

    def test_total_is_sum_over_first_digits(self):
        for piece in PIECE_ORDER:
            graph = MOVE_GRAPHS[piece]
            result = count_walks_by_start(graph, WALK_LENGTH)

            self.assertEqual(sorted(result.by_start_digit), sorted(ALLOWED_FIRST_DIGITS))
            self.assertEqual(result.count, count_walks(graph, WALK_LENGTH))
            for digit, count in result.by_start_digit.items():
                self.assertEqual(
                    count,
                    count_walks_recursive(graph, WALK_LENGTH, frozenset([digit])),
                    (piece, digit),
                )

    def test_knight_on_five_goes_nowhere(self):
        result = count_walks_by_start(MOVE_GRAPHS["Knight"], WALK_LENGTH)
        self.assertEqual(result.by_start_digit[5], 0)

    def test_decomposition_at_length_one(self):
        result = count_walks_by_start(MOVE_GRAPHS["Queen"], 1)
        self.assertEqual(result.by_start_digit, {digit: 1 for digit in range(2, 10)})


class TestConsistencyBetweenMethods(unittest.TestCase):
    """Matrix counts must agree with exhaustive enumeration."""

    def test_matrix_matches_recursion_for_every_piece(self):
        for piece in PIECE_ORDER:
            graph = MOVE_GRAPHS[piece]
            for length in range(1, WALK_LENGTH + 1):
                self.assertEqual(
                    count_walks(graph, length),
                    count_walks_recursive(graph, length),
                    (piece, length),
                )

    def test_idempotent_across_runs(self):
        first = {piece: count_walks(MOVE_GRAPHS[piece], WALK_LENGTH) for piece in PIECE_ORDER}
        second = {piece: count_walks(MOVE_GRAPHS[piece], WALK_LENGTH) for piece in PIECE_ORDER}
        self.assertEqual(first, second)


class TestLargeCounts(unittest.TestCase):
    """Long walks must not be truncated to machine integers."""

    def test_long_queen_walks_exceed_int64(self):
        graph = MOVE_GRAPHS["Queen"]
        total = count_walks(graph, 30)

        self.assertIsInstance(total, int)
        self.assertGreater(total, np.iinfo(np.int64).max)
        self.assertEqual(total, _dict_propagation(graph, 30, ALLOWED_FIRST_DIGITS))

    def test_by_length_matches_single_length(self):
        graph = MOVE_GRAPHS["King"]
        by_length = count_walks_by_length(graph, 25)
        self.assertEqual(by_length[25], count_walks(graph, 25))
        self.assertEqual(by_length[25], _dict_propagation(graph, 25, ALLOWED_FIRST_DIGITS))


class TestInvalidLengths(unittest.TestCase):
    def test_zero_and_negative_lengths_raise(self):
        graph = MOVE_GRAPHS["King"]
        for length in (0, -1, -7):
            with self.assertRaises(InvalidWalkLength):
                count_walks(graph, length)
            with self.assertRaises(InvalidWalkLength):
                count_walks_by_start(graph, length)
            with self.assertRaises(InvalidWalkLength):
                count_walks_by_length(graph, length)

    def test_non_integer_lengths_raise(self):
        for length in (2.5, "7", None, True):
            with self.assertRaises(InvalidWalkLength):
                count_walks(MOVE_GRAPHS["King"], length)

    def test_invalid_length_is_a_value_error(self):
        self.assertTrue(issubclass(InvalidWalkLength, ValueError))


if __name__ == "__main__":
    unittest.main(verbosity=2)
