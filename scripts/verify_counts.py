#!/usr/bin/env python3
"""
Cross-check the matrix walk counts against exhaustive enumeration.

For every piece and every walk length up to --max-length, the adjacency
matrix count is compared with a depth-first count of the same walks.
Any disagreement is printed and makes the script exit non-zero.
"""

import argparse
import os
import sys

from tqdm import tqdm

# Add parent directory to path to enable imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from chess_phone_numbers.constants import (
    PAWN_DOUBLE_STEP_ROWS,
    PAWN_DOUBLE_STEP_ROWS_BOTTOM_ONLY,
    PIECE_ORDER,
    WALK_LENGTH,
)
from chess_phone_numbers.display import StatisticsDisplay
from chess_phone_numbers.pieces import build_move_graph
from chess_phone_numbers.walk_counter import count_walks_by_length
from chess_phone_numbers.walk_generator import count_walks_recursive


def verify_piece(graph, max_length, progress_bar):
    """Count every length both ways, returning the counts and any disagreements."""
    by_length = count_walks_by_length(graph, max_length)
    mismatches = []

    for length, matrix_count in by_length.items():
        dfs_count = count_walks_recursive(graph, length)
        if matrix_count != dfs_count:
            mismatches.append((length, matrix_count, dfs_count))
        progress_bar.update(1)

    return by_length, mismatches


def main():
    parser = argparse.ArgumentParser(
        description="Verify walk counts against exhaustive enumeration"
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=WALK_LENGTH,
        help="Longest walk length to verify",
    )
    parser.add_argument(
        "--pawn-bottom-row-only",
        action="store_true",
        help="Only allow the pawn double step from the bottom row",
    )
    parser.add_argument(
        "--show-lengths",
        action="store_true",
        help="Print the walk count for every length",
    )

    args = parser.parse_args()

    pawn_rows = (
        PAWN_DOUBLE_STEP_ROWS_BOTTOM_ONLY
        if args.pawn_bottom_row_only
        else PAWN_DOUBLE_STEP_ROWS
    )

    total_checks = len(PIECE_ORDER) * args.max_length
    progress_bar = tqdm(total=total_checks, desc="Verifying counts", unit="check")

    failures = 0
    results = {}
    for piece in PIECE_ORDER:
        graph = build_move_graph(piece, pawn_rows)
        by_length, mismatches = verify_piece(graph, args.max_length, progress_bar)
        results[piece] = by_length

        for length, matrix_count, dfs_count in mismatches:
            failures += 1
            print(
                f"\n{piece} length {length}: matrix {matrix_count:,} "
                f"!= enumeration {dfs_count:,}"
            )

    progress_bar.close()

    if args.show_lengths:
        for piece, by_length in results.items():
            StatisticsDisplay.display_length_distribution(piece, by_length)

    print(f"\nCompleted!")
    print(f"Checks run: {total_checks}")
    print(f"Mismatches: {failures}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
