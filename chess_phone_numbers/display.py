"""
Display and formatting utilities for walk counting results.

This module handles all presentation concerns, keeping them separate
from the counting logic.
"""

import sys
from typing import Dict, List, Mapping

from chess_phone_numbers.walk_generator import format_phone_number
from chess_phone_numbers.walk_types import Walk


def format_counts(counts: Mapping[str, int]) -> str:
    """
    Render one "<Piece>: <count>" line per piece.

    Every line is newline-terminated and pieces keep the mapping's order.
    """
    return "".join(f"{piece}: {count}\n" for piece, count in counts.items())


def write_report(text: str, output_path: str, verbose: bool = True) -> bool:
    """
    Overwrite output_path with the report text.

    A failed write is reported on stderr and does not raise; the counts
    have already been shown on the console.

    Returns:
        True if the file was written
    """
    try:
        with open(output_path, "w") as f:
            f.write(text)
    except OSError as e:
        print(f"Error writing to {output_path}: {e}", file=sys.stderr)
        return False

    if verbose:
        print(f"Output successfully written to {output_path}")
    return True


class StatisticsDisplay:
    """Responsible for displaying statistics in a readable format."""

    @staticmethod
    def display_header(title: str, width: int = 70) -> None:
        """Display a formatted header."""
        print(f"\n{title}")
        print("=" * width)

    @staticmethod
    def display_counting_comparison(
        matrix_counts: Mapping[str, int], dfs_counts: Mapping[str, int]
    ) -> None:
        """Display comparison between counting methods for every piece."""
        StatisticsDisplay.display_header("COUNTING METHOD COMPARISON")

        for piece, matrix_count in matrix_counts.items():
            dfs_count = dfs_counts[piece]
            match = matrix_count == dfs_count
            status = "✓ VALID" if match else "✗ MISMATCH"
            print(f"\n{piece}:")
            print(f"  Adjacency Matrix: {matrix_count:,}")
            print(f"  DFS Enumeration:  {dfs_count:,}")
            print(f"  Status: {status}")

            if not match:
                print(
                    f"\n  WARNING: Counts differ by {abs(matrix_count - dfs_count):,}"
                )

    @staticmethod
    def display_length_distribution(piece: str, by_length: Dict[int, int]) -> None:
        print(f"\n{piece} walks by length:")
        for length in sorted(by_length):
            print(f"  Length {length}: {by_length[length]:,}")


class ListingDisplay:
    """Prints concrete phone numbers traced by a piece."""

    @staticmethod
    def display_numbers(
        piece: str, start_digit: int, walks: List[Walk], total: int
    ) -> None:
        print(f"\nPhone numbers for {piece} starting on {start_digit}:")
        for walk in walks:
            print(f"  {format_phone_number(walk)}")

        if total > len(walks):
            print(f"  ... {total - len(walks):,} more")
        elif not walks:
            print("  (none)")
