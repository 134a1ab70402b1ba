"""
Main orchestration module for the chess phone number counts.

This module composes the keypad, move rules, counting and display
components into the complete workflow: count walks for every piece,
print the report and persist a copy of it.
"""

import argparse
from typing import Dict, FrozenSet, Iterable, List, Optional

from chess_phone_numbers.constants import (
    ALLOWED_FIRST_DIGITS,
    OUTPUT_FILENAME,
    PAWN_DOUBLE_STEP_ROWS,
    PIECE_ORDER,
    WALK_LENGTH,
)
from chess_phone_numbers.display import (
    ListingDisplay,
    StatisticsDisplay,
    format_counts,
    write_report,
)
from chess_phone_numbers.pieces import build_move_graph
from chess_phone_numbers.walk_counter import count_walks, validate_walk_length
from chess_phone_numbers.walk_generator import (
    count_walks_recursive,
    generate_walks_lazy,
)
from chess_phone_numbers.walk_types import InvalidWalkLength, Walk, WalkConstraints


class PhoneNumberCounter:
    """
    High-level orchestrator for the per-piece phone number counts.

    Move graphs are built once in the constructor and shared read-only by
    every computation, so repeated runs give identical totals.
    """

    def __init__(
        self,
        length: int = WALK_LENGTH,
        pieces: Iterable[str] = PIECE_ORDER,
        pawn_double_step_rows: FrozenSet[int] = PAWN_DOUBLE_STEP_ROWS,
    ):
        """
        Initialize counter with walk constraints.

        Args:
            length: Number of digits in a phone number
            pieces: Pieces to count, in report order
            pawn_double_step_rows: Rows a pawn may double-step from
        """
        validate_walk_length(length)
        self.length = length
        self.pieces = tuple(pieces)
        self.graphs = {
            piece: build_move_graph(piece, pawn_double_step_rows)
            for piece in self.pieces
        }

    def count_all(self) -> Dict[str, int]:
        """Count valid phone numbers for every piece, in report order."""
        return {
            piece: count_walks(graph, self.length, ALLOWED_FIRST_DIGITS)
            for piece, graph in self.graphs.items()
        }

    def verify(self, counts: Dict[str, int]) -> Dict[str, bool]:
        """
        Cross-check matrix counts against exhaustive enumeration.

        Returns:
            Piece name -> whether both methods agree
        """
        dfs_counts = {
            piece: count_walks_recursive(graph, self.length, ALLOWED_FIRST_DIGITS)
            for piece, graph in self.graphs.items()
        }
        StatisticsDisplay.display_counting_comparison(counts, dfs_counts)
        return {piece: counts[piece] == dfs_counts[piece] for piece in counts}

    def find_examples(self, piece: str, start_digit: int, limit: int = 20) -> List[Walk]:
        """
        Find example phone numbers for one piece and start digit.

        This is useful for checking specific scenarios by hand.
        """
        constraints = WalkConstraints(
            length=self.length, allowed_first_digits=frozenset([start_digit])
        )
        examples = []
        for walk in generate_walks_lazy(self.graphs[piece], constraints):
            if len(examples) >= limit:
                break
            examples.append(walk)
        return examples

    def run(
        self,
        output_path: str = OUTPUT_FILENAME,
        verbose: bool = True,
        verify: bool = False,
    ) -> Dict[str, int]:
        """
        Count, print and persist the per-piece totals.

        A failed write is reported but the counts are still returned.
        """
        counts = self.count_all()
        report = format_counts(counts)

        print(report, end="")
        write_report(report, output_path, verbose=verbose)

        if verify:
            self.verify(counts)

        return counts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count phone numbers traced by chess pieces on a telephone keypad"
    )
    parser.add_argument(
        "--length",
        type=int,
        default=WALK_LENGTH,
        help=f"Number of digits in a phone number (defaults to {WALK_LENGTH})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=OUTPUT_FILENAME,
        help="File the report is written to",
    )
    parser.add_argument(
        "--piece",
        action="append",
        choices=PIECE_ORDER,
        help="Piece to count; repeat for several (defaults to all pieces)",
    )
    parser.add_argument(
        "--pawn-double-step-rows",
        type=int,
        nargs="+",
        default=sorted(PAWN_DOUBLE_STEP_ROWS),
        help="Keypad rows (0 = top) a pawn may double-step from",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check counts against exhaustive enumeration",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List phone numbers for a single --piece and --start digit",
    )
    parser.add_argument(
        "--start", type=int, help="Start digit on the keypad, used with --list"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Maximum phone numbers to list (defaults to 20)",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only print the per-piece counts"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the command line.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    pieces = args.piece or PIECE_ORDER

    try:
        counter = PhoneNumberCounter(
            length=args.length,
            pieces=pieces,
            pawn_double_step_rows=frozenset(args.pawn_double_step_rows),
        )
    except InvalidWalkLength as e:
        parser.error(str(e))

    if args.list:
        if len(counter.pieces) != 1 or args.start is None:
            parser.error("--list needs exactly one --piece and a --start digit")
        if args.start not in ALLOWED_FIRST_DIGITS:
            parser.error("--start must be a digit from 2 to 9")

        piece = counter.pieces[0]
        examples = counter.find_examples(piece, args.start, limit=args.limit)
        total = count_walks(
            counter.graphs[piece], counter.length, frozenset([args.start])
        )
        ListingDisplay.display_numbers(piece, args.start, examples, total)
        return 0

    counter.run(output_path=args.output, verbose=not args.quiet, verify=args.verify)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
