# main.py
import argparse
import logging
import sys
import time

from solver import Solver
from utils import PuzzleFormatError, SolutionWriter, get_next_filename, load_pieces
from visualize import format_solution, format_statistics

# --- Constants for the main script ---
CHUNK_SIZE = 100_000
OUTPUT_DIR = "solutions"
BASE_NAME = "solutions"

RED = "\u001b[31;1m"
RESET = "\u001b[0m"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Solve a 3x3 edge-matching tile puzzle.")
    parser.add_argument("pieces_file", help="Text file with 9 lines of 4 edge values each")
    parser.add_argument("--reject-zero-edges", action="store_true", help="Treat zero edge values as an input error")
    parser.add_argument("--save", action="store_true", help="Write the solutions to a parquet file")
    parser.add_argument("--output-dir", default=OUTPUT_DIR, help="Directory for saved solutions")
    parser.add_argument("--quiet", action="store_true", help="Do not print every solution")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        pieces = load_pieces(args.pieces_file, allow_zero_edges=not args.reject_zero_edges)
    except (PuzzleFormatError, UnicodeDecodeError, OSError) as e:
        print(f"{RED}ERROR: {e}{RESET}", file=sys.stderr)
        return 1

    t0 = time.perf_counter()
    solver = Solver(pieces)
    solver.solve()
    elapsed_us = int((time.perf_counter() - t0) * 1_000_000)

    solutions = solver.solutions()
    if not args.quiet:
        for number, solution in enumerate(solutions, start=1):
            print(format_solution(solution, number))

    if solutions:
        print(format_statistics(solver.total_tries(), solver.tries_at_level(), elapsed_us))
    else:
        print("No solution found :-/")

    if args.save:
        file_path = get_next_filename(args.output_dir, base_name=BASE_NAME)
        with SolutionWriter(file_path, CHUNK_SIZE) as writer:
            writer.process_solutions(solutions)

    return 0


if __name__ == "__main__":
    sys.exit(main())
