# solver.py

import logging

from constants import NUM_ORIENTATIONS, NUM_SLOTS
from puzzle import PuzzleState

logger = logging.getLogger(__name__)


def find_solutions_generator(state, depth, available_pieces, tries_at_level):
    """
    Depth-first search over the slots, yielding every complete placement.

    `tries_at_level[depth]` is incremented each time the search enters a
    depth. The center piece (depth 0) is only tried unrotated: turning it
    would just turn the whole board.
    """
    tries_at_level[depth] += 1

    # Base case: every slot is filled
    if depth == NUM_SLOTS:
        yield state.solution_snapshot()
        return

    rotations = range(1) if depth == 0 else range(NUM_ORIENTATIONS)

    for index, piece in enumerate(available_pieces):
        for rotation in rotations:
            if not state.is_consistent(depth, piece, rotation):
                continue

            # Fresh copies for the branch, nothing to undo afterwards
            next_state = state.place(depth, piece, rotation)
            remaining_pieces = available_pieces[:index] + available_pieces[index + 1:]

            yield from find_solutions_generator(next_state, depth + 1, remaining_pieces, tries_at_level)


class Solver:
    """Exhaustive solver for a 3x3 edge-matching puzzle."""

    def __init__(self, pieces):
        self.puzzle = PuzzleState(pieces)
        self._solutions = []
        self._tries_at_level = [0] * (NUM_SLOTS + 1)

    def solve(self):
        self._solutions = []
        self._tries_at_level = [0] * (NUM_SLOTS + 1)

        logger.debug("Starting search over %d pieces", len(self.puzzle.pieces))
        all_pieces = tuple(range(NUM_SLOTS))
        for solution in find_solutions_generator(self.puzzle, 0, all_pieces, self._tries_at_level):
            self._solutions.append(solution)
            logger.debug("Solution #%d: %s", len(self._solutions), solution)

        logger.debug(
            "Search finished: %d solution(s), %d tries", len(self._solutions), self.total_tries()
        )

    def solutions(self):
        return list(self._solutions)

    def total_tries(self):
        return sum(self._tries_at_level)

    def tries_at_level(self):
        return list(self._tries_at_level)
