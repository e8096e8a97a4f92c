import pytest

from analysis import is_valid_solution, shared_edge_sums
from constants import SLOT_POSITIONS
from puzzle import PuzzleState
from solver import Solver, find_solutions_generator


def store_piece(edges, rotation):
    """Stored edge list that shows `edges` (TOP, RIGHT, BOTTOM, LEFT) after `rotation` turns."""
    return tuple(edges[rotation:] + edges[:rotation])


# A board that looks the same after half a turn. Its center piece is
# symmetric too, so turning the board over it gives a second arrangement
# with the center still unrotated.
SYMMETRIC_BOARD = {
    (0, 0): [21, 1, 7, 22],
    (0, 1): [23, 2, 8, -1],
    (0, 2): [24, 25, 9, -2],
    (1, 0): [-7, -4, -9, 26],
    (1, 1): [-8, 4, -8, 4],
    (1, 2): [-9, 26, -7, -4],
    (2, 0): [9, -2, 24, 25],
    (2, 1): [8, -1, 23, 2],
    (2, 2): [7, 22, 21, 1],
}


@pytest.fixture
def symmetric_puzzle():
    cells = sorted(SYMMETRIC_BOARD)
    pieces = [store_piece(SYMMETRIC_BOARD[cell], index % 4) for index, cell in enumerate(cells)]

    as_built = tuple(
        (cells.index(position), cells.index(position) % 4) for position in SLOT_POSITIONS
    )
    half_turned = [
        (cells.index((2 - row, 2 - col)), (cells.index((2 - row, 2 - col)) % 4 + 2) % 4)
        for row, col in SLOT_POSITIONS
    ]
    # The center reads the same after half a turn, and is only tried unrotated
    half_turned[0] = as_built[0]
    return pieces, as_built, tuple(half_turned)


def solve(pieces):
    solver = Solver(pieces)
    solver.solve()
    return solver


def test_unique_puzzle_has_exactly_one_solution(unique_pieces, unique_solution):
    solver = solve(unique_pieces)

    assert solver.solutions() == [unique_solution]


def test_unique_solution_matches_on_every_shared_edge(unique_pieces):
    (solution,) = solve(unique_pieces).solutions()

    sums = shared_edge_sums(unique_pieces, solution)
    assert len(sums) == 12
    assert sums == [0] * 12


def test_no_matching_edges_gives_no_solution(no_match_pieces):
    solver = solve(no_match_pieces)

    assert solver.solutions() == []
    assert solver.tries_at_level() == [1, 9, 0, 0, 0, 0, 0, 0, 0, 0]
    assert solver.total_tries() == 10


def test_center_is_tried_once_per_piece(unique_pieces):
    tries = solve(unique_pieces).tries_at_level()

    assert len(tries) == 10
    assert tries[0] == 1
    assert tries[1] == 9
    assert tries[9] == 1


def test_total_tries_is_sum_of_levels(unique_pieces, no_match_pieces, symmetric_puzzle):
    for pieces in (unique_pieces, no_match_pieces, symmetric_puzzle[0]):
        solver = solve(pieces)
        assert solver.total_tries() == sum(solver.tries_at_level())


def test_symmetric_board_reports_both_arrangements(symmetric_puzzle):
    pieces, as_built, half_turned = symmetric_puzzle
    solutions = solve(pieces).solutions()

    assert as_built != half_turned
    assert as_built in solutions
    assert half_turned in solutions
    assert len(solutions) == len(set(solutions))


def test_every_solution_is_valid_and_keeps_center_unrotated(symmetric_puzzle):
    pieces = symmetric_puzzle[0]
    solutions = solve(pieces).solutions()

    assert solutions
    for solution in solutions:
        assert solution[0].rotation == 0
        assert is_valid_solution(pieces, solution)


def test_solving_twice_is_deterministic(symmetric_puzzle):
    pieces = symmetric_puzzle[0]

    assert set(solve(pieces).solutions()) == set(solve(pieces).solutions())


def test_solve_resets_previous_results(unique_pieces):
    solver = Solver(unique_pieces)
    solver.solve()
    first_solutions = solver.solutions()
    first_tries = solver.tries_at_level()

    solver.solve()

    assert solver.solutions() == first_solutions
    assert solver.tries_at_level() == first_tries


def test_returned_results_are_copies(unique_pieces):
    solver = solve(unique_pieces)
    solver.solutions().clear()
    solver.tries_at_level()[0] = 100

    assert len(solver.solutions()) == 1
    assert solver.tries_at_level()[0] == 1


def test_generator_counts_entries_and_preserves_order(unique_pieces, unique_solution):
    tries = [0] * 10
    state = PuzzleState(unique_pieces)

    solutions = list(find_solutions_generator(state, 0, tuple(range(9)), tries))

    assert solutions == [unique_solution]
    assert tries[0] == 1
    assert state.placements == (None,) * 9


def test_generator_at_full_depth_yields_the_snapshot(unique_pieces, unique_solution):
    state = PuzzleState(unique_pieces, unique_solution)
    tries = [0] * 10

    assert list(find_solutions_generator(state, 9, (), tries)) == [unique_solution]
    assert tries == [0] * 9 + [1]
