# analysis.py

import numpy as np

from constants import BOTTOM, GRID_SIZE, LEFT, NUM_SLOTS, RIGHT, SLOT_POSITIONS, TOP
from puzzle import edge_value_at

STAT_KEYS = ["center_piece", "turned_pieces", "total_turns"]


def solution_to_grid(solution):
    """
    Lays a solution (one placement per slot) out on the 3x3 board.
    The result has shape (row, col, 2) holding [piece, rotation].
    """
    grid = np.full((GRID_SIZE, GRID_SIZE, 2), -1, dtype=np.int8)
    for slot, (piece, rotation) in enumerate(solution):
        row, col = SLOT_POSITIONS[slot]
        grid[row, col] = (piece, rotation)
    return grid


def shared_edge_sums(pieces, solution):
    """
    Sum of the two edge values on each of the 12 internal edges of the board,
    worked out from the grid coordinates alone.
    """
    grid = solution_to_grid(solution)
    sums = []

    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            piece, rotation = (int(v) for v in grid[row, col])

            if col + 1 < GRID_SIZE:
                other, other_rotation = (int(v) for v in grid[row, col + 1])
                sums.append(
                    edge_value_at(pieces[piece], rotation, RIGHT)
                    + edge_value_at(pieces[other], other_rotation, LEFT)
                )

            if row + 1 < GRID_SIZE:
                other, other_rotation = (int(v) for v in grid[row + 1, col])
                sums.append(
                    edge_value_at(pieces[piece], rotation, BOTTOM)
                    + edge_value_at(pieces[other], other_rotation, TOP)
                )

    return sums


def is_valid_solution(pieces, solution):
    if len(solution) != NUM_SLOTS:
        return False
    if sorted(piece for piece, _ in solution) != list(range(NUM_SLOTS)):
        return False
    return all(edge_sum == 0 for edge_sum in shared_edge_sums(pieces, solution))


def calculate_solution_stats(solution):
    """Per-solution counters stored next to the layout in exports."""
    rotations = [rotation for _, rotation in solution]
    return {
        "center_piece": solution[0][0],
        "turned_pieces": sum(1 for rotation in rotations if rotation != 0),
        "total_turns": sum(rotations),
    }
