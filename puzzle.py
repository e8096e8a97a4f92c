# puzzle.py

from collections import namedtuple

import numpy as np

from constants import ADJACENCY_TABLE, NUM_EDGES, NUM_ORIENTATIONS, NUM_SLOTS

Placement = namedtuple('Placement', ['piece', 'rotation'])


def edge_value_at(piece, rotation, direction):
    """
    Returns the edge value a piece shows in `direction` after `rotation`
    quarter turns clockwise.
    """
    return piece[(direction - rotation) % NUM_EDGES]


def edges_compatible(piece_a, rot_a, dir_a, piece_b, rot_b, dir_b):
    """Two edges mate when their values cancel out."""
    return edge_value_at(piece_a, rot_a, dir_a) + edge_value_at(piece_b, rot_b, dir_b) == 0


def generate_oriented_edges(pieces):
    # Array with shape (piece, rotation, direction)
    # Ex: (9 pieces, 4 rotations, 4 directions)
    oriented = np.zeros((len(pieces), NUM_ORIENTATIONS, NUM_EDGES), dtype=np.int64)

    for index, piece in enumerate(pieces):
        base_edges = np.asarray(piece, dtype=np.int64)
        # np.roll(base, r)[d] == base[(d - r) % 4], i.e. edge_value_at
        for rotation in range(NUM_ORIENTATIONS):
            oriented[index, rotation] = np.roll(base_edges, shift=rotation)

    oriented.setflags(write=False)
    return oriented


class PuzzleState:
    """
    The nine pieces of a puzzle plus the placement built so far.

    States are never modified after construction: `place` returns a copy
    holding the extra placement, so sibling branches of the search never
    see each other's tentative pieces.
    """

    __slots__ = ('pieces', 'placements', 'oriented_edges')

    def __init__(self, pieces, placements=None, oriented_edges=None):
        self.pieces = tuple(tuple(piece) for piece in pieces)
        self.placements = tuple(placements) if placements is not None else (None,) * NUM_SLOTS
        if oriented_edges is None:
            oriented_edges = generate_oriented_edges(self.pieces)
        self.oriented_edges = oriented_edges

    def __repr__(self):
        return f"PuzzleState(placements={self.placements!r})"

    def place(self, slot, piece, rotation):
        placements = list(self.placements)
        placements[slot] = Placement(piece, rotation % NUM_ORIENTATIONS)
        return PuzzleState(self.pieces, placements, self.oriented_edges)

    def edge_at(self, piece, rotation, direction):
        return self.oriented_edges[piece, rotation % NUM_ORIENTATIONS, direction]

    def is_consistent(self, slot, piece, rotation):
        """
        Checks a candidate (piece, rotation) for `slot` against every
        neighbour already placed. Slot 0 has no placed neighbours.
        """
        for direction, earlier_slot, earlier_direction in ADJACENCY_TABLE[slot]:
            neighbour = self.placements[earlier_slot]
            candidate_edge = int(self.edge_at(piece, rotation, direction))
            neighbour_edge = int(self.edge_at(neighbour.piece, neighbour.rotation, earlier_direction))
            if candidate_edge + neighbour_edge != 0:
                return False
        return True

    def is_complete(self):
        return all(placement is not None for placement in self.placements)

    def solution_snapshot(self):
        return self.placements
