import pytest

from puzzle import Placement

# Every internal edge of the solved board carries its own label, every
# outer edge is a positive value nothing can mate with.
UNIQUE_PIECES = [
    (30, -5, -11, 6),
    (21, 1, 7, 22),
    (-8, 4, 11, -3),
    (27, 12, -4, -9),
    (-6, -12, 31, 32),
    (23, 2, 8, -1),
    (3, 10, 26, -7),
    (28, 29, -10, 5),
    (24, 25, 9, -2),
]

UNIQUE_SOLUTION = (
    Placement(2, 0),
    Placement(3, 1),
    Placement(4, 3),
    Placement(0, 2),
    Placement(7, 2),
    Placement(6, 1),
    Placement(1, 0),
    Placement(5, 0),
    Placement(8, 0),
)

NO_MATCH_PIECES = [(1, 2, 3, 4)] * 9


@pytest.fixture
def unique_pieces():
    return list(UNIQUE_PIECES)


@pytest.fixture
def unique_solution():
    return UNIQUE_SOLUTION


@pytest.fixture
def no_match_pieces():
    return list(NO_MATCH_PIECES)


@pytest.fixture
def pieces_file(tmp_path):
    def _write(pieces, name="pieces.txt"):
        path = tmp_path / name
        path.write_text("\n".join(" ".join(str(v) for v in piece) for piece in pieces) + "\n", encoding="utf-8")
        return path
    return _write
