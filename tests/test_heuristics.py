import pytest

from rushsolve.board import Board
from rushsolve.heuristics import Heuristic, blocking_pieces, distance_to_exit

SAMPLE = [
    "AAB..F",
    "..BCDF",
    "GPPCDFK",
    "GH.III",
    "GHJ...",
    "LLJMM.",
]


@pytest.fixture
def sample():
    return Board.from_lines(SAMPLE, 6, 6)


@pytest.fixture
def solved():
    return Board.from_lines(["A...PP", "A....."], 2, 6)


def test_blocking_pieces_sample(sample):
    assert blocking_pieces(sample) == 3


def test_distance_to_exit_sample(sample):
    assert distance_to_exit(sample) == 2


def test_blocking_pieces_zero_when_solved(solved):
    assert blocking_pieces(solved) == 0


def test_distance_to_exit_on_solved_board(solved):
    assert distance_to_exit(solved) == -1


def test_blocking_bounded_by_vertical_pieces(sample):
    for board in [sample, *sample.successors()]:
        verticals = sum(1 for p in board.pieces.values() if p.vertical)
        assert 0 <= blocking_pieces(board) <= verticals


def test_pieces_left_of_primary_do_not_block():
    board = Board.from_lines(["A.PP..", "A....."], 2, 6)
    assert blocking_pieces(board) == 0


def test_ucs_is_always_zero(sample):
    h = Heuristic("UCS")
    assert all(h.calculate(b) == 0 for b in [sample, *sample.successors()])


def test_named_heuristics_dispatch(sample):
    assert Heuristic("DUMBASS").calculate(sample) == blocking_pieces(sample)
    assert Heuristic("LAZY").calculate(sample) == distance_to_exit(sample)


def test_unknown_name_falls_back_to_blocking(sample):
    assert Heuristic("whatever").calculate(sample) == blocking_pieces(sample)


def test_missing_primary_raises():
    board = Board.from_lines(["AA."], 1, 3)
    with pytest.raises(KeyError):
        distance_to_exit(board)
    with pytest.raises(KeyError):
        blocking_pieces(board)