import pytest

from rushsolve.board import Board
from rushsolve.heuristics import Heuristic
from rushsolve.solver import Solver

SOLVABLE = ["..A.", "PPA.K", "....", "...."]
UNSOLVABLE = ["..A.", "PPA.K", "...."]
SOLVED = ["....", "..PPK", "...."]


def solvable():
    return Board.from_lines(SOLVABLE, 4, 4)


def unsolvable():
    return Board.from_lines(UNSOLVABLE, 3, 4)


def solved():
    return Board.from_lines(SOLVED, 3, 4)


def run(board, method, kind):
    solver = Solver(board, Heuristic(kind))
    return getattr(solver, method)(), solver


METHODS = ["solve_complete", "solve_greedy", "solve_low_memory"]
KINDS = ["UCS", "DUMBASS", "LAZY"]


def assert_valid_path(path, start):
    assert path[0].serialize() == start.serialize()
    assert path[-1].is_solved()
    for prev, nxt in zip(path, path[1:]):
        keys = {b.serialize() for b in prev.successors()}
        assert nxt.serialize() in keys


@pytest.mark.parametrize("method", METHODS)
@pytest.mark.parametrize("kind", KINDS)
def test_paths_are_valid_move_sequences(method, kind):
    board = solvable()
    path, solver = run(board, method, kind)
    assert_valid_path(path, board)
    assert solver.visited_nodes >= 1


@pytest.mark.parametrize("kind", KINDS)
def test_complete_search_finds_shortest_path(kind):
    path, _ = run(solvable(), "solve_complete", kind)
    assert len(path) == 3


def test_low_memory_matches_optimal_length_with_admissible_heuristic():
    optimal, _ = run(solvable(), "solve_complete", "UCS")
    path, _ = run(solvable(), "solve_low_memory", "DUMBASS")
    assert len(path) == len(optimal)


@pytest.mark.parametrize("method", METHODS)
def test_unsolvable_returns_empty(method):
    path, solver = run(unsolvable(), method, "DUMBASS")
    assert path == []
    assert solver.visited_nodes >= 1


@pytest.mark.parametrize("method", ["solve_complete", "solve_greedy"])
def test_already_solved_best_first(method):
    board = solved()
    path, solver = run(board, method, "UCS")
    assert [b.serialize() for b in path] == [board.serialize()]
    assert solver.visited_nodes == 1


def test_already_solved_low_memory_expands_nothing():
    board = solved()
    path, solver = run(board, "solve_low_memory", "UCS")
    assert [b.serialize() for b in path] == [board.serialize()]
    assert solver.visited_nodes == 0


def test_visited_nodes_accumulate_across_calls():
    solver = Solver(solvable(), Heuristic("UCS"))
    solver.solve_complete()
    first = solver.visited_nodes
    solver.solve_complete()
    assert solver.visited_nodes == 2 * first


def test_initial_board_is_not_modified():
    board = solvable()
    before = board.serialize()
    run(board, "solve_complete", "UCS")
    assert board.serialize() == before