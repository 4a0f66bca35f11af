"""Command-line entry point: solve a problem folder and write its solutions."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Sequence

from .board import Board
from .heuristics import Heuristic
from .solver import Solver

PROBLEM_FILE = "problem.txt"
SOLUTIONS_FILE = "solutions.txt"


def read_problem(path) -> Board:
    """Read ``problem.txt`` from a folder and build its board.

    The file starts with the row count, the column count and the piece count,
    followed on later lines by the layout.
    """
    text = (Path(path) / PROBLEM_FILE).read_text()
    lines = text.splitlines()

    header: list[int] = []
    rest_start = len(lines)
    for index, line in enumerate(lines):
        for token in line.split():
            header.append(int(token))
            if len(header) == 3:
                break
        if len(header) == 3:
            rest_start = index + 1
            break
    if len(header) < 3:
        raise ValueError("problem header must hold rows, columns and piece count")

    rows, cols, _pieces = header
    return Board.from_lines(lines[rest_start:], rows, cols)


def solve(board: Board, algorithm: str, heuristic: str | None) -> tuple[list[Board], int]:
    """Solve a board with the named algorithm; returns the path and visited count."""
    chosen = Heuristic("UCS" if algorithm == "UCS" else (heuristic or ""))
    solver = Solver(board, chosen)
    if algorithm in ("UCS", "A*"):
        solutions = solver.solve_complete()
    elif algorithm == "GBFS":
        solutions = solver.solve_greedy()
    else:
        solutions = solver.solve_low_memory()
    return solutions, solver.visited_nodes


def write_solutions(path, elapsed_ms: int, visited: int, solutions: Sequence[Board]) -> Path:
    """Write ``solutions.txt`` into a folder and return its path."""
    if not solutions:
        raise ValueError("no solution to write")
    first = solutions[0]
    parts = [
        f"{elapsed_ms}\n",
        f"{visited}\n",
        f"{len(solutions)}\n",
        f"{first.rows} {first.cols}\n",
    ]
    parts.extend(board.render() for board in solutions)
    target = Path(path) / SOLUTIONS_FILE
    target.write_text("".join(parts))
    return target


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    heuristic: str | None = None

    if len(args) >= 2:
        folder, algorithm = args[0], args[1]
        if algorithm != "UCS":
            if len(args) < 3:
                print("A heuristic is required for this algorithm.", file=sys.stderr)
                return 1
            heuristic = args[2]
    else:
        folder = input("[INPUT] ENTER PATH TO PROBLEM FOLDER: ").strip()
        algorithm = input("[INPUT] ALGORITHM: (UCS / GBFS / A*/ IDA*)").strip()
        if algorithm != "UCS":
            heuristic = input("[INPUT] SELECT HEURISTIC (DUMBASS / LAZY) : ").strip()

    try:
        board = read_problem(folder)
    except OSError:
        print("Cannot open file.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Invalid problem: {exc}", file=sys.stderr)
        return 1

    start = time.perf_counter()
    solutions, visited = solve(board, algorithm, heuristic)
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    if not solutions:
        print("No solution found.", file=sys.stderr)
        return 1

    try:
        write_solutions(folder, elapsed_ms, visited, solutions)
    except OSError:
        print("Cannot create solutions.txt in folder.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())