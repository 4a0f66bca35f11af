"""Search strategies for sliding-block puzzles."""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from typing import Optional

from .board import Board
from .heuristics import Heuristic


@dataclass
class _Node:
    board: Board
    g: int
    h: int
    parent: Optional["_Node"] = None

    @property
    def f(self) -> int:
        return self.g + self.h

    def path(self) -> list[Board]:
        boards = []
        node: Optional[_Node] = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards


class Solver:
    """Finds a sequence of boards from the initial board to a solved one.

    Every solve method returns the boards along the path, starting with the
    initial board, or an empty list when no solution exists. The number of
    expanded states is accumulated in ``visited_nodes``.
    """

    def __init__(self, board: Board, heuristic: Heuristic) -> None:
        self.initial = board
        self.heuristic = heuristic
        self.visited_nodes = 0

    def _best_first(self, greedy: bool) -> list[Board]:
        counter = itertools.count()
        start = _Node(self.initial, 0, self.heuristic.calculate(self.initial))
        open_set: list[tuple[int, int, _Node]] = [(start.f, next(counter), start)]
        visited: set[str] = set()

        while open_set:
            _, _, current = heapq.heappop(open_set)
            key = current.board.serialize()
            if key in visited:
                continue
            visited.add(key)
            self.visited_nodes += 1

            if current.board.is_solved():
                return current.path()

            successors = current.board.successors()
            if greedy:
                successors.sort(key=Board.serialize)

            for succ in successors:
                if succ.serialize() in visited:
                    continue
                g = 0 if greedy else current.g + 1
                node = _Node(succ, g, self.heuristic.calculate(succ), current)
                heapq.heappush(open_set, (node.f, next(counter), node))

        return []

    def solve_complete(self) -> list[Board]:
        """Best-first search ordered by g + h (UCS or A*)."""
        return self._best_first(greedy=False)

    def solve_greedy(self) -> list[Board]:
        """Greedy best-first search ordered by the heuristic alone."""
        return self._best_first(greedy=True)

    def solve_low_memory(self) -> list[Board]:
        """Iterative-deepening A* with per-iteration pruning of worse revisits."""
        best_f: dict[str, int] = {}
        on_path: set[str] = set()

        def search(node: _Node, threshold: float) -> tuple[Optional[_Node], float]:
            key = node.board.serialize()
            f = node.f
            if f > threshold:
                return None, f

            if best_f.get(key, math.inf) <= f:
                return None, math.inf
            best_f[key] = f

            if key in on_path:
                return None, math.inf

            if node.board.is_solved():
                return node, threshold

            on_path.add(key)
            self.visited_nodes += 1

            scored = sorted(
                ((succ, self.heuristic.calculate(succ)) for succ in node.board.successors()),
                key=lambda item: item[1],
            )

            minimum = math.inf
            try:
                for succ, h in scored:
                    if succ.serialize() in on_path:
                        continue
                    found, bound = search(_Node(succ, node.g + 1, h, node), threshold)
                    if found is not None:
                        return found, bound
                    minimum = min(minimum, bound)
            finally:
                on_path.discard(key)
            return None, minimum

        root = _Node(self.initial, 0, self.heuristic.calculate(self.initial))
        threshold: float = root.h

        while True:
            best_f.clear()
            on_path.clear()
            found, bound = search(root, threshold)
            if found is not None:
                return found.path()
            if bound == math.inf:
                return []
            threshold = bound