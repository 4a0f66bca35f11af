"""Sliding-block board model: pieces, move generation and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from itertools import takewhile
from typing import Iterable, Iterator

EMPTY = "."
EXIT = "K"
PRIMARY = "P"


@dataclass(frozen=True)
class Piece:
    """A block on the board, anchored at its top-left cell."""

    id: str
    length: int
    vertical: bool
    pos: tuple[int, int]


def _cells(piece: Piece) -> Iterator[tuple[int, int]]:
    row, col = piece.pos
    for offset in range(piece.length):
        yield (row + offset, col) if piece.vertical else (row, col + offset)


def _rotate_clockwise(grid: list[str]) -> list[str]:
    return ["".join(column) for column in zip(*reversed(grid))]


@dataclass
class Board:
    """A board whose exit lies on the right edge of the primary piece's row."""

    rows: int
    cols: int
    pieces: dict[str, Piece] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.pieces = dict(sorted(self.pieces.items()))

    @classmethod
    def from_lines(cls, lines: Iterable[str], rows: int, cols: int) -> "Board":
        """Parse a puzzle layout, rotating it so that the exit ends up on the right.

        The exit marker may sit on an extra line above or below the grid, or in
        an extra leading or trailing column.
        """
        lines = list(lines)
        if not lines:
            raise ValueError("board has no lines")

        if len(lines) > rows:
            if EXIT in lines[0]:
                selected, offset, turns = lines[1 : rows + 1], 0, 1
            else:
                selected, offset, turns = lines[:rows], 0, 3
        elif len(lines[0]) > cols:
            selected, offset, turns = lines[:rows], 1, 2
        else:
            selected, offset, turns = lines[:rows], 0, 0

        if len(selected) < rows:
            raise ValueError(f"expected {rows} rows, got {len(selected)}")

        grid = []
        for line in selected:
            cells = line[offset : offset + cols]
            if len(cells) < cols:
                raise ValueError(f"row {line!r} is shorter than {cols} columns")
            grid.append(cells)

        for _ in range(turns):
            grid = _rotate_clockwise(grid)
        return cls._from_grid(grid)

    @classmethod
    def _from_grid(cls, grid: list[str]) -> "Board":
        rows, cols = len(grid), len(grid[0])
        checked: set[tuple[int, int]] = set()
        pieces: dict[str, Piece] = {}

        for r, row in enumerate(grid):
            for c, cell in enumerate(row):
                if cell == EMPTY or (r, c) in checked:
                    continue
                vertical = r + 1 < rows and grid[r + 1][c] == cell
                if vertical:
                    run = list(takewhile(lambda i: grid[i][c] == cell, range(r, rows)))
                    checked.update((i, c) for i in run)
                else:
                    run = list(takewhile(lambda j: row[j] == cell, range(c, cols)))
                    checked.update((r, j) for j in run)
                pieces.setdefault(cell, Piece(cell, len(run), vertical, (r, c)))

        return cls(rows, cols, pieces)

    def _moved(self, piece_id: str, pos: tuple[int, int]) -> "Board":
        pieces = dict(self.pieces)
        pieces[piece_id] = replace(pieces[piece_id], pos=pos)
        return Board(self.rows, self.cols, pieces)

    def _slides(self, piece: Piece, grid: list[str]) -> Iterator[tuple[int, int]]:
        row, col = piece.pos
        if piece.vertical:
            for i in range(row - 1, -1, -1):
                if grid[i][col] != EMPTY:
                    break
                yield (i, col)
            for i in range(row + piece.length, self.rows):
                if grid[i][col] != EMPTY:
                    break
                yield (i - piece.length + 1, col)
        else:
            for j in range(col - 1, -1, -1):
                if grid[row][j] != EMPTY:
                    break
                yield (row, j)
            for j in range(col + piece.length, self.cols):
                if grid[row][j] != EMPTY:
                    break
                yield (row, j - piece.length + 1)

    def successors(self) -> list["Board"]:
        """Every board reachable by sliding one piece any number of free cells."""
        grid = self.grid()
        return [
            self._moved(piece_id, pos)
            for piece_id, piece in self.pieces.items()
            for pos in self._slides(piece, grid)
        ]

    def serialize(self) -> str:
        """A string key that identifies this arrangement of pieces."""
        return "".join(
            f"{p.id}{p.pos[0]},{p.pos[1]},{'V' if p.vertical else 'H'}{p.length};"
            for p in self.pieces.values()
        )

    def is_solved(self) -> bool:
        """True when the primary piece touches the right edge."""
        primary = self.pieces[PRIMARY]
        return primary.pos[1] + primary.length == self.cols

    def grid(self) -> list[str]:
        """The board as a list of row strings."""
        cells = [[EMPTY] * self.cols for _ in range(self.rows)]
        for piece_id, piece in self.pieces.items():
            for r, c in _cells(piece):
                cells[r][c] = piece_id
        return ["".join(row) for row in cells]

    def render(self) -> str:
        """The board as text, one newline-terminated line per row."""
        return "".join(f"{row}\n" for row in self.grid())