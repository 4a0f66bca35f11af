"""Heuristic estimates of how far a board is from being solved."""

from __future__ import annotations

from dataclasses import dataclass

from .board import PRIMARY, Board


def blocking_pieces(board: Board) -> int:
    """Count vertical pieces standing between the primary piece and the exit."""
    if board.is_solved():
        return 0

    primary = board.pieces[PRIMARY]
    row, col_start = primary.pos
    col_end = col_start + primary.length - 1

    def blocks(piece) -> bool:
        top, col = piece.pos
        bottom = top + piece.length - 1
        return col_end < col <= board.cols - 1 and top <= row <= bottom

    return sum(
        1
        for piece_id, piece in board.pieces.items()
        if piece_id != PRIMARY and piece.vertical and blocks(piece)
    )


def distance_to_exit(board: Board) -> int:
    """Free columns to the right of the primary piece, minus one."""
    primary = board.pieces[PRIMARY]
    return board.cols - (primary.pos[1] + primary.length) - 1


_FUNCTIONS = {
    "DUMBASS": blocking_pieces,
    "LAZY": distance_to_exit,
}

# Uniform-cost search uses no estimate at all.
_UNIFORM_COST = "UCS"


@dataclass(frozen=True)
class Heuristic:
    """A named heuristic; unknown names fall back to blocking_pieces."""

    kind: str

    def calculate(self, board: Board) -> int:
        if self.kind == _UNIFORM_COST:
            return 0
        return _FUNCTIONS.get(self.kind, blocking_pieces)(board)