"""Search-based solver for Rush Hour style sliding-block puzzles."""

__version__ = "0.1.0"
__all__ = ["board", "heuristics", "solver", "cli"]