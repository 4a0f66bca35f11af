# rushsolve

A solver for sliding-block parking puzzles in the style of Rush Hour. The
primary piece `P` has to reach the exit marked `K`. Four search strategies
are available:

- `UCS`: uniform-cost search
- `GBFS`: greedy best-first search
- `A*`: A* search
- `IDA*`: iterative-deepening A*, which uses little memory. Any algorithm
  name other than `UCS`, `GBFS` and `A*` also selects this strategy.

All strategies except `UCS` take a heuristic:

- `DUMBASS`: counts the vertical pieces that cross the primary piece's row
  between the primary piece and the exit (0 once the board is solved)
- `LAZY`: the number of free columns between the primary piece and the exit,
  minus one

An unknown heuristic name falls back to `DUMBASS`.

## Installation

```
pip install .
```

## Problem format

A problem is a folder that holds `problem.txt`. The file starts with three
integers: the number of rows, the number of columns and the number of pieces
(the piece count is read but not used). The board layout follows on the next
lines, one line per row. Empty cells are `.`; every other letter is a piece,
and each piece lies in one straight line.

The exit `K` sits just outside the grid:

- on an extra line above the board (the layout has more lines than rows and
  the first line contains `K`),
- on an extra line below the board (more lines than rows, first line without
  `K`),
- at the start of a row (the first layout line is longer than the column
  count; the first character of every row is then skipped),
- otherwise at the end of a row.

```
6 6
11
AAB..F
..BCDF
GPPCDFK
GH.III
GHJ...
LLJMM.
```

The board is turned so that the exit is on the right. A board counts as
solved when `P` touches the right edge.

## Usage

```
rushsolve path/to/problem-folder A* DUMBASS
rushsolve path/to/problem-folder UCS
```

If you give fewer than two arguments, the program asks for the folder, the
algorithm and, unless the algorithm is `UCS`, the heuristic. With arguments,
a heuristic is required for every algorithm except `UCS`.

The results are written to `solutions.txt` in the same folder:

1. the search time in milliseconds
2. the number of visited states
3. the number of boards in the solution path
4. the board dimensions as rows and columns of the turned board, so these can
   be the original dimensions swapped
5. every board on the path, from the start position to the solved position

The command exits with status 1 and writes nothing when the problem cannot be
read, is malformed, or has no solution.

## Library use

```python
from rushsolve.cli import read_problem, solve

board = read_problem("path/to/problem-folder")
path, visited = solve(board, "A*", "LAZY")
print(visited, len(path))
print(path[-1].render())
```

The building blocks can also be used on their own:

- `rushsolve.board.Board` with `Board.from_lines(lines, rows, cols)`,
  `successors()`, `serialize()`, `is_solved()`, `grid()` and `render()`;
  `rushsolve.board.Piece` describes one block.
- `rushsolve.heuristics.Heuristic(kind).calculate(board)`, and the functions
  `blocking_pieces(board)` and `distance_to_exit(board)`.
- `rushsolve.solver.Solver(board, heuristic)` with `solve_complete()`,
  `solve_greedy()` and `solve_low_memory()`; each returns the list of boards
  on the path (empty when there is none) and adds to `visited_nodes`.
- `rushsolve.cli.write_solutions(path, elapsed_ms, visited, solutions)`
  writes a `solutions.txt` file.

## Limitations

The output lists the boards along the solution path, not the individual
moves. There is no interactive display or animation of the solution.