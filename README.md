# strippack

strippack holds tools for the strip packing problem. A set of rectangles
goes onto a roll of fixed width `W`, and any rectangle may be turned by 90
degrees. The aim is to use as little roll length as possible.

## Input format

An instance file begins with the roll width and the total number of
rectangles. Each line after that gives a count, then a width and a height:

```
10 5
2 3 4
3 2 2
```

This instance is a roll of width 10 with 5 rectangles on it: two of 3x4 and
three of 2x2. When the solvers read a file, they skip any later line that
does not start with three integers and log a warning for it.

## Output format

A solution file has three parts:

1. The first line is the CPU time taken, in seconds, with one decimal.
2. The second line is the roll length used.
3. Each line after that is one rectangle, written `x1 y1 x2 y2`: the
   top-left cell, then the bottom-right cell. Both cells belong to the
   rectangle.

For the instance above, the greedy solver writes:

```
0.0
5
0 0 3 2
4 0 7 2
8 0 9 1
8 2 9 3
0 3 1 4
```

## Commands

Each solver reads an instance file and writes a solution file:

```
strippack-greedy INPUT_FILE OUTPUT_FILE
strippack-exhaustive INPUT_FILE OUTPUT_FILE
strippack-metaheuristic INPUT_FILE OUTPUT_FILE
```

Every solver first sorts the rectangles by decreasing area.

- `strippack-greedy` puts each rectangle at the lowest free position, and
  then the leftmost. It tries the rectangle lying down (longer side across)
  before it tries it standing up.
- `strippack-exhaustive` runs a branch-and-bound search for the shortest
  length.
  - For each rectangle, in order, it tries every column, at the lowest free
    row. It tries each rectangle as given and then turned.
  - The search takes exponential time, so it suits only small instances.
  - If the rectangles cannot be packed at all, it reports an error and exits
    with status 1.
- `strippack-metaheuristic` makes 600,000 random orderings of the
  rectangles.
  - For each ordering it builds a solution shelf by shelf.
  - It keeps the shortest solution it finds.

If the exhaustive or metaheuristic solver gets SIGINT (Ctrl+C) or SIGTERM, it
writes the best solution it has found so far. It then exits with the signal
number as its status.

To check a solution against its instance:

```
strippack-check INPUT_FILE OUTPUT_FILE
```

The checker looks for these faults:

- a position outside the roll
- corners that do not form a rectangle
- a rectangle size that is not in the instance
- more rectangles of one size than the instance lists
- rectangles that overlap
- a stated length that does not match the rectangles
- rectangles that are missing

If it finds no fault, the checker prints `OK` and exits with status 0.
Otherwise it prints `Error: ...` with the first fault it found, then
`FAILED`, and exits with status 1. With no arguments it prints a usage
message.

You can also run each module directly, for example
`python -m strippack.greedy INPUT_FILE OUTPUT_FILE`.

## Library use

```python
from strippack.problem import parse_instance, sort_by_area
from strippack.greedy import greedy_placement
from strippack.checker import check_solution, CheckError

instance = parse_instance("10 5\n2 3 4\n3 2 2\n")
length, placements = greedy_placement(instance.width, sort_by_area(instance.rectangles))

demands = {(3, 4): 2, (2, 2): 3}
check_solution(instance.width, demands, length, placements)  # raises CheckError if invalid
```

Each module provides the following:

- `strippack.problem`
  - The `Rectangle`, `Placement` and `Instance` data classes.
  - `parse_instance` and `read_instance` read instances.
  - `sort_by_area` orders rectangles by decreasing area.
  - `format_solution` and `write_solution` produce solution files.
- `strippack.greedy`
  - `greedy_placement(width, rectangles)` returns `(length, placements)`.
- `strippack.exhaustive`
  - `exhaustive_search(width, rectangles)` returns the shortest
    `(length, placements)`.
  - `BranchAndBound` runs the same search and exposes the best result so far
    as `best_length` and `best_placements`.
- `strippack.metaheuristic`
  - `build_rows(width, rectangles)` builds one shelf-by-shelf solution.
  - `random_restart_search(width, rectangles, iterations, rng)` returns the
    best solution from `iterations` shuffles made with a `random.Random`.
- `strippack.checker`
  - `parse_demands` and `parse_solution` read the two file kinds.
  - `check_solution` raises `CheckError` for the first fault it finds.
    Otherwise it returns the number of cells that the rectangles cover.

## Limits

The package works on plain text files only. It does not draw or show the
packings. The solvers have no time limit: to stop the exhaustive or
metaheuristic solver early, send it an interrupt.