"""Greedy bottom-left placement of rectangles on a strip of fixed width."""

from __future__ import annotations

import sys
import time
from typing import Sequence

from .problem import Placement, Rectangle, read_instance, sort_by_area, write_solution


def _fits(grid: list[list[bool]], x: int, y: int, w: int, h: int) -> bool:
    if x + w > len(grid) or y + h > len(grid[0]):
        return False
    return not any(grid[i][j] for i in range(x, x + w) for j in range(y, y + h))


def _occupy(grid: list[list[bool]], x: int, y: int, w: int, h: int) -> None:
    for column in grid[x : x + w]:
        column[y : y + h] = [True] * h


def greedy_placement(
    width: int, rectangles: Sequence[Rectangle]
) -> tuple[int, list[Placement]]:
    """Place each rectangle, in order, at the lowest then leftmost free spot.

    Each rectangle is first tried lying down (longer side horizontal), then
    standing up. Returns the strip length used and the placements made;
    a rectangle that fits nowhere is left out.
    """
    rows = sum(max(r.width, r.height) for r in rectangles)
    grid = [[False] * rows for _ in range(width)]
    placements: list[Placement] = []
    length = 0

    for rect in rectangles:
        w, h = max(rect.width, rect.height), min(rect.width, rect.height)
        orientations = [(w, h)] if rect.width == rect.height else [(w, h), (h, w)]
        spot = next(
            (
                (x, y, ow, oh)
                for y in range(rows)
                for x in range(width)
                for ow, oh in orientations
                if _fits(grid, x, y, ow, oh)
            ),
            None,
        )
        if spot is None:
            continue
        x, y, ow, oh = spot
        _occupy(grid, x, y, ow, oh)
        placements.append(Placement(x, y, x + ow - 1, y + oh - 1))
        length = max(length, y + oh)

    return length, placements


def main(argv: Sequence[str] | None = None) -> int:
    """Pack the instance in the first file and write the solution to the second."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: greedy <input_file> <output_file>", file=sys.stderr)
        return 1
    input_file, output_file = args[0], args[1]

    start = time.process_time()
    try:
        instance = read_instance(input_file)
    except OSError:
        print(f"Error opening file: {input_file}", file=sys.stderr)
        return 1

    rectangles = sort_by_area(instance.rectangles)
    length, placements = greedy_placement(instance.width, rectangles)
    elapsed = time.process_time() - start

    try:
        write_solution(output_file, elapsed, length, placements)
    except OSError:
        print(f"Error opening output file: {output_file}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())