"""Exact strip packing by branch and bound over bottom-most placements."""

from __future__ import annotations

import signal
import sys
import time
from contextlib import contextmanager
from typing import Iterator, Sequence

from .problem import Placement, Rectangle, read_instance, sort_by_area, write_solution


class _Interrupted(Exception):
    def __init__(self, signum: int) -> None:
        super().__init__(signum)
        self.signum = signum


def _raise_interrupted(signum: int, _frame: object) -> None:
    raise _Interrupted(signum)


@contextmanager
def _interrupts_raise() -> Iterator[None]:
    previous = {
        sig: signal.signal(sig, _raise_interrupted)
        for sig in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


class BranchAndBound:
    """Search every placement of the rectangles, in order, for the shortest strip.

    Each rectangle goes to every column, at the lowest free row not above the
    current strip length, in its given orientation and then rotated. Branches
    that cannot beat the best length found so far are pruned. The best result
    so far is kept in ``best_length`` and ``best_placements``.
    """

    def __init__(self, width: int, rectangles: Sequence[Rectangle]) -> None:
        self.width = width
        self.rectangles = list(rectangles)
        self.best_length: int | None = None
        self.best_placements: list[Placement] = []
        self._rows = sum(max(r.width, r.height) for r in self.rectangles)
        self._grid = [[False] * self._rows for _ in range(width)]

    def solve(self) -> tuple[int, list[Placement]]:
        """Return the shortest strip length and the placements that achieve it.

        Raises ValueError if the rectangles cannot all be packed on the strip.
        """
        self.best_length = None
        self.best_placements = []
        for column in self._grid:
            column[:] = [False] * self._rows
        self._search(0, 0, [])
        if self.best_length is None:
            raise ValueError("the rectangles cannot be packed on a strip of this width")
        return self.best_length, list(self.best_placements)

    def _fits(self, x: int, y: int, w: int, h: int) -> bool:
        if x + w > self.width or y + h > self._rows:
            return False
        return not any(
            self._grid[i][j] for i in range(x, x + w) for j in range(y, y + h)
        )

    def _mark(self, x: int, y: int, w: int, h: int, value: bool) -> None:
        for column in self._grid[x : x + w]:
            column[y : y + h] = [value] * h

    def _lowest_free_y(self, x: int, w: int, h: int, current_length: int) -> int | None:
        return next(
            (y for y in range(current_length + 1) if self._fits(x, y, w, h)), None
        )

    def _search(self, index: int, current_length: int, placements: list[Placement]) -> None:
        if self.best_length is not None and current_length >= self.best_length:
            return
        if index == len(self.rectangles):
            self.best_length = current_length
            self.best_placements = list(placements)
            return

        rect = self.rectangles[index]
        orientations = [(rect.width, rect.height)]
        if rect.width != rect.height:
            orientations.append((rect.height, rect.width))

        for x in range(self.width):
            for w, h in orientations:
                y = self._lowest_free_y(x, w, h, current_length)
                if y is None:
                    continue
                self._mark(x, y, w, h, True)
                placements.append(Placement(x, y, x + w - 1, y + h - 1))
                self._search(index + 1, max(current_length, y + h), placements)
                self._mark(x, y, w, h, False)
                placements.pop()


def exhaustive_search(
    width: int, rectangles: Sequence[Rectangle]
) -> tuple[int, list[Placement]]:
    """Return the optimal strip length and placements for the rectangles in order."""
    return BranchAndBound(width, rectangles).solve()


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the instance in the first file exactly; write the result to the second.

    On SIGINT or SIGTERM the best solution found so far is written and the
    signal number is returned.
    """
    start = time.process_time()
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: exhaustive <input_file> <output_file>", file=sys.stderr)
        return 1
    input_file, output_file = args[0], args[1]

    try:
        instance = read_instance(input_file)
    except OSError:
        print(f"Error opening file: {input_file}", file=sys.stderr)
        return 1

    solver = BranchAndBound(instance.width, sort_by_area(instance.rectangles))

    def save() -> int:
        try:
            write_solution(
                output_file,
                time.process_time() - start,
                solver.best_length,
                solver.best_placements,
            )
        except OSError:
            print(f"Error opening output file: {output_file}", file=sys.stderr)
            return 1
        return 0

    with _interrupts_raise():
        try:
            solver.solve()
        except _Interrupted as interrupt:
            if solver.best_length is not None:
                save()
            return interrupt.signum
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    return save()


if __name__ == "__main__":
    sys.exit(main())