"""Row-based construction with random restarts for strip packing."""

from __future__ import annotations

import random
import signal
import sys
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Sequence

from .problem import Placement, Rectangle, read_instance, sort_by_area, write_solution

ITERATIONS = 600_000


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


def _rotate_to_fit(dims: list[int], fits: Callable[[int, int], bool]) -> bool:
    """Turn the rectangle, then try it; turn back if neither way fits."""
    for _ in range(2):
        dims.reverse()
        if fits(dims[0], dims[1]):
            return True
    return False


def build_rows(
    width: int, rectangles: Sequence[Rectangle]
) -> tuple[int, list[Placement], list[Rectangle]]:
    """Build a packing row by row.

    Each row is opened at the left by the next unplaced rectangle; the rest of
    the row is filled, left to right, with unplaced rectangles no taller than
    the first. Rectangles are tried turned first, then as given. A rectangle
    wider than the strip both ways is left out.

    Returns the strip length, the placements, and the rectangles in the
    orientation they ended up in, in their input order.
    """
    dims = [[r.width, r.height] for r in rectangles]
    placed = [False] * len(dims)
    placements: list[Placement] = []
    length = 0

    for i, big in enumerate(dims):
        if placed[i]:
            continue
        y = length
        if not _rotate_to_fit(big, lambda w, h: w <= width):
            continue
        placements.append(Placement(0, y, big[0] - 1, y + big[1] - 1))
        placed[i] = True
        occupied, row_height = big[0], big[1]
        length += big[1]

        for j, small in enumerate(dims):
            if placed[j]:
                continue
            if _rotate_to_fit(
                small, lambda w, h: w <= width - occupied and h <= row_height
            ):
                placements.append(
                    Placement(occupied, y, occupied + small[0] - 1, y + small[1] - 1)
                )
                placed[j] = True
                occupied += small[0]
            if occupied == width:
                break

    return length, placements, [Rectangle(w, h) for w, h in dims]


def _improvements(
    width: int, rectangles: Sequence[Rectangle], iterations: int, rng: random.Random
) -> Iterator[tuple[int, list[Placement]]]:
    order = list(rectangles)
    best: int | None = None
    for _ in range(iterations):
        rng.shuffle(order)
        length, placements, order = build_rows(width, order)
        if best is None or length < best:
            best = length
            yield length, placements


def random_restart_search(
    width: int, rectangles: Sequence[Rectangle], iterations: int, rng: random.Random
) -> tuple[int, list[Placement]]:
    """Build rows from random orders of the rectangles; keep the shortest strip.

    Orientations chosen by one build carry over into the next.
    """
    if iterations < 1:
        raise ValueError("at least one iteration is needed")
    best: tuple[int, list[Placement]] = (0, [])
    for best in _improvements(width, rectangles, iterations, rng):
        pass
    return best


def main(argv: Sequence[str] | None = None) -> int:
    """Search the instance in the first file; write the best solution to the second.

    On SIGINT or SIGTERM the best solution found so far is written and the
    signal number is returned.
    """
    start = time.process_time()
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: metaheuristic <input_file> <output_file>", file=sys.stderr)
        return 1
    input_file, output_file = args[0], args[1]

    try:
        instance = read_instance(input_file)
    except OSError:
        print(f"Error opening file: {input_file}", file=sys.stderr)
        return 1

    rectangles = sort_by_area(instance.rectangles)
    best: tuple[int, list[Placement]] | None = None

    def save() -> int:
        assert best is not None
        try:
            write_solution(output_file, time.process_time() - start, best[0], best[1])
        except OSError:
            print(f"Error opening output file: {output_file}", file=sys.stderr)
            return 1
        return 0

    with _interrupts_raise():
        try:
            for best in _improvements(
                instance.width, rectangles, ITERATIONS, random.Random()
            ):
                pass
        except _Interrupted as interrupt:
            if best is not None:
                save()
            return interrupt.signum
    if best is None:
        print("Error: no iterations were run", file=sys.stderr)
        return 1
    return save()


if __name__ == "__main__":
    sys.exit(main())