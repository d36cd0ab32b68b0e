"""Sanity check of a strip packing solution against its instance."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from .problem import Placement


class CheckError(Exception):
    """Raised when a solution does not fit its instance."""


def _point(p: tuple[int, int]) -> str:
    return f"({p[0]}, {p[1]})"


def parse_demands(text: str) -> tuple[int, dict[tuple[int, int], int]]:
    """Parse an instance into the roll width and the count of each rectangle size.

    Groups "count p q" are read until their counts add up to the total.
    """
    tokens = iter(text.split())
    try:
        width = int(next(tokens))
        remaining = int(next(tokens))
        demands: dict[tuple[int, int], int] = {}
        while remaining != 0:
            count, p, q = int(next(tokens)), int(next(tokens)), int(next(tokens))
            remaining -= count
            demands[(p, q)] = count
    except StopIteration as exc:
        raise ValueError("instance ended before all rectangles were listed") from exc
    return width, demands


def parse_solution(text: str) -> tuple[int, list[Placement]]:
    """Parse a solution into its strip length and placements."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("solution must start with the elapsed time and the length")
    float(tokens[0])
    length = int(tokens[1])
    placements: list[Placement] = []
    numbers = tokens[2:]
    for start in range(0, len(numbers) - 3, 4):
        try:
            x1, y1, x2, y2 = (int(token) for token in numbers[start : start + 4])
        except ValueError:
            break
        placements.append(Placement(x1, y1, x2, y2))
    return length, placements


def check_solution(
    width: int,
    demands: Mapping[tuple[int, int], int],
    length: int,
    placements: Iterable[Placement],
) -> int:
    """Verify placements against the demands; return the number of cells covered.

    Raises CheckError describing the first problem found.
    """
    remaining = dict(demands)
    board: dict[tuple[int, int], Placement] = {}
    found_length = 0

    def within(point: tuple[int, int]) -> bool:
        return 0 <= point[0] < width and 0 <= point[1] < length

    for placement in placements:
        tl, br = placement.top_left, placement.bottom_right
        for corner in (tl, br):
            if not within(corner):
                raise CheckError(f"position {_point(corner)} is out of bounds")

        found_length = max(found_length, br[1] + 1)
        p = br[0] - tl[0] + 1
        q = br[1] - tl[1] + 1
        if p <= 0 or q <= 0:
            raise CheckError(
                f"top-left corner {_point(tl)} and bottom-right corner {_point(br)}"
                " do not define a valid rectangle"
            )

        dims = (p, q) if p <= q else (q, p)
        if dims not in remaining:
            raise CheckError(
                f"rectangle of dimensions {dims[0]}x{dims[1]}"
                f" defined by top-left corner {_point(tl)}"
                f" and bottom-right corner {_point(br)}"
                " does not match any in input data"
            )
        remaining[dims] -= 1
        if remaining[dims] < 0:
            raise CheckError(f"too many rectangles of dimensions {dims[0]}x{dims[1]}")

        for y in range(tl[1], br[1] + 1):
            for x in range(tl[0], br[0] + 1):
                other = board.get((x, y))
                if other is not None:
                    raise CheckError(
                        f"rectangle defined by top-left corner {_point(tl)}"
                        f" and bottom-right corner {_point(br)}"
                        f" overlaps rectangle defined by top-left corner {_point(other.top_left)}"
                        f" and bottom-right corner {_point(other.bottom_right)}"
                        f" at position {_point((x, y))}"
                    )
                board[(x, y)] = placement

    if found_length != length:
        raise CheckError(
            f"Solution file indicates L = {length}"
            f" but the rectangles determine that L should be {found_length}"
        )

    for dims, count in sorted(remaining.items()):
        if count > 0:
            plural = "" if count == 1 else "s"
            raise CheckError(
                f"{count} rectangle{plural} of dimensions {dims[0]}x{dims[1]} missing"
            )
    return len(board)


def main(argv: Sequence[str] | None = None) -> int:
    """Check the solution file against the instance file; print OK or FAILED."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Makes a sanity check of a solution")
        print("Usage: checker INPUT_FILE OUTPUT_FILE")
        return 0
    if len(args) != 2:
        print("Usage: checker INPUT_FILE OUTPUT_FILE", file=sys.stderr)
        return 2

    try:
        width, demands = parse_demands(Path(args[0]).read_text())
        length, placements = parse_solution(Path(args[1]).read_text())
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        check_solution(width, demands, length, placements)
    except CheckError as exc:
        print(f"Error: {exc}")
        print("FAILED")
        return 1
    print("OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())