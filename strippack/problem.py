"""Problem data for strip packing: rectangles, placements and the file formats."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rectangle:
    """A rectangle to be packed, given by its width and height."""

    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Placement:
    """A placed rectangle, given by its inclusive top-left and bottom-right cells."""

    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def top_left(self) -> tuple[int, int]:
        return (self.x1, self.y1)

    @property
    def bottom_right(self) -> tuple[int, int]:
        return (self.x2, self.y2)

    def __str__(self) -> str:
        return f"{self.x1} {self.y1} {self.x2} {self.y2}"


@dataclass
class Instance:
    """A roll width together with every rectangle that must be packed on it."""

    width: int
    rectangles: list[Rectangle] = field(default_factory=list)


def parse_instance(text: str) -> Instance:
    """Parse an instance: a header "W N", then lines "count width height".

    Lines that cannot be parsed are reported through the module logger and skipped.
    """
    lines = text.splitlines()
    header = lines[0].split() if lines else []
    if len(header) < 2:
        raise ValueError("instance must start with the roll width and the rectangle count")
    try:
        width = int(header[0])
        int(header[1])
    except ValueError as exc:
        raise ValueError(f"invalid instance header: {lines[0]!r}") from exc

    rectangles: list[Rectangle] = []
    for line in lines[1:]:
        tokens = line.split()
        try:
            count, rw, rh = (int(token) for token in tokens[:3])
        except ValueError:
            logger.warning("Error parsing line: %s", line)
            continue
        rectangles.extend(Rectangle(rw, rh) for _ in range(count))
    return Instance(width, rectangles)


def read_instance(path: str | Path) -> Instance:
    """Read and parse an instance file."""
    return parse_instance(Path(path).read_text())


def sort_by_area(rectangles: Iterable[Rectangle]) -> list[Rectangle]:
    """Return the rectangles ordered by descending area."""
    return sorted(rectangles, key=lambda rect: rect.area, reverse=True)


def format_solution(elapsed: float, length: int, placements: Iterable[Placement]) -> str:
    """Render a solution: elapsed seconds, strip length, then one placement per line."""
    lines = [f"{elapsed:.1f}", str(length)]
    lines.extend(str(placement) for placement in placements)
    return "\n".join(lines) + "\n"


def write_solution(
    path: str | Path, elapsed: float, length: int, placements: Iterable[Placement]
) -> None:
    """Write a solution file, replacing any previous content."""
    Path(path).write_text(format_solution(elapsed, length, placements))