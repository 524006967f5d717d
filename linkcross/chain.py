"""The player's chain of articulations and the parsing of its file lines."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from . import messages
from .constants import R_CAPTURE, R_MAX, Mode
from .geometry import Circle, Point, Vector
from .messages import ReadError

_ARENA = Circle(Point(0.0, 0.0), R_MAX)


@dataclass
class Chain:
    """Ordered articulations, from the root at the arena edge to the free end."""

    points: list[Point] = field(default_factory=list)
    mode: Mode = Mode.CONSTRUCTION

    def append(self, point: Point) -> None:
        self.points.append(point)

    def reset(self) -> None:
        """Drop every articulation and go back to construction mode."""
        self.points.clear()
        self.mode = Mode.CONSTRUCTION

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]


def _coordinates(line: str) -> tuple[float, float]:
    fields = line.split()
    try:
        x, y = (float(value) for value in fields[:2])
    except ValueError:
        raise ReadError(f"malformed articulation line: {line!r}\n") from None
    return x, y


def parse_articulation(chain: Chain, line: str) -> Point:
    """Read one articulation, check it and add it to ``chain``.

    Raises ReadError if the point lies outside the arena, if the root is too
    far from the arena boundary, or if it is too far from the previous one.
    """
    x, y = _coordinates(line)
    candidate = Point(x, y)
    if not _ARENA.intrudes(Circle(candidate, 0.0)):
        raise ReadError(messages.articulation_outside(x, y))
    if not chain:
        if not R_MAX - math.hypot(x, y) <= R_CAPTURE:
            raise ReadError(messages.chaine_racine(x, y))
    elif not Vector.from_points(chain[-1], candidate).norm <= R_CAPTURE:
        raise ReadError(messages.chaine_max_distance(len(chain) - 1))
    chain.append(candidate)
    return candidate


def parse_mode(chain: Chain, line: str) -> Mode:
    """Read the chain mode word and set it on ``chain``."""
    words = line.split()
    if not words:
        raise ReadError("missing chain mode\n")
    try:
        mode = Mode(words[0])
    except ValueError:
        raise ReadError(f"unknown chain mode: {words[0]}\n") from None
    chain.mode = mode
    return mode