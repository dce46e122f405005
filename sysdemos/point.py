"""A two-dimensional point."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass


@dataclass
class Point:
    """A mutable point in the plane; a new point sits at the origin."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Point) -> None:
        """Move this point by the coordinates of another, in place."""
        self.x += other.x
        self.y += other.y

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def __str__(self) -> str:
        return f"point({self.x:f}, {self.y:f})"


def main(argv: list[str] | None = None) -> int:
    """Print two points and the distance between them."""
    p1 = Point(3.0, 0)
    p2 = Point(0, 4.0)
    sys.stdout.write(f"p1 = {p1} p2 = {p2} distance = {p1.distance(p2):f}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())