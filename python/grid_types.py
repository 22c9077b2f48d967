"""
Shared type definitions for the pizzabot router.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal direction for a single step."""

    N = "N"  # Up (increasing y)
    S = "S"  # Down (decreasing y)
    E = "E"  # Right (increasing x)
    W = "W"  # Left (decreasing x)


DROP = "D"


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class GridSize:
    """Grid bounds. Coordinates are valid from 0 up to and including each dimension."""

    width: int
    height: int

    def contains(self, point: Point) -> bool:
        return point.x <= self.width and point.y <= self.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class Point:
    """A delivery target."""

    x: int
    y: int


Route = str
