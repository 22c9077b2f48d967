"""
Direction generation: walks the agent from the origin to each point in turn.
"""

from __future__ import annotations

from collections.abc import Iterable

from grid_types import DROP, Direction, Point, Route

__all__ = ["move", "generate_directions"]


def move(current: int, target: int, forward: str, backward: str) -> tuple[int, str]:
    """Step along one axis from current to target.

    Returns:
        Tuple of (new position, steps taken as repeated forward/backward markers)
    """
    if target > current:
        return target, forward * (target - current)
    elif target < current:
        return target, backward * (current - target)
    return current, ""


def generate_directions(points: Iterable[Point]) -> Route:
    """
    Generate directions from (0, 0) through every point in order.

    Each point contributes its X leg (E/W), then its Y leg (N/S), then a drop.
    The position carries over from one point to the next; no reordering or
    shortest-path search is attempted.

    Example:
        [Point(1, 3), Point(4, 4)] -> "ENNNDEEEND"
    """
    x, y = 0, 0
    segments: list[str] = []

    for point in points:
        x, x_steps = move(x, point.x, Direction.E.value, Direction.W.value)
        y, y_steps = move(y, point.y, Direction.N.value, Direction.S.value)
        segments.append(x_steps + y_steps + DROP)

    return "".join(segments)
