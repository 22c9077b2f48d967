"""
Input parsing for the pizzabot router.

Turns a raw instruction string such as "5x5 (1, 3) (4, 4)" into a GridSize
and the ordered delivery Points. Every stage raises ParseError with a
user-facing message; the first failure aborts the whole parse.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from grid_types import GridSize, Point

__all__ = [
    "ParseError",
    "parse_positive_integer",
    "parse_grid_size",
    "parse_point",
    "parse_coordinates",
    "parse_input",
]

logger = logging.getLogger(__name__)

INPUT_DELIMITER = " "
GRID_SEPARATOR = "x"
GROUP_SEPARATOR = ")("

# Integers are bounded like a signed 64-bit machine word
MAX_INT = 2**63 - 1
MIN_INT = -(2**63)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """Raised when the instruction string cannot be turned into a grid and points."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


def parse_positive_integer(token: str) -> int:
    """
    Parse a base-10 integer token that must not be negative.

    Only ASCII digits with an optional leading sign are accepted, so "5.0",
    "5e", "1_000" and "" are all malformed. Malformed tokens are reported
    before the sign is considered.

    Raises:
        ParseError: "Invalid integer string ..." for malformed tokens, or
            "Invalid integer ..." for negative values.
    """
    if not _INTEGER_RE.fullmatch(token):
        raise ParseError(f"Invalid integer string '{token}', must be a valid integer")

    value = int(token)
    if value > MAX_INT or value < MIN_INT:
        raise ParseError(f"Invalid integer string '{token}', must be a valid integer")

    if value < 0:
        raise ParseError(f"Invalid integer '{value}', must be a positive integer")

    return value


def parse_grid_size(token: str) -> GridSize:
    """
    Parse a grid size token of the form XxY, e.g. "5x5" or "1x512".

    The shape check runs before either operand is validated, so "x1",
    "6x1x2", "x" and "15" all fail with the same dimension message.
    """
    dimensions = token.split(GRID_SEPARATOR)

    if len(dimensions) != 2 or not dimensions[0] or not dimensions[1]:
        raise ParseError("Must specify two grid dimensions in the form XxY, e.g. 5x5")

    width = parse_positive_integer(dimensions[0])
    height = parse_positive_integer(dimensions[1])

    return GridSize(width, height)


def parse_point(group: str, grid: GridSize) -> Point:
    """
    Parse one coordinate group, e.g. "(1,2)", into a Point inside the grid.

    Only the first "(" and the first ")" are removed, so a stray extra
    parenthesis stays attached to an operand and is reported as a malformed
    integer.
    """
    stripped = group.replace("(", "", 1).replace(")", "", 1)
    stripped = stripped.replace(INPUT_DELIMITER, "")
    parts = stripped.split(",")

    if len(parts) != 2:
        raise ParseError(
            f"Invalid coordinates '{group}', must be a pair of positive integers, e.g. (1, 2)"
        )

    x = parse_positive_integer(parts[0])
    y = parse_positive_integer(parts[1])

    point = Point(x, y)
    if not grid.contains(point):
        raise ParseError(f"Point ({x}, {y}) must be within grid dimensions {grid}")

    return point


def parse_coordinates(tokens: Sequence[str], grid: GridSize) -> tuple[Point, ...]:
    """
    Parse the coordinate tokens that follow the grid size.

    Whitespace inside and between groups is insignificant: the tokens are
    re-joined, all spaces removed, and the result split on ")(".

    Example:
        ["(1,", "3)", "(4,", "4)"] with a 5x5 grid
        -> (Point(1, 3), Point(4, 4))
    """
    joined = INPUT_DELIMITER.join(tokens).replace(INPUT_DELIMITER, "")

    points: list[Point] = []
    for group in joined.split(GROUP_SEPARATOR):
        points.append(parse_point(group, grid))

    return tuple(points)


def parse_input(raw: str) -> tuple[GridSize, tuple[Point, ...]]:
    """
    Parse a full instruction string into the grid size and delivery points.

    Format:
    - First whitespace-delimited token: grid size "XxY"
    - Remaining tokens: coordinate groups "(x, y)", in delivery order
    - Coordinates are inclusive of the grid dimension, so "1x1 (1, 1)" is valid

    Args:
        raw: The instruction string, e.g. "5x5 (1, 3) (4, 4)"

    Returns:
        Tuple of (grid size, points in input order, duplicates kept)

    Raises:
        ParseError: On the first validation failure, with the user-facing message
    """
    tokens = raw.split()
    if len(tokens) < 2:
        raise ParseError("Invalid input string")

    grid = parse_grid_size(tokens[0])
    points = parse_coordinates(tokens[1:], grid)

    logger.debug("Parsed grid %s with %d point(s)", grid, len(points))
    return grid, points
