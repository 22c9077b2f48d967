#!/usr/bin/env python3
"""
Pizzabot: plans a delivery route across a grid.

Usage:
    pizzabot "5x5 (1, 3) (4, 4)"            -> ENNNDEEEND
    pizzabot --map "5x5 (1, 3) (4, 4)"      -> route plus an ASCII map
    pizzabot --verbose "5x5 (1, 3) (4, 4)"  -> with INFO logging on stderr
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from grid_parser import ParseError, parse_input
from grid_types import Route
from route import generate_directions
from route_render import MAX_MAP_CELLS, map_fits, render_route

__all__ = ["RouteFailure", "plan_route", "format_help", "main"]

logger = logging.getLogger(__name__)

USAGE_EXAMPLE = './pizzabot "5x5 (1, 2) (3, 4)"'
MAP_FLAG = "--map"
VERBOSE_FLAG = "--verbose"


@dataclass(frozen=True)
class RouteFailure:
    """Why an instruction string was rejected."""

    message: str


def plan_route(raw: str) -> Route | RouteFailure:
    """
    Parse an instruction string and generate its delivery directions.

    Args:
        raw: Instruction string, e.g. "5x5 (1, 3) (4, 4)"

    Returns:
        The direction string if the input is valid, RouteFailure otherwise
    """
    try:
        _, points = parse_input(raw)
    except ParseError as e:
        logger.info("Rejected input %r: %s", raw, e.message)
        return RouteFailure(e.message)

    return generate_directions(points)


def format_help(message: str) -> str:
    """Error line followed by usage help."""
    return f"Error: {message}\nUsage\n{USAGE_EXAMPLE}"


def _print_help(message: str) -> None:
    print(format_help(message))


def main(argv: Sequence[str] | None = None) -> int:
    """Run pizzabot on the first non-flag argument. Returns the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    show_map = MAP_FLAG in args
    verbose = VERBOSE_FLAG in args
    inputs = [a for a in args if a not in (MAP_FLAG, VERBOSE_FLAG)]

    if verbose:
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    if not inputs:
        _print_help("No input specified")
        return 1

    result = plan_route(inputs[0])

    if isinstance(result, RouteFailure):
        _print_help(result.message)
        return 1

    print(result)

    if show_map:
        # Input already validated by plan_route
        grid, points = parse_input(inputs[0])
        if map_fits(grid):
            print(render_route(grid, points, color=sys.stdout.isatty()))
        else:
            logger.warning("Grid %s exceeds %d cells, map skipped", grid, MAX_MAP_CELLS)
            print(f"Map skipped: grid {grid} is larger than {MAX_MAP_CELLS} cells")

    return 0


if __name__ == "__main__":
    sys.exit(main())
