"""
Module: convex_hull
Description: Graham scan convex hull over integer point sets.
             - Read "x,y" records into a PointSet (duplicates dropped).
             - Sort by polar angle around the lowest point.
             - Scan once, popping every vertex that does not make a strict
               left turn, so collinear boundary points are excluded.
             - Print the hull sorted by (x, y) after a "result" header,
               optionally plotting points + hull.

Usage:
    python convex_hull.py points.txt
    python convex_hull.py --plot < points.txt
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

import matplotlib.pyplot as plt
import numpy as np

from config import DEFAULT_LOG_LEVEL, INITIAL_RESULT_SIZE, RESULT_HEADER
from logging_config import get_logger, setup_logging
from point import Point
from point_set import PointSet

logger = get_logger("convex_hull")


# ---------- Geometry helpers ----------
def orient(a: Point, b: Point, c: Point) -> int:
    """
    area (2x) of triangle abc = cross((b-a), (c-a)).
    > 0  => a->b->c is a left turn (counterclockwise)
    < 0  => right turn (clockwise)
    == 0 => collinear
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def counter_clockwise(a: Point, b: Point, c: Point) -> bool:
    """Strict left turn only; collinear triples are rejected."""
    return orient(a, b, c) > 0


# ---------- Graham scan ----------
def graham_scan(point_set: PointSet) -> PointSet:
    """
    Convex hull of point_set.
      - Sorts point_set in place by polar angle (pivot first).
      - Seeds the hull with the first two sorted points.
      - For every further point, pops hull vertices while the last two
        vertices and the candidate are not a counter-clockwise turn.
    Returns the hull vertices in scan (CCW) order, not sorted for output.
    An empty input gives an empty hull.
    """
    hull = PointSet()
    point_set.sort_by_polar()
    points: List[Point] = list(point_set)

    for point in points[:INITIAL_RESULT_SIZE]:
        hull.add(point)

    for candidate in points[INITIAL_RESULT_SIZE:]:
        while len(hull) >= INITIAL_RESULT_SIZE and \
                not counter_clockwise(hull[len(hull) - 2], hull[len(hull) - 1], candidate):
            hull.pop()
        hull.add(candidate)

    logger.debug("Graham scan kept %d of %d points", len(hull), len(points))
    return hull


# ---------- Input / Output ----------
def read_points(stream: Iterable[str]) -> PointSet:
    """
    One "x,y" record per line; blank lines are skipped.
    Raises ValueError naming the offending line number.
    """
    point_set = PointSet()
    for line_number, line in enumerate(stream, start=1):
        record = line.strip()
        if not record:
            continue
        try:
            point = Point.from_string(record)
        except ValueError as e:
            raise ValueError(f"line {line_number}: {e}") from e
        if not point_set.add(point):
            logger.debug("Dropped duplicate point %s on line %d", point, line_number)
    return point_set


def format_result(hull: PointSet) -> str:
    """Sort the hull by (x, y) and render it after the result header."""
    hull.sort_by_coordinate()
    return f"{RESULT_HEADER}\n" + hull.to_string()


def plot_hull(points: PointSet, hull: PointSet, show: bool = True):
    """
    Points + convex hull (robust for 0/1/2/>=3 hull vertices).
    hull is expected in scan order so that the outline is drawn as a polygon.
    """
    pts = points.to_array()
    hull_arr = hull.to_array()

    fig = plt.figure()
    if len(pts) > 0:
        plt.scatter(pts[:, 0], pts[:, 1], s=15, label="Points")

    if len(hull_arr) == 1:
        plt.scatter(hull_arr[0, 0], hull_arr[0, 1], s=40, marker="x", label="Hull point")
    elif len(hull_arr) == 2:
        plt.plot(hull_arr[:, 0], hull_arr[:, 1], "-", label="Hull edge")
    elif len(hull_arr) >= 3:
        closed = np.vstack([hull_arr, hull_arr[0]])  # close the loop
        plt.plot(closed[:, 0], closed[:, 1], "-", label=f"Hull (|V|={len(hull_arr)})")

    plt.gca().set_aspect("equal", adjustable="box")
    plt.title(f"Points + Convex Hull (|V| = {len(hull_arr)})")
    plt.xlabel("x")
    plt.ylabel("y")
    if len(pts) > 0 or len(hull_arr) > 0:
        plt.legend()
    if show:
        plt.show()
    return fig


# ---------- CLI ----------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convex hull of integer points via Graham scan.")
    parser.add_argument("input", nargs="?", default=None,
                        help="File with one 'x,y' point per line (default: stdin).")
    parser.add_argument("--plot", action="store_true", help="Plot the points and the hull.")
    parser.add_argument("--log-level", type=str.upper, default=logging.getLevelName(DEFAULT_LOG_LEVEL),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity.")
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file.")
    return parser


def main(argv: Optional[List[str]] = None, out: TextIO = None) -> int:
    args = build_parser().parse_args(argv)
    out = out if out is not None else sys.stdout
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        if args.input is None:
            point_set = read_points(sys.stdin)
        else:
            with open(args.input, "r", encoding="utf-8") as f:
                point_set = read_points(f)
    except (OSError, ValueError) as e:
        logger.error("Invalid input: %s", e)
        return 1

    logger.info("Read %d distinct points", len(point_set))
    hull = graham_scan(point_set)
    logger.info("Hull has %d vertices", len(hull))

    if args.plot:
        # plot in scan order, before format_result re-sorts the hull
        plot_hull(point_set, hull)
    out.write(format_result(hull))
    return 0


if __name__ == "__main__":
    sys.exit(main())
