"""
Module: point_set_demo
Description: Walk through the PointSet set algebra on three small fixed sets:
             copy/assign, equality, difference (-) and intersection (&).

Usage:
    python point_set_demo.py
"""

import sys
from typing import List, TextIO, Tuple

from logging_config import get_logger
from point_set import PointSet

logger = get_logger("point_set_demo")

POINTS_1 = [(7, 12), (1, 1), (2, 0), (-4, -4), (1, 1), (0, 0), (7, 12)]
POINTS_2 = [(1, 1), (0, 0), (7, 12), (-4, -4), (2, 0)]
POINTS_3 = [(5, 7), (7, 12), (0, 0), (4, 123), (0, 3), (1, 1)]

END_OUTPUT = "End of Demonstration!"
INTERSECT_TITLE = "Intersect"
SUBTRACT_TITLE = "Subtract"


def _section(out: TextIO, title: str, point_set: PointSet) -> None:
    out.write(f"{title}... \n{point_set.to_string()}\n")


def initialize_point_sets(out: TextIO) -> Tuple[PointSet, PointSet, PointSet]:
    # POINTS_1 repeats (1, 1) and (7, 12); the set keeps the first of each
    sets = tuple(PointSet.from_pairs(pairs) for pairs in (POINTS_1, POINTS_2, POINTS_3))
    for title, point_set in zip("ABC", sets):
        _section(out, title, point_set)
    return sets


def copy_and_assign(out: TextIO, a: PointSet, b: PointSet, c: PointSet) -> None:
    d = b.copy()
    e = PointSet(b)
    a.assign(a)  # self-assignment keeps a intact
    d.assign(c)
    _section(out, "D (Copy of C)", d)
    _section(out, "E (Copy of B)", e)


def equality(out: TextIO, a: PointSet, b: PointSet, c: PointSet) -> None:
    out.write("A==B\n" if a == b else "A!=B\n")
    out.write("B!=C\n" if b != c else "B==C\n")
    out.write("\n")


def subtraction(out: TextIO, a: PointSet, b: PointSet, c: PointSet) -> None:
    _section(out, f"{SUBTRACT_TITLE} B-C", b - c)
    _section(out, f"{SUBTRACT_TITLE} C-A", c - a)


def intersection(out: TextIO, a: PointSet, b: PointSet, c: PointSet) -> None:
    _section(out, f"{INTERSECT_TITLE} A&C", a & c)
    _section(out, f"{INTERSECT_TITLE} B&B", b & b)


def run_demonstration(out: TextIO = None) -> List[PointSet]:
    """Print every step to out (stdout by default) and return [A, B, C]."""
    out = out if out is not None else sys.stdout
    a, b, c = initialize_point_sets(out)
    copy_and_assign(out, a, b, c)
    equality(out, a, b, c)
    subtraction(out, a, b, c)
    intersection(out, a, b, c)
    out.write(END_OUTPUT + "\n")
    logger.debug("Demonstration finished with |A|=%d |B|=%d |C|=%d", len(a), len(b), len(c))
    return [a, b, c]


def main() -> int:
    run_demonstration()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
