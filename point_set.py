"""
Module: point_set
Description: An ordered, duplicate-free collection of Points.
             - Insertion order is kept until one of the sorts reorders it.
             - Duplicates are rejected by add() (returns False), not merged.
             - The set stores coordinate values, never the caller's Point
               objects, so every copy is a deep copy.
             - Two sorts: by coordinate (x, then y) and by polar angle around
               the lowest point (the Graham scan order).
"""

import copy
import numbers
from typing import Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from logging_config import get_logger
from point import Point

logger = get_logger("point_set")

Coords = Tuple[int, int]

EMPTY_SET_OUTPUT = ""
END_OF_POINT_OUTPUT = "\n"


def _coords_of(point: Point) -> Coords:
    if not isinstance(point, Point):
        raise TypeError(f"PointSet holds Point objects. Supplied a {type(point).__name__}")
    return point.x, point.y


class PointSet:
    """
    Ordered set of Points backed by a list of (x, y) tuples and a hash index
    over the same tuples.

    The list carries the order, the index answers membership in O(1).
    Both are always updated together.
    """

    def __init__(self, points: Iterable[Point] = ()):
        self._points: List[Coords] = []
        self._index: Set[Coords] = set()
        for point in points:
            self.add(point)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, int]]) -> "PointSet":
        """Build a set from (x, y) pairs, e.g. [(0, 0), (1, 1)] or an (n, 2) integer array."""
        return cls(Point(x, y) for x, y in pairs)

    # ---------- Addition / Deletion ----------
    def add(self, point: Point) -> bool:
        """
        Append the point unless an equal one is already present.
        Returns True if the point was added.
        """
        coords = _coords_of(point)
        if coords in self._index:
            return False
        self._points.append(coords)
        self._index.add(coords)
        return True

    def remove(self, point: Point) -> bool:
        """
        Remove the point equal to the given one, closing the gap so the
        remaining points keep their relative order.
        Returns False if no such point exists.
        """
        coords = _coords_of(point)
        if coords not in self._index:
            return False
        self._points.remove(coords)
        self._index.discard(coords)
        return True

    def pop(self, index: Optional[int] = None) -> Point:
        """
        Remove and return the point at position index (the last one by default).
        """
        if index is None:
            if not self._points:
                raise IndexError("pop from an empty PointSet")
            index = len(self._points) - 1
        coords = self._points.pop(self._check_index(index))
        self._index.discard(coords)
        return Point(*coords)

    def clear(self) -> None:
        self._points = []
        self._index = set()

    # ---------- Access ----------
    def size(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def _check_index(self, index) -> int:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise TypeError(f"PointSet indices must be integers, not {type(index).__name__}")
        if not 0 <= index < len(self._points):
            raise IndexError(f"PointSet index {index} out of range [0, {len(self._points)})")
        return int(index)

    def __getitem__(self, index: int) -> Point:
        """
        Point at position index, valid range [0, size).
        The returned Point is a copy; changing it does not touch the set.
        """
        return Point(*self._points[self._check_index(index)])

    def __contains__(self, point) -> bool:
        if not isinstance(point, Point):
            return False
        return (point.x, point.y) in self._index

    def __iter__(self) -> Iterator[Point]:
        for coords in self._points:
            yield Point(*coords)

    def to_array(self) -> np.ndarray:
        """(n, 2) integer array of the coordinates in the current order."""
        if not self._points:
            return np.empty((0, 2), dtype=np.int64)
        return np.array(self._points, dtype=np.int64)

    def to_string(self) -> str:
        """One "x,y" line per point in the current order; "" for an empty set."""
        result = EMPTY_SET_OUTPUT
        for point in self:
            result += str(point) + END_OF_POINT_OUTPUT
        return result

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"PointSet({[Point(*coords) for coords in self._points]!r})"

    # ---------- Sorting ----------
    def sort_by_coordinate(self) -> None:
        """Ascending X, ties broken by ascending Y."""
        # tuple order is exactly (x, then y)
        self._points.sort()

    def sort_by_polar(self) -> Optional[Point]:
        """
        Graham scan order.
          1. stable sort by (y, x); the first point becomes the pivot
             (lowest y, then lowest x)
          2. stable sort of every other point by polar angle around the pivot,
             equal angles ordered by distance from the pivot
        The pivot stays at position 0 and is returned (None for an empty set).
        """
        if not self._points:
            return None

        self._points.sort(key=lambda coords: (coords[1], coords[0]))
        pivot = Point(*self._points[0])

        # pivot is bound by the closure, nothing outside this call is read
        def polar_key(coords: Coords) -> Tuple[float, float]:
            point = Point(*coords)
            return point.polar_angle(pivot), point.distance(pivot)

        self._points[1:] = sorted(self._points[1:], key=polar_key)
        logger.debug("Polar sort of %d points around pivot %s", len(self._points), pivot)
        return pivot

    # ---------- Set algebra ----------
    def equals(self, other: "PointSet") -> bool:
        """Same points regardless of order."""
        return len(self._points) == len(other._points) and \
            all(coords in other._index for coords in self._points)

    def difference(self, other: "PointSet") -> "PointSet":
        """Points of self missing from other, in self's order."""
        return self._filtered(lambda coords: coords not in other._index)

    def intersection(self, other: "PointSet") -> "PointSet":
        """Points of self also present in other, in self's order."""
        return self._filtered(lambda coords: coords in other._index)

    def _filtered(self, keep) -> "PointSet":
        result = PointSet()
        result._points = [coords for coords in self._points if keep(coords)]
        result._index = set(result._points)
        return result

    def __eq__(self, other):
        if not isinstance(other, PointSet):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        if not isinstance(other, PointSet):
            return NotImplemented
        return not self.equals(other)

    __hash__ = None

    def __sub__(self, other):
        if not isinstance(other, PointSet):
            return NotImplemented
        return self.difference(other)

    def __and__(self, other):
        if not isinstance(other, PointSet):
            return NotImplemented
        return self.intersection(other)

    # ---------- Copy / Assign ----------
    def copy(self) -> "PointSet":
        result = PointSet()
        result._points = list(self._points)
        result._index = set(self._index)
        return result

    def __copy__(self) -> "PointSet":
        return self.copy()

    def __deepcopy__(self, memo) -> "PointSet":
        # coordinates are immutable tuples of ints, a shallow copy of the
        # containers is already deep
        return self.copy()

    def assign(self, other: "PointSet") -> "PointSet":
        """
        Replace the contents with a copy of other.
        Assigning a set to itself is a no-op. The copy is complete before the
        old contents are dropped, so a failure midway leaves self untouched.
        """
        if other is self:
            return self
        replacement = copy.copy(other)
        self._points, self._index = replacement._points, replacement._index
        return self
