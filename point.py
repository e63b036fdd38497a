"""
Module: point
Description: A single point in the plane with integer X and Y coordinates,
             plus the geometric queries the Graham scan needs
             (polar angle around a pivot, Euclidean distance).
"""

import math
import numbers
from typing import Iterator, Tuple

from config import ANGLE_FACTOR, COORDINATES_SEPARATOR, DEFAULT_COORDINATE_VALUE, PI


def _check_coordinate(name: str, value) -> int:
    """
    Coordinates must be whole numbers. numpy integers are fine,
    bools and floats are not.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"'{name}' must be an integer. Supplied a {type(value).__name__}")
    return int(value)


class Point:
    """
    A point with X and Y coordinates.

    Equality is structural (both coordinates match exactly). Points can be
    rewritten through set(), so they are not hashable.
    """

    __slots__ = ("_coords",)

    def __init__(self, x: int = DEFAULT_COORDINATE_VALUE, y: int = DEFAULT_COORDINATE_VALUE):
        self._coords: Tuple[int, int] = (_check_coordinate("x", x), _check_coordinate("y", y))

    @classmethod
    def from_string(cls, record: str) -> "Point":
        """
        Parse a single "x,y" record.
        Raises ValueError when the separator is missing or a coordinate is not an integer.
        """
        x_text, sep, y_text = record.partition(COORDINATES_SEPARATOR)
        if not sep:
            raise ValueError(f"missing '{COORDINATES_SEPARATOR}' in point record {record!r}")
        try:
            return cls(int(x_text), int(y_text))
        except ValueError:
            raise ValueError(f"invalid point record {record!r}") from None

    @property
    def x(self) -> int:
        return self._coords[0]

    @property
    def y(self) -> int:
        return self._coords[1]

    def set(self, x: int, y: int) -> None:
        """Overwrite both coordinates at once."""
        self._coords = (_check_coordinate("x", x), _check_coordinate("y", y))

    # ---------- Geometry ----------
    def polar_angle(self, pivot: "Point") -> float:
        """
        Angle in degrees of the vector pivot -> self, in (-180, 180].
        A point's angle around itself is atan2(0, 0), i.e. 0.
        """
        delta_x = self.x - pivot.x
        delta_y = self.y - pivot.y
        return math.atan2(delta_y, delta_x) * ANGLE_FACTOR / PI

    def distance(self, other: "Point") -> float:
        delta_x = self.x - other.x
        delta_y = self.y - other.y
        return math.sqrt(delta_x * delta_x + delta_y * delta_y)

    # ---------- Dunder ----------
    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords == other._coords

    __hash__ = None

    def __iter__(self) -> Iterator[int]:
        return iter(self._coords)

    def __str__(self) -> str:
        return f"{self.x}{COORDINATES_SEPARATOR}{self.y}"

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"
