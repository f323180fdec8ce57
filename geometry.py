import math
import numbers

from dataclasses import dataclass
from enum import IntEnum
from functools import cmp_to_key, total_ordering


class InvalidCoordinate(ValueError):
    pass


class Orientation(IntEnum):
    RIGHT_TURN = -1
    COLLINEAR = 0
    LEFT_TURN = 1


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


@total_ordering
@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self):
        for axis in ('x', 'y'):
            value = getattr(self, axis)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidCoordinate(f'{axis} coordinate must be a real number, got {value!r}')
            try:
                value = float(value)
            except OverflowError as e:
                raise InvalidCoordinate(f'{axis} coordinate is too large for a float') from e
            if math.isnan(value):
                raise InvalidCoordinate(f'{axis} coordinate cannot be NaN')
            if math.isinf(value):
                raise InvalidCoordinate(f'{axis} coordinate must be finite, got {value}')
            if value == 0.0:
                value = 0.0  # -0.0 -> +0.0
            object.__setattr__(self, axis, value)

    def __lt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare_to(other) < 0

    def __str__(self):
        return f'({self.x}, {self.y})'

    def compare_to(self, other: 'Point') -> int:
        """
        Lexicographic comparison, y coordinate first, then x.
        """
        if self.y != other.y:
            return _sign(self.y - other.y)
        return _sign(self.x - other.x)

    def r(self) -> float:
        return math.hypot(self.x, self.y)

    def theta(self) -> float:
        return math.atan2(self.y, self.x)

    def angle_to(self, other: 'Point') -> float:
        return math.atan2(other.y - self.y, other.x - self.x)

    def distance_to(self, other: 'Point') -> float:
        return math.sqrt(self.distance_squared_to(other))

    def distance_squared_to(self, other: 'Point') -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


def signed_area2(a: Point, b: Point, c: Point) -> float:
    """
    Twice the signed area of triangle abc,
    i.e. cross product of segments ab and ac.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def orientation(a: Point, b: Point, c: Point) -> Orientation:
    """
    Turn made by going a -> b -> c.
    Counter-clockwise is a left turn.
    """
    return Orientation(_sign(signed_area2(a, b, c)))


def x_order(p: Point, q: Point) -> int:
    return _sign(p.x - q.x)


def y_order(p: Point, q: Point) -> int:
    return _sign(p.y - q.y)


def r_order(p: Point, q: Point) -> int:
    return _sign((p.x * p.x + p.y * p.y) - (q.x * q.x + q.y * q.y))


def polar_order(pivot: Point, q1: Point, q2: Point) -> int:
    """
    Compare q1 and q2 by the angle swept counter-clockwise from pivot,
    starting at the ray pointing in the +x direction.

    Only sign tests are used: points with non-negative y offset precede
    points with negative y offset, points on the horizontal line through
    pivot are ordered by the sign of their x offset and the rest by the turn
    they make around pivot. Points collinear with pivot compare equal.
    """
    dx1, dy1 = q1.x - pivot.x, q1.y - pivot.y
    dx2, dy2 = q2.x - pivot.x, q2.y - pivot.y

    if dy1 >= 0 and dy2 < 0:
        return -1   # q1 above, q2 below
    if dy2 >= 0 and dy1 < 0:
        return 1    # q1 below, q2 above
    if dy1 == 0 and dy2 == 0:
        # both on the horizontal line through pivot
        if dx1 >= 0 and dx2 < 0:
            return -1
        if dx2 >= 0 and dx1 < 0:
            return 1
        return 0
    return -orientation(pivot, q1, q2)


def atan2_order(pivot: Point, q1: Point, q2: Point) -> int:
    return _sign(pivot.angle_to(q1) - pivot.angle_to(q2))


def distance_to_order(pivot: Point, q1: Point, q2: Point) -> int:
    return _sign(pivot.distance_squared_to(q1) - pivot.distance_squared_to(q2))


@dataclass(frozen=True)
class PolarOrder:
    """
    Sort order used by the Graham scan: polar order around pivot,
    points collinear with pivot going from the nearest to the farthest.
    """
    pivot: Point

    def compare(self, q1: Point, q2: Point) -> int:
        return (
            polar_order(self.pivot, q1, q2)
            or distance_to_order(self.pivot, q1, q2)
        )

    def key(self):
        return cmp_to_key(self.compare)


def points_from_array(coords) -> list[Point]:
    """
    Build points from an (n, 2) array-like of coordinates.
    """
    return [Point(x, y) for x, y in coords]
