import logging

from typing import Iterable

from geometry import Orientation, Point, PolarOrder, orientation

logger = logging.getLogger(__name__)


def is_convex(hull: list[Point]) -> bool:
    """
    Check that every consecutive triple of the closed hull makes a strict left turn.
    """
    n = len(hull)
    if n <= 2:
        return True
    return all(
        orientation(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) == Orientation.LEFT_TURN
        for i in range(n)
    )


class GrahamScan:
    def compute_hull(self, points: Iterable[Point]) -> list[Point]:
        """
        Graham scan for convex hull.

        Returns hull vertices in counter-clockwise order, starting at the lowest
        (then leftmost) point. Points lying on hull edges and repeated points
        are not included. Input is not modified.

        Time complexity: O(n*log(n)).
        """
        points = list(points)
        n = len(points)
        logger.debug('Computing hull of %d points', n)

        if n == 0:
            return []
        if n == 1:
            return points
        if n == 2:
            return points[:1] if points[0] == points[1] else sorted(points)

        pivot = min(points)
        pivot_idx = points.index(pivot)
        points[0], points[pivot_idx] = points[pivot_idx], points[0]
        points[1:] = sorted(points[1:], key=PolarOrder(pivot).key())
        logger.debug('Pivot: %s', pivot)

        # skip copies of pivot
        k1 = 1
        while k1 < n and points[k1] == pivot:
            k1 += 1
        if k1 == n:
            logger.debug('All points coincide')
            return [pivot]

        # points[k1:k2] lie on a ray from pivot, nearest first
        k2 = k1 + 1
        while k2 < n and orientation(pivot, points[k1], points[k2]) == Orientation.COLLINEAR:
            k2 += 1
        if k2 == n:
            logger.debug('All points are collinear')
            return [pivot, points[n - 1]]

        hull = [pivot, points[k2 - 1]]
        for p in points[k2:]:
            while orientation(hull[-2], hull[-1], p) != Orientation.LEFT_TURN:
                hull.pop()
                assert len(hull) >= 2, f'Hull stack underflow at point {p}'
            hull.append(p)

        assert is_convex(hull), f'Hull is not convex: {hull}'
        logger.debug('Hull has %d vertices', len(hull))
        return hull


def compute_hull(points: Iterable[Point]) -> list[Point]:
    return GrahamScan().compute_hull(points)
