import pytest
import numpy as np

from geometry import Orientation, Point, orientation, points_from_array
from graham_scan import GrahamScan, compute_hull, is_convex


def cross(o: Point, a: Point, b: Point) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def convex_hull_andrew(points: list[Point]) -> list[Point]:
    """
    Andrew's monotone chain, used as a reference.
    Drops collinear points on hull edges.
    """
    points = sorted(set(points), key=lambda p: (p.x, p.y))
    if len(points) <= 2:
        return points

    lower = []
    for p in points:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper = []
    for p in reversed(points):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]


def check_contains(hull: list[Point], points: list[Point]):
    if len(hull) == 1:
        assert all(p == hull[0] for p in points)
        return
    if len(hull) == 2:
        a, b = hull
        for p in points:
            assert orientation(a, b, p) == Orientation.COLLINEAR
            assert min(a.x, b.x) <= p.x <= max(a.x, b.x)
            assert min(a.y, b.y) <= p.y <= max(a.y, b.y)
        return
    for i in range(len(hull)):
        a, b = hull[i], hull[(i + 1) % len(hull)]
        for p in points:
            assert orientation(a, b, p) != Orientation.RIGHT_TURN, f"{p} is outside of edge {a}, {b}"


def check_hull(points: list[Point]):
    hull = compute_hull(points)
    expected = convex_hull_andrew(points)

    assert set(hull) == set(expected), f"Hulls differ:\n{hull}\n{expected}"
    assert len(hull) == len(set(hull)), f"Hull has repeated vertices: {hull}"
    if points:
        assert hull[0] == min(points)
    assert is_convex(hull)
    check_contains(hull, points)
    assert compute_hull(hull) == hull


@pytest.fixture
def distribution_gen_func():
    return {
        "uniform": lambda low, high, s: np.random.rand(s) * high + low,
        "normal": lambda low, high, s: np.random.randn(s) * high + low,
        "uniform_int": np.random.randint,
    }


@pytest.fixture
def n_trials():
    # n_points -> n_trials
    return {
        3: 2000,
        10: 500,
        100: 100,
        1000: 10,
    }


@pytest.mark.parametrize("n_points", [3, 10, 100, 1000])
@pytest.mark.parametrize("distribution_type", ["uniform_int", "uniform", "normal"])
@pytest.mark.parametrize("limits", [(0, 100), (-1000, 1000)])
def test_random_points(n_points, distribution_type, limits, distribution_gen_func, n_trials):
    np.random.seed(42)

    seeds = np.random.randint(0, 100_000, size=n_trials[n_points])
    for seed in seeds:
        np.random.seed(seed)

        gen_func = distribution_gen_func[distribution_type]
        low, high = limits
        xs = gen_func(low, high, n_points).astype(float)
        ys = gen_func(low, high, n_points).astype(float)
        points = [Point(xs[i], ys[i]) for i in range(n_points)]

        check_hull(points)


@pytest.mark.parametrize("n_points", [5, 20, 200])
def test_small_grid_with_duplicates(n_points):
    # lots of repeated and collinear points
    np.random.seed(0)
    for _ in range(300):
        points = points_from_array(np.random.randint(0, 4, size=(n_points, 2)))
        check_hull(points)


def test_empty():
    assert compute_hull([]) == []


def test_single_point():
    assert compute_hull([Point(2, 2)]) == [Point(2, 2)]


def test_two_points():
    points = [Point(3, 1), Point(0, 0)]
    assert compute_hull(points) == [Point(0, 0), Point(3, 1)]
    assert compute_hull(points[::-1]) == [Point(0, 0), Point(3, 1)]
    assert compute_hull([Point(2, 5), Point(1, 5)]) == [Point(1, 5), Point(2, 5)]
    assert compute_hull([Point(1, 1), Point(1, 1)]) == [Point(1, 1)]


def test_coincident_points():
    assert compute_hull([Point(1, 1)] * 3) == [Point(1, 1)]


@pytest.mark.parametrize("points", [
    [(0, 0), (1, 1), (2, 2), (3, 3)],
    [(3, 3), (1, 1), (0, 0), (2, 2)],
    [(2, 2), (0, 0), (3, 3), (0, 0), (1, 1), (3, 3)],
])
def test_collinear_points(points):
    assert compute_hull(points_from_array(points)) == [Point(0, 0), Point(3, 3)]


def test_horizontal_points():
    points = points_from_array([(5, 1), (-2, 1), (0, 1), (-2, 1)])
    assert compute_hull(points) == [Point(-2, 1), Point(5, 1)]


def test_square_with_interior_point():
    points = points_from_array([(0, 0), (0, 2), (2, 2), (2, 0), (1, 1)])
    assert compute_hull(points) == points_from_array([(0, 0), (2, 0), (2, 2), (0, 2)])


def test_points_on_square_edges():
    points = points_from_array([
        (0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2), (0, 1), (1, 1),
    ])
    assert compute_hull(points) == points_from_array([(0, 0), (2, 0), (2, 2), (0, 2)])


def test_duplicate_pivot():
    points = points_from_array([(1, 1), (0, 0), (2, 0), (0, 0)])
    assert compute_hull(points) == points_from_array([(0, 0), (2, 0), (1, 1)])


def test_pivot_ties_broken_by_x():
    points = points_from_array([(3, 0), (1, 0), (2, 2)])
    assert compute_hull(points) == points_from_array([(1, 0), (3, 0), (2, 2)])


def test_input_not_modified():
    points = points_from_array([(2, 2), (0, 2), (1, 1), (2, 0), (0, 0)])
    copy = points.copy()
    GrahamScan().compute_hull(points)
    assert points == copy


def test_accepts_iterables():
    points = (Point(x, y) for x, y in [(0, 0), (4, 0), (0, 4), (1, 1)])
    assert compute_hull(points) == points_from_array([(0, 0), (4, 0), (0, 4)])


def test_is_convex():
    assert is_convex([])
    assert is_convex(points_from_array([(0, 0), (1, 0)]))
    assert is_convex(points_from_array([(0, 0), (1, 0), (1, 1), (0, 1)]))
    # clockwise
    assert not is_convex(points_from_array([(0, 0), (0, 1), (1, 1), (1, 0)]))
    # collinear vertex
    assert not is_convex(points_from_array([(0, 0), (1, 0), (2, 0), (1, 1)]))
