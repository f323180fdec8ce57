import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Polygon

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, **kwargs)
    else:
        ax.scatter(x, y, **kwargs)


def plot_hull(points: list[Point], hull: list[Point], ax: Axes | None = None, color='r') -> Axes:
    """
    Draw input points and their convex hull.
    Degenerate hulls are drawn as a segment or a single marker.
    """
    if ax is None:
        ax = plt.gca()

    plot_points(points, ax=ax, s=10, alpha=0.6)

    xs = [p.x for p in hull]
    ys = [p.y for p in hull]
    if len(hull) > 2:
        poly = Polygon([(p.x, p.y) for p in hull], alpha=0.2, facecolor=color, edgecolor=color)
        ax.add_patch(poly)
        ax.plot(xs + [xs[0]], ys + [ys[0]], 'o-', color=color, markersize=4)
    elif len(hull) == 2:
        ax.plot(xs, ys, 'o-', color=color, markersize=4)
    elif len(hull) == 1:
        ax.plot(xs, ys, 'o', color=color, markersize=6)

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(f"Convex hull ({len(hull)} of {len(points)} points)")
    ax.grid(True, alpha=0.3)
    ax.axis('equal')
    return ax
