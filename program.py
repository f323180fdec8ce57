import argparse
import logging
import os
import sys

import numpy as np

from geometry import InvalidCoordinate, Point
from graham_scan import GrahamScan

logger = logging.getLogger(__name__)

DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")


class PointFileError(ValueError):
    pass


def configure_logger(name=None, level=logging.WARNING, log_file=None):
    """
    Configure a logger to print to console and, optionally, save to a file.
    A console handler is only added to loggers without handlers; a file
    handler is added unless one already writes to log_file.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(stream_handler)

    if log_file is not None:
        log_path = os.path.abspath(log_file)
        if any(isinstance(h, logging.FileHandler) and h.baseFilename == log_path for h in logger.handlers):
            return logger
        log_dir = os.path.dirname(log_path)
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    return logger


def _parse_points(lines) -> list[Point]:
    lines = ((i, line.strip()) for i, line in enumerate(lines, start=1))
    lines = ((i, line) for i, line in lines if line)

    try:
        lineno, header = next(lines)
    except StopIteration:
        raise PointFileError("Point file is empty")
    try:
        n = int(header)
    except ValueError:
        raise PointFileError(f"Line {lineno}: expected number of points, got {header!r}")
    if n < 0:
        raise PointFileError(f"Line {lineno}: number of points must be non-negative, got {n}")

    points = []
    for lineno, line in lines:
        if len(points) == n:
            break
        try:
            x, y = map(float, line.split())
        except ValueError:
            raise PointFileError(f"Line {lineno}: expected '<x> <y>', got {line!r}")
        try:
            points.append(Point(x, y))
        except InvalidCoordinate as e:
            raise PointFileError(f"Line {lineno}: {e}") from e

    if len(points) < n:
        raise PointFileError(f"Expected {n} points, got {len(points)}")
    return points


def load_points(source) -> list[Point]:
    """
    Read points from a file name or an open text stream.
    First line holds the number of points n, followed by n lines '<x> <y>'.
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, 'r', encoding='utf-8') as f:
            return _parse_points(f)
    return _parse_points(source)


def generate_points(n: int, distribution: str = "uniform", seed: int = 42) -> list[Point]:
    rng = np.random.default_rng(seed)

    if distribution == "uniform":
        coords = rng.uniform(0, 1000, size=(n, 2))
    elif distribution == "circle":
        angle = rng.uniform(0, 2 * np.pi, size=n)
        r = rng.uniform(0, 500, size=n) ** 0.5
        coords = np.column_stack([500 + r * np.cos(angle), 500 + r * np.sin(angle)])
    elif distribution == "gaussian":
        coords = rng.normal(500, 150, size=(n, 2))
    elif distribution == "clusters":
        n_clusters = 5
        centers = rng.uniform(100, 900, size=(n_clusters, 2))
        labels = np.arange(n) % n_clusters
        coords = rng.normal(centers[labels], 50)
    else:
        raise ValueError(f"Unknown distribution: {distribution}")

    return [Point(x, y) for x, y in coords]


def index_points(points: list[Point]) -> dict[Point, int]:
    """
    Map each point to the index of its first occurrence in the input.
    """
    indices = {}
    for i, p in enumerate(points):
        indices.setdefault(p, i)
    return indices


def hull_edges(hull: list[Point], indices: dict[Point, int]) -> list[tuple[int, int]]:
    edges = [(indices[a], indices[b]) for a, b in zip(hull, hull[1:])]
    if len(hull) > 2:
        edges.append((indices[hull[0]], indices[hull[-1]]))
    return edges


def format_report(hull: list[Point], edges: list[tuple[int, int]]) -> str:
    """
    Number of hull sides followed by one 'i j' line per side.
    A degenerate hull counts as a single side.
    """
    n_sides = len(hull) if len(hull) > 2 else 1
    lines = [str(n_sides)] + [f"{i} {j}" for i, j in edges]
    return "\n".join(lines)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Convex hull of 2D points by Graham scan")
    parser.add_argument("input", nargs="?", help="Point file ('-' for stdin).")
    parser.add_argument("--generate", type=int, metavar="N", help="Generate N random points instead of reading a file.")
    parser.add_argument("--distribution", type=str, default="uniform", choices=DISTRIBUTIONS,
                        help="Distribution of generated points.")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for generated points.")
    parser.add_argument("--plot", type=str, metavar="FILE", help="Save a plot of the hull to FILE.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity.")
    parser.add_argument("--log-file", type=str, help="Also write log to this file.")

    args = parser.parse_args(argv)
    if (args.input is None) == (args.generate is None):
        parser.error("exactly one of input file or --generate is required")
    if args.generate is not None and args.generate < 0:
        parser.error("--generate must be non-negative")
    return args


def save_plot(points: list[Point], hull: list[Point], filename: str):
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from visualization import plot_hull

    fig, ax = plt.subplots(figsize=(8, 8))
    plot_hull(points, hull, ax=ax)
    fig.savefig(filename, dpi=150, bbox_inches='tight')
    plt.close(fig)


def main(argv=None) -> int:
    args = parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    configure_logger(level=level, log_file=args.log_file)

    try:
        if args.generate is not None:
            points = generate_points(args.generate, args.distribution, seed=args.seed)
            logger.info("Generated %d points (%s)", len(points), args.distribution)
        elif args.input == "-":
            points = load_points(sys.stdin)
        else:
            points = load_points(args.input)
            logger.info("Loaded %d points from %s", len(points), os.path.basename(args.input))
    except (PointFileError, OSError) as e:
        logger.error("Failed to load points: %s", e)
        return 1

    indices = index_points(points)
    hull = GrahamScan().compute_hull(points)
    logger.info("Hull has %d vertices", len(hull))

    print(format_report(hull, hull_edges(hull, indices)))

    if args.plot:
        try:
            save_plot(points, hull, args.plot)
        except OSError as e:
            logger.error("Failed to save plot: %s", e)
            return 1
        logger.info("Plot saved to %s", args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
