"""Great-circle distances between stations, in meters."""
from typing import Sequence, Tuple

import numpy as np
from haversine import haversine, haversine_vector, Unit

from bureaux_rounds.core_types import Point

# Spherical Earth radius used for every distance in the pipeline.
EARTH_RADIUS_M = 6_371_000.0


def haversine_distance(a: Point, b: Point) -> float:
    """Haversine distance between two points in meters."""
    # Unit.RADIANS yields the central angle, independent of the library's own radius
    return EARTH_RADIUS_M * haversine(a.coordinates, b.coordinates, unit=Unit.RADIANS)


def distances_from(origin: Point, points: Sequence[Point]) -> np.ndarray:
    """Distances in meters from ``origin`` to each of ``points``."""
    if not points:
        return np.empty(0)
    targets = np.array([p.coordinates for p in points], dtype=float)
    distances = haversine_vector(origin.coordinates, targets, unit=Unit.RADIANS, comb=True)
    return EARTH_RADIUS_M * distances.flatten()


def pairwise_distances(points: Sequence[Point]) -> np.ndarray:
    """Symmetric ``n x n`` matrix of distances in meters."""
    n = len(points)
    if n < 2:
        return np.zeros((n, n))
    coords = np.array([p.coordinates for p in points], dtype=float)
    return EARTH_RADIUS_M * haversine_vector(coords, coords, unit=Unit.RADIANS, comb=True)


def max_pairwise_distance(points: Sequence[Point]) -> float:
    """Largest distance between any two points; 0 for fewer than two points."""
    if len(points) < 2:
        return 0.0
    rows, cols = np.triu_indices(len(points), k=1)
    return float(pairwise_distances(points)[rows, cols].max())


def farthest_pair(points: Sequence[Point]) -> Tuple[int, int, float]:
    """
    Find the pair of points furthest apart.

    Pairs are scanned as ``(i, j)`` with ``i < j`` in row-major order and the
    first maximal pair wins ties.

    Returns:
        tuple: (i, j, distance) with ``i < j``
    """
    if len(points) < 2:
        raise ValueError(f"Need at least two points to find a pair, got {len(points)}")
    rows, cols = np.triu_indices(len(points), k=1)
    upper = pairwise_distances(points)[rows, cols]
    k = int(np.argmax(upper))
    return int(rows[k]), int(cols[k]), float(upper[k])
