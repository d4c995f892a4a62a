"""
Enforce the maximum round spread by splitting clusters that are too wide.
"""

import logging
from collections import deque
from typing import List, Sequence

from bureaux_rounds.clustering.common import ClusteringSettings, DEFAULT_SETTINGS
from bureaux_rounds.core_types import Cluster, Point
from bureaux_rounds.utils.distance import farthest_pair, max_pairwise_distance

logger = logging.getLogger(__name__)


def fits_within_distance(points: Sequence[Point], settings: ClusteringSettings) -> bool:
    """Check that no two points are further apart than the distance limit."""
    return max_pairwise_distance(points) <= settings.max_distance


def validate_and_split(
    clusters: Sequence[Cluster],
    settings: ClusteringSettings = DEFAULT_SETTINGS
) -> List[Cluster]:
    """
    Split clusters until every cluster of at least ``min_cluster_size`` points
    fits within ``max_distance``.

    Clusters are processed first-in first-out. A cluster that is too spread
    loses the later point of its farthest pair; that point joins the first
    validated cluster it fits in, or goes back on the queue on its own.

    Args:
        clusters: Clusters to check, in processing order
        settings: Size and distance limits

    Returns:
        List of validated clusters, possibly including clusters smaller than
        ``min_cluster_size``
    """
    queue = deque(clusters)
    result: List[Cluster] = []
    split_count = 0

    while queue:
        cluster = queue.popleft()

        if len(cluster) < settings.min_cluster_size:
            result.append(cluster)
            continue

        if fits_within_distance(cluster.points, settings):
            result.append(cluster)
            continue

        split_count += 1
        i, j, spread = farthest_pair(cluster.points)
        moved_index = max(i, j)
        moved = cluster[moved_index]
        remainder = cluster.without(moved_index)
        logger.debug(
            f"Splitting cluster of size {len(cluster)} (spread {spread:.0f} m): "
            f"moving station {moved.objectid}"
        )

        if len(remainder) >= settings.min_cluster_size:
            queue.append(remainder)
        else:
            result.append(remainder)

        target = _first_accepting(result, moved, settings)
        if target is not None:
            target.append(moved)
        else:
            queue.append(Cluster(points=[moved]))

    if split_count:
        logger.debug(f"Performed {split_count} splits, {len(result)} clusters remain")

    return result


def _first_accepting(clusters: Sequence[Cluster], point: Point, settings: ClusteringSettings):
    """First cluster that stays within the distance limit once ``point`` is added."""
    for cluster in clusters:
        if fits_within_distance(cluster.with_point(point), settings):
            return cluster
    return None
