"""
Greedy nearest-neighbour seeding of initial rounds.
"""

import logging
from typing import List, Sequence

import numpy as np

from bureaux_rounds.clustering.common import ClusteringSettings, DEFAULT_SETTINGS
from bureaux_rounds.core_types import Cluster, Point
from bureaux_rounds.utils.distance import distances_from

logger = logging.getLogger(__name__)


def seed_clusters(
    points: Sequence[Point],
    settings: ClusteringSettings = DEFAULT_SETTINGS
) -> List[Cluster]:
    """
    Build initial clusters by growing each one around the first unassigned point.

    The seed takes up to ``max_cluster_size - 1`` of its nearest remaining
    neighbours within ``max_distance``. The result depends on input order.
    """
    remaining = list(points)
    clusters = []

    while remaining:
        seed, remaining = remaining[0], remaining[1:]

        distances = distances_from(seed, remaining)
        in_range = np.flatnonzero(distances <= settings.max_distance)
        # Stable sort keeps input order between equidistant neighbours
        nearest = in_range[np.argsort(distances[in_range], kind='stable')]
        nearest = nearest[:settings.max_cluster_size - 1]

        clusters.append(Cluster(points=[seed, *(remaining[i] for i in nearest)]))

        taken = set(nearest.tolist())
        remaining = [p for i, p in enumerate(remaining) if i not in taken]

    logger.debug(f"Seeded {len(clusters)} clusters from {len(points)} points")
    return clusters
