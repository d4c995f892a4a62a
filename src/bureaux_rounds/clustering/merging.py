"""
Fold clusters that are too small into the remaining rounds.
"""

import logging
from typing import List, Optional, Sequence

from bureaux_rounds.clustering.common import ClusteringSettings, DEFAULT_SETTINGS
from bureaux_rounds.core_types import Cluster, Point
from bureaux_rounds.utils.distance import max_pairwise_distance
from bureaux_rounds.utils.logging import Symbols

logger = logging.getLogger(__name__)


def merge_small_clusters(
    clusters: Sequence[Cluster],
    settings: ClusteringSettings = DEFAULT_SETTINGS
) -> List[Cluster]:
    """
    Reassign every point of an undersized cluster to a full-sized one.

    Each orphan point goes to the cluster whose spread stays smallest once the
    point is added, as long as it stays within ``max_distance``. When no
    cluster can take it, the point is appended to the first cluster anyway and
    that cluster is marked ``forced``. With no full-sized cluster at all, the
    orphan starts a new one that later orphans may join.
    """
    big = [c for c in clusters if len(c) >= settings.min_cluster_size]
    orphans = [p for c in clusters if len(c) < settings.min_cluster_size for p in c]

    for point in orphans:
        target = _best_fit(big, point, settings)
        if target is not None:
            target.append(point)
        elif big:
            # TODO: decide whether out-of-range orphans should stay alone instead of being forced in
            logger.warning(
                f"{Symbols.WARN} No round within {settings.max_distance:.0f} m for station "
                f"{point.objectid} ({point.adresse}, {point.cp}); "
                f"forcing it into the first round"
            )
            big[0].append(point)
            big[0].forced = True
        else:
            big.append(Cluster(points=[point]))

    return big


def _best_fit(clusters: Sequence[Cluster], point: Point, settings: ClusteringSettings) -> Optional[Cluster]:
    """Cluster with the smallest spread after adding ``point``, within the distance limit."""
    best = None
    best_spread = float('inf')
    for cluster in clusters:
        spread = max_pairwise_distance(cluster.with_point(point))
        if spread <= settings.max_distance and spread < best_spread:
            best = cluster
            best_spread = spread
    return best
