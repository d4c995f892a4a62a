"""
Round generation for every postal code: seeding, splitting, then merging.
"""

import logging
from collections import Counter
from typing import Dict, List, Mapping, Sequence

from bureaux_rounds.clustering.common import ClusteringSettings, DEFAULT_SETTINGS
from bureaux_rounds.clustering.merging import merge_small_clusters
from bureaux_rounds.clustering.seeding import seed_clusters
from bureaux_rounds.clustering.splitting import validate_and_split
from bureaux_rounds.core_types import Cluster, Point
from bureaux_rounds.utils.logging import Symbols

logger = logging.getLogger(__name__)


def cluster_group(
    points: Sequence[Point],
    settings: ClusteringSettings = DEFAULT_SETTINGS
) -> List[Cluster]:
    """Build the rounds of a single postal code."""
    seeded = seed_clusters(points, settings)
    validated = validate_and_split(seeded, settings)
    return merge_small_clusters(validated, settings)


def cluster_all_groups(
    groups: Mapping[str, Sequence[Point]],
    settings: ClusteringSettings = DEFAULT_SETTINGS
) -> Dict[str, List[Cluster]]:
    """
    Build rounds for each postal code, one group at a time.

    Args:
        groups: Postal code to deduplicated points, as returned by ``build_groups``
        settings: Size and distance limits

    Returns:
        Dict mapping each postal code to its rounds, in the order of ``groups``
    """
    logger.info("--- Starting Round Generation ---")
    clusters_by_cp = {}
    forced_count = 0

    for cp, points in groups.items():
        clusters = cluster_group(points, settings)
        validate_cluster_coverage(cp, points, clusters)
        forced_count += sum(1 for c in clusters if c.forced)
        clusters_by_cp[cp] = clusters

    total = sum(len(clusters) for clusters in clusters_by_cp.values())
    if forced_count:
        logger.warning(f"{Symbols.WARN} {forced_count} rounds exceed {settings.max_distance:.0f} m after forced merges")
    logger.info(f"{Symbols.CHECK} Generated {total} rounds for {len(clusters_by_cp)} postal codes")

    return clusters_by_cp


def validate_cluster_coverage(cp: str, points: Sequence[Point], clusters: Sequence[Cluster]) -> bool:
    """Check that every point of the group is in exactly one round."""
    counts = Counter(id(p) for c in clusters for p in c)
    expected = {id(p) for p in points}
    missing = [p.objectid for p in points if counts[id(p)] == 0]
    duplicated = [p.objectid for p in points if counts[id(p)] > 1]
    unknown = set(counts) - expected

    if missing or duplicated or unknown:
        logger.warning(
            f"Postal code {cp}: {len(missing)} stations missing, {len(duplicated)} duplicated, "
            f"{len(unknown)} unexpected: {(missing + duplicated)[:5]}..."
        )
        return False
    return True
