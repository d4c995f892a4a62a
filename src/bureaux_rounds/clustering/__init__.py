"""
clustering module

This module groups voting stations by postal code and builds the rounds of
each group: greedy seeding, splitting of rounds that are too spread, and
merging of rounds that are too small.
"""

from .common import (
    ClusteringSettings,
    DEFAULT_SETTINGS,
)

from .grouping import build_groups

from .seeding import seed_clusters

from .splitting import validate_and_split

from .merging import merge_small_clusters

from .generator import (
    cluster_all_groups,
    cluster_group,
    validate_cluster_coverage,
)

__all__ = [
    'ClusteringSettings',
    'DEFAULT_SETTINGS',
    'build_groups',
    'cluster_all_groups',
    'cluster_group',
    'merge_small_clusters',
    'seed_clusters',
    'validate_and_split',
    'validate_cluster_coverage',
]
