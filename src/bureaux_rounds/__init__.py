"""
Voting-station round planning.

Groups voting stations by postal code and splits each group into small
rounds of nearby stations that can be visited in a single trip.
"""

from bureaux_rounds.clustering import (
    ClusteringSettings,
    build_groups,
    cluster_all_groups,
    cluster_group,
)
from bureaux_rounds.config import Parameters
from bureaux_rounds.core_types import Cluster, Point
from bureaux_rounds.utils.distance import haversine_distance

__version__ = "0.1.0"

__all__ = [
    "Cluster",
    "ClusteringSettings",
    "Parameters",
    "Point",
    "build_groups",
    "cluster_all_groups",
    "cluster_group",
    "haversine_distance",
]
