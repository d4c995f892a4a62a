"""
Settings shared by every clustering stage.
"""

import math
from dataclasses import dataclass

from bureaux_rounds.config.parameters import Parameters

MIN_CLUSTER_SIZE = 2
MAX_CLUSTER_SIZE = 6
MAX_DISTANCE = 1000.0  # meters


@dataclass(frozen=True)
class ClusteringSettings:
    """Size and spread limits for a round of stations."""
    min_cluster_size: int = MIN_CLUSTER_SIZE
    max_cluster_size: int = MAX_CLUSTER_SIZE
    max_distance: float = MAX_DISTANCE

    def __post_init__(self):
        if not isinstance(self.min_cluster_size, int) or self.min_cluster_size <= 0:
            raise ValueError(
                f"min_cluster_size must be a positive integer. Got: {self.min_cluster_size}"
            )
        if not isinstance(self.max_cluster_size, int) or self.max_cluster_size < self.min_cluster_size:
            raise ValueError(
                f"max_cluster_size must be an integer >= min_cluster_size. "
                f"Got: min_cluster_size={self.min_cluster_size}, max_cluster_size={self.max_cluster_size}"
            )
        if (not isinstance(self.max_distance, (int, float))
                or not math.isfinite(self.max_distance) or self.max_distance <= 0):
            raise ValueError(
                f"max_distance must be a positive, finite number of meters. Got: {self.max_distance}"
            )

    @classmethod
    def from_parameters(cls, params: Parameters) -> 'ClusteringSettings':
        """Build settings from the ``clustering`` section of the parameters."""
        return cls(
            min_cluster_size=params.clustering['min_cluster_size'],
            max_cluster_size=params.clustering['max_cluster_size'],
            max_distance=float(params.clustering['max_distance'])
        )


DEFAULT_SETTINGS = ClusteringSettings()
