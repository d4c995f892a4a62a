import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict
import yaml

DEFAULT_CLUSTERING = {
    'min_cluster_size': 2,
    'max_cluster_size': 6,
    'max_distance': 1000.0,
}


@dataclass
class Parameters:
    """Configuration parameters for a clustering run"""
    input_file: str
    output_dir: str
    clustering: Dict = field(default_factory=lambda: dict(DEFAULT_CLUSTERING))
    clusters_file: str = 'clusters_by_cp.json'
    routes_file: str = 'trajets_by_cp.txt'
    summary_file: str = 'summary_by_cp.csv'
    summary_preview: int = 10
    unknown_postal_code: str = 'unknown'

    @classmethod
    def from_yaml(cls, path: Path | str = None) -> 'Parameters':
        """Load parameters from YAML file"""
        if path is None:
            path = Path(__file__).parent / 'default_config.yaml'

        with open(path) as f:
            data = yaml.safe_load(f)
            return cls(**data)

    @property
    def clusters_path(self) -> Path:
        return Path(self.output_dir) / self.clusters_file

    @property
    def routes_path(self) -> Path:
        return Path(self.output_dir) / self.routes_file

    @property
    def summary_path(self) -> Path:
        return Path(self.output_dir) / self.summary_file

    def __post_init__(self):
        """Validate parameters after initialization"""
        # Missing clustering keys fall back to the defaults
        self.clustering = {**DEFAULT_CLUSTERING, **(self.clustering or {})}

        min_size = self.clustering['min_cluster_size']
        max_size = self.clustering['max_cluster_size']
        max_distance = self.clustering['max_distance']

        if not isinstance(min_size, int) or min_size <= 0:
            raise ValueError(
                f"min_cluster_size must be a positive integer. Got: {min_size}"
            )

        if not isinstance(max_size, int) or max_size < min_size:
            raise ValueError(
                f"max_cluster_size must be an integer >= min_cluster_size. "
                f"Got: min_cluster_size={min_size}, max_cluster_size={max_size}"
            )

        if (not isinstance(max_distance, (int, float))
                or not math.isfinite(max_distance) or max_distance <= 0):
            raise ValueError(
                f"max_distance must be a positive, finite number of meters. Got: {max_distance}"
            )

        if not isinstance(self.summary_preview, int) or self.summary_preview < 0:
            raise ValueError(
                f"summary_preview must be a non-negative integer. Got: {self.summary_preview}"
            )
