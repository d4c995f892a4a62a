"""
Core data types shared by the grouping and clustering stages.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

UNKNOWN_POSTAL_CODE = 'unknown'

# Fields kept on every serialized station, in output order.
POINT_FIELDS = ('objectid', 'id_bv', 'num_bv', 'lib', 'adresse', 'cp', 'lat', 'lon')


@dataclass(frozen=True)
class Point:
    """A voting station (bureau de vote) with its geographic coordinates."""
    objectid: Any
    id_bv: Any
    num_bv: Any
    lib: Optional[str]
    adresse: Optional[str]
    cp: Any
    lat: float
    lon: float

    @property
    def coordinates(self) -> tuple:
        return (self.lat, self.lon)

    def to_dict(self) -> Dict[str, Any]:
        """Convert point to dictionary format."""
        return {name: getattr(self, name) for name in POINT_FIELDS}

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        cp: Any,
        lat: float,
        lon: float
    ) -> 'Point':
        """Create a point from a raw station record and its resolved location."""
        return cls(
            objectid=record.get('objectid'),
            id_bv=record.get('id_bv'),
            num_bv=record.get('num_bv'),
            lib=record.get('lib'),
            adresse=record.get('adresse'),
            cp=cp,
            lat=lat,
            lon=lon
        )


@dataclass
class Cluster:
    """An ordered group of stations meant to be visited in a single round.

    ``forced`` is set when a point was appended without respecting the
    distance bound (merge fallback).
    """
    points: List[Point] = field(default_factory=list)
    forced: bool = False

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def append(self, point: Point) -> None:
        self.points.append(point)

    def with_point(self, point: Point) -> List[Point]:
        """Return the cluster's points with ``point`` appended, leaving the cluster untouched."""
        return [*self.points, point]

    def without(self, index: int) -> 'Cluster':
        """Return a new cluster without the point at ``index``."""
        return Cluster(
            points=[p for i, p in enumerate(self.points) if i != index],
            forced=self.forced
        )

    def to_list(self) -> List[Dict[str, Any]]:
        """Convert cluster to a list of point dictionaries."""
        return [point.to_dict() for point in self.points]
