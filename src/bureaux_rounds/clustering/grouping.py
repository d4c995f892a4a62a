"""
Partition raw station records by postal code.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from bureaux_rounds.core_types import Point, UNKNOWN_POSTAL_CODE

logger = logging.getLogger(__name__)


def resolve_postal_code(record: Mapping[str, Any], unknown: str = UNKNOWN_POSTAL_CODE) -> Any:
    """Postal code from ``cp``, falling back to ``code_postal`` then ``unknown``.

    The value is returned as found in the record; callers key groups on its
    string form so that ``75001`` and ``"75001"`` share a group.
    """
    return record.get('cp') or record.get('code_postal') or unknown


def resolve_coordinates(record: Mapping[str, Any]) -> Optional[Tuple[float, float]]:
    """(lat, lon) from the nested ``geo_point_2d`` field, or None when incomplete."""
    geo = record.get('geo_point_2d')
    if not isinstance(geo, Mapping):
        return None
    lat = geo.get('lat')
    lon = geo.get('lon')
    if lat is None or lon is None:
        return None
    return float(lat), float(lon)


def build_groups(
    records: Iterable[Mapping[str, Any]],
    unknown_postal_code: str = UNKNOWN_POSTAL_CODE
) -> Dict[str, List[Point]]:
    """
    Group station records by postal code and drop repeated addresses.

    Records without both coordinates are skipped. Within a postal code only
    the first record of each ``adresse`` is kept. Postal codes keep the order
    in which they first appear.

    Args:
        records: Raw station records as parsed from the input document
        unknown_postal_code: Postal code for records with neither ``cp`` nor ``code_postal``

    Returns:
        Dict mapping postal code to its deduplicated points
    """
    by_cp: Dict[str, List[Point]] = {}
    skipped = 0

    for record in records:
        cp = resolve_postal_code(record, unknown_postal_code)
        coords = resolve_coordinates(record)
        if coords is None:
            skipped += 1
            continue
        lat, lon = coords
        by_cp.setdefault(str(cp), []).append(Point.from_record(record, cp=cp, lat=lat, lon=lon))

    if skipped:
        logger.debug(f"Skipped {skipped} records without coordinates")

    groups = {cp: _dedupe_by_address(points) for cp, points in by_cp.items()}

    total_before = sum(len(points) for points in by_cp.values())
    total_after = sum(len(points) for points in groups.values())
    if total_after < total_before:
        logger.info(f"Removed {total_before - total_after} stations with a repeated address")
    logger.info(f"Grouped {total_after} stations into {len(groups)} postal codes")

    return groups


def _dedupe_by_address(points: List[Point]) -> List[Point]:
    """Keep the first point of each address."""
    seen = set()
    unique = []
    for point in points:
        if point.adresse in seen:
            continue
        seen.add(point.adresse)
        unique.append(point)
    return unique
