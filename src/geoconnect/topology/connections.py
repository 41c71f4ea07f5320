"""
Connection topology.

Turns (points, mode, centroid) into the list of pairs to draw:
- STAR: each point to the centroid
- MESH: every unordered pair, in index order
- PATH: each point to its successor

Every mode is total over every list size; "nothing to draw" is an empty list.
Output order only depends on input order, so identical inputs render identically.
"""

from __future__ import annotations

from typing import Sequence

from geoconnect.core.geo import EARTH_RADIUS_KM, distance_km
from geoconnect.domain.models import ConnectionMode, ConnectionPair, DistanceStat, GeoCentroid, GeoPoint

# Reserved highlight color for the centroid endpoint.
CENTROID_COLOR = "#00ffff"
CENTROID_LABEL = "Center"


def _link(start: GeoPoint, end: GeoPoint | GeoCentroid, secondary_color: str) -> ConnectionPair:
    return ConnectionPair(start=start, end=end, color=start.color, secondary_color=secondary_color)


def generate_connections(
    points: Sequence[GeoPoint],
    mode: ConnectionMode,
    centroid: GeoCentroid | None,
    *,
    centroid_color: str = CENTROID_COLOR,
) -> list[ConnectionPair]:
    """Build the connection pairs for `mode`.

    STAR with a single point yields one zero-length pair (the centroid equals the
    point). MESH grows as n*(n-1)/2 and is not capped.
    """
    mode = ConnectionMode(mode)
    items: list[ConnectionPair] = []

    if mode is ConnectionMode.STAR:
        if centroid is None or not points:
            return items
        for p in points:
            items.append(_link(p, centroid, centroid_color))
    elif mode is ConnectionMode.MESH:
        for i in range(len(points)):
            for j in range(i + 1, len(points)):
                items.append(_link(points[i], points[j], points[j].color))
    elif mode is ConnectionMode.PATH:
        for i in range(len(points) - 1):
            items.append(_link(points[i], points[i + 1], points[i + 1].color))
    return items


def connection_distances(
    connections: Sequence[ConnectionPair],
    *,
    centroid_label: str = CENTROID_LABEL,
    radius_km: float = EARTH_RADIUS_KM,
) -> list[DistanceStat]:
    """Great-circle distance for each connection, in connection order."""
    out: list[DistanceStat] = []
    for conn in connections:
        end_name = centroid_label if conn.ends_at_centroid else conn.end.name  # type: ignore[union-attr]
        out.append(
            DistanceStat(
                from_name=conn.start.name,
                to_name=end_name,
                distance_km=distance_km(
                    conn.start.lat, conn.start.lng, conn.end.lat, conn.end.lng, radius_km=radius_km
                ),
            )
        )
    return out
