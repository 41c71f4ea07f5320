"""
Spherical centroid of a point set.

A naive mean of lat/lng pairs breaks across the ±180° seam and near the poles, so
we average unit vectors in Cartesian space and project the mean back onto the
sphere instead.
"""

from __future__ import annotations

from math import atan2, cos, hypot, sin
from typing import Protocol, Sequence

from geoconnect.core.geo import degrees_to_radians, radians_to_degrees
from geoconnect.domain.models import GeoCentroid


class HasLatLng(Protocol):
    lat: float
    lng: float


def calculate_centroid(points: Sequence[HasLatLng]) -> GeoCentroid | None:
    """Return the spherical mean of `points`, or None for an empty sequence.

    A single point is returned unchanged to avoid trigonometric round-off. The mean
    vector is not renormalized before projection; atan2 is scale-invariant.
    Antipodal inputs give a near-zero mean vector and an unspecified (but finite)
    result.
    """
    if not points:
        return None
    if len(points) == 1:
        return GeoCentroid(lat=points[0].lat, lng=points[0].lng)

    x = y = z = 0.0
    for p in points:
        lat = degrees_to_radians(p.lat)
        lng = degrees_to_radians(p.lng)
        x += cos(lat) * cos(lng)
        y += cos(lat) * sin(lng)
        z += sin(lat)

    total = len(points)
    x /= total
    y /= total
    z /= total

    central_lng = atan2(y, x)
    central_lat = atan2(z, hypot(x, y))
    return GeoCentroid(lat=radians_to_degrees(central_lat), lng=radians_to_degrees(central_lng))
