"""
Geospatial helpers.

Angle conversion, sphere-to-Cartesian projection and great-circle distance. These
are plain float functions so the topology layer and the renderer can share them
without pulling in heavier GIS dependencies.

None of these functions validate coordinate ranges; out-of-range input produces a
well-defined (if geographically meaningless) result.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, isnan, pi, sin, sqrt

EARTH_RADIUS_KM = 6371.0

# Sphere radius used by the globe renderer.
DEFAULT_GLOBE_RADIUS = 100.0


@dataclass(frozen=True)
class CartesianPoint:
    """A point in the renderer's 3D space (y is "up")."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


def degrees_to_radians(deg: float) -> float:
    return deg * pi / 180


def radians_to_degrees(rad: float) -> float:
    return rad * 180 / pi


def to_cartesian(lat: float, lng: float, radius: float = DEFAULT_GLOBE_RADIUS) -> CartesianPoint:
    """Project a lat/lng pair onto a sphere of `radius`.

    Uses polar angle `phi = 90 - lat` and azimuth `theta = lng + 180`, which puts
    latitude 90 on +y and lines longitude 0 up with the renderer's reference
    meridian. Any consumer drawing these points must use the same convention.
    """
    phi = degrees_to_radians(90 - lat)
    theta = degrees_to_radians(lng + 180)

    x = -(radius * sin(phi) * cos(theta))
    y = radius * cos(phi)
    z = radius * sin(phi) * sin(theta)
    return CartesianPoint(x=x, y=y, z=z)


def distance_km(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    *,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Compute great-circle (haversine) distance in kilometers between two points."""
    dlat = degrees_to_radians(lat2 - lat1)
    dlng = degrees_to_radians(lng2 - lng1)

    a = sin(dlat / 2) ** 2 + cos(degrees_to_radians(lat1)) * cos(degrees_to_radians(lat2)) * sin(dlng / 2) ** 2
    # Rounding can push `a` a hair outside [0, 1] for near-antipodal pairs; NaN passes through.
    if not isnan(a):
        a = min(1.0, max(0.0, a))
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return radius_km * c
