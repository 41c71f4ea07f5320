"""
Ordered point bookkeeping.

`PointCollection` is the authoritative, caller-owned list of points. It only does
add/remove and color assignment; everything derived from the list (centroid,
connections, distances) is recomputed by `geoconnect.globe.snapshot`.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from geoconnect.config.settings import DEFAULT_PALETTE
from geoconnect.domain.models import GeoPoint, ResolvedLocation
from geoconnect.ingestion.resolver_client import LocationResolver

logger = logging.getLogger(__name__)


class PointCollection:
    def __init__(self, points: Iterable[GeoPoint] = (), *, palette: Sequence[str] | None = None):
        self._palette = list(DEFAULT_PALETTE if palette is None else palette)
        if not self._palette:
            raise ValueError("palette must contain at least one color")
        self._points: list[GeoPoint] = list(points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[GeoPoint]:
        return iter(tuple(self._points))

    @property
    def points(self) -> tuple[GeoPoint, ...]:
        """Immutable view of the current list, in insertion order."""
        return tuple(self._points)

    def next_color(self) -> str:
        # Colors cycle by current size, so a removal can make two points share a color.
        return self._palette[len(self._points) % len(self._palette)]

    def add(self, name: str, lat: float, lng: float) -> GeoPoint:
        """Create a point with a fresh id and the next palette color and append it."""
        point = GeoPoint(name=name, lat=lat, lng=lng, color=self.next_color())
        self._points.append(point)
        logger.debug("Added point id=%s name=%r (%.4f, %.4f)", point.id, point.name, point.lat, point.lng)
        return point

    def append(self, point: GeoPoint) -> GeoPoint:
        """Append an existing point, giving it the next palette color if it has none of its own."""
        if "color" not in point.model_fields_set:
            point = point.model_copy(update={"color": self.next_color()})
        self._points.append(point)
        return point

    def add_resolved(self, location: ResolvedLocation) -> GeoPoint:
        return self.add(location.name, location.lat, location.lng)

    def remove(self, point_id: str) -> bool:
        """Remove a point by id. Returns False if no such point exists."""
        before = len(self._points)
        self._points = [p for p in self._points if p.id != point_id]
        return len(self._points) != before


def add_from_text(collection: PointCollection, resolver: LocationResolver, text: str) -> GeoPoint | None:
    """Resolve `text` and append the result; None (and no change) if nothing resolves."""
    if not text.strip():
        return None
    location = resolver.resolve(text)
    if location is None:
        return None
    return collection.add_resolved(location)
