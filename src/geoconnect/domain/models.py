"""
Domain models (Pydantic).

These types represent the stable "contract" between layers:
- points supplied by the point-management collaborator (`GeoPoint`)
- derived values (`GeoCentroid`, `ConnectionPair`, `DistanceStat`)
- presentation config passed through to the renderer (`ViewConfig`)
- API/CLI input and output (`SnapshotRequest`, `GlobeSnapshot`)

Only hand-typed input (`Coordinate`) is range-checked. `GeoPoint` accepts whatever the
resolver returns, and the math in `geoconnect.core.geo` and `geoconnect.topology`
never validates ranges.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConnectionMode(str, Enum):
    """Which pairs of points get connected."""

    STAR = "STAR"  # every point to the centroid
    MESH = "MESH"  # every unordered pair
    PATH = "PATH"  # each point to its successor


class ConnectionStyle(str, Enum):
    """How the renderer draws a connection. Does not affect which pairs exist."""

    ARC = "ARC"  # great-circle arc above the surface
    STRAIGHT = "STRAIGHT"  # chord through the sphere


class MapStyle(str, Enum):
    DARK = "DARK"
    STREET = "STREET"
    SATELLITE = "SATELLITE"
    BLUE = "BLUE"


class Coordinate(BaseModel):
    """A hand-typed lat/lng pair, range-checked where a user enters it."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class GeoPoint(BaseModel):
    """A named, colored point in decimal degrees.

    Coordinates are not range-checked: resolver output flows through as-is and the
    math stays well-defined (if geographically meaningless) for any real input.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str = Field(..., min_length=1)
    lat: float
    lng: float
    color: str = "#ffffff"

    @field_validator("name")
    @classmethod
    def _strip_name(cls, name: str) -> str:
        name = name.strip()
        if not name:
            raise ValueError("name must not be blank")
        return name


class GeoCentroid(BaseModel):
    """Spherical mean of a point set. Equality is structural."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class ConnectionPair(BaseModel):
    """One link to draw, with the colors of its two endpoints."""

    model_config = ConfigDict(frozen=True)

    start: GeoPoint
    end: GeoPoint | GeoCentroid
    color: str
    secondary_color: str

    @property
    def ends_at_centroid(self) -> bool:
        return isinstance(self.end, GeoCentroid)


class DistanceStat(BaseModel):
    """Great-circle distance for one connection."""

    from_name: str
    to_name: str
    distance_km: float

    @property
    def label(self) -> str:
        return f"{self.from_name} ↔ {self.to_name}"


class ViewConfig(BaseModel):
    """Presentation knobs; opaque to the core and passed through to the renderer."""

    map_style: MapStyle = MapStyle.DARK
    connection_style: ConnectionStyle = ConnectionStyle.ARC
    globe_opacity: float = Field(0.3, ge=0, le=1)
    show_borders: bool = True


class ResolvedLocation(BaseModel):
    """What the external location resolver hands back for a free-text query."""

    lat: float
    lng: float
    name: str = Field(..., min_length=1)


class Segment(BaseModel):
    """Cartesian endpoints of a connection, for straight-line rendering."""

    start: tuple[float, float, float]
    end: tuple[float, float, float]


class SnapshotRequest(BaseModel):
    """API/CLI request: the current points plus the selected mode and view."""

    points: list[GeoPoint] = Field(default_factory=list)
    mode: ConnectionMode = ConnectionMode.STAR
    view: ViewConfig | None = None
    settings_overrides: dict[str, Any] | None = None


class GlobeSnapshot(BaseModel):
    """Everything derived from one (points, mode) state, ready for display."""

    generated_at: datetime
    mode: ConnectionMode
    view: ViewConfig
    points: list[GeoPoint]
    centroid: GeoCentroid | None = None
    connections: list[ConnectionPair] = Field(default_factory=list)
    distances: list[DistanceStat] = Field(default_factory=list)
    segments: list[Segment] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)
