"""
API routes.

Endpoints:
- POST `/api/snapshot`: centroid + connections + distances for a point list.
- GET  `/api/distance`: great-circle distance between two coordinates.
- POST `/api/resolve`: free text -> coordinates via the external resolver.
- GET  `/api/options`: enumerations and default view for UI controls.
- GET  `/api/settings`: public settings for the web UI (secrets redacted).
"""

from __future__ import annotations

from functools import lru_cache
from math import isnan

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from geoconnect.config.settings import get_settings
from geoconnect.core.geo import distance_km
from geoconnect.domain.models import (
    ConnectionMode,
    ConnectionStyle,
    GlobeSnapshot,
    MapStyle,
    ResolvedLocation,
    SnapshotRequest,
)
from geoconnect.globe.snapshot import snapshot_from_request
from geoconnect.ingestion.resolver_client import HttpLocationResolver, LocationResolver

router = APIRouter()


class ResolveRequest(BaseModel):
    text: str


@lru_cache
def _resolver() -> LocationResolver:
    return HttpLocationResolver(get_settings())


@router.post("/api/snapshot", response_model=GlobeSnapshot)
def post_snapshot(request: SnapshotRequest) -> GlobeSnapshot:
    """Derive the globe snapshot for the submitted points and mode."""
    try:
        return snapshot_from_request(request, settings=get_settings())
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={"code": "VALIDATION_ERROR", "message": str(e)},
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail={"code": "INTERNAL_ERROR", "message": str(e)},
        ) from e


@router.get("/api/distance")
def get_distance(
    lat1: float = Query(...),
    lng1: float = Query(...),
    lat2: float = Query(...),
    lng2: float = Query(...),
) -> dict:
    """Return the haversine distance in kilometers between two coordinates (null if undefined)."""
    settings = get_settings()
    km = distance_km(lat1, lng1, lat2, lng2, radius_km=settings.globe.earth_radius_km)
    # JSON has no NaN.
    return {"distance_km": None if isnan(km) else km}


@router.post("/api/resolve", response_model=ResolvedLocation)
def post_resolve(request: ResolveRequest) -> ResolvedLocation:
    """Resolve free text to a location; 404 when nothing matches."""
    location = _resolver().resolve(request.text)
    if location is None:
        raise HTTPException(
            status_code=404,
            detail={"code": "NOT_FOUND", "message": f"Could not find a location for '{request.text}'"},
        )
    return location


@router.get("/api/options")
def get_options() -> dict:
    """Return the selectable modes/styles and the configured default view."""
    settings = get_settings()
    return {
        "modes": [m.value for m in ConnectionMode],
        "connection_styles": [s.value for s in ConnectionStyle],
        "map_styles": [s.value for s in MapStyle],
        "default_view": settings.view.model_dump(mode="json"),
    }


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return safe-to-expose settings for UI defaults (credentials removed)."""
    data = get_settings().model_dump(mode="json")
    resolver = data.get("resolver", {})
    return {
        "app": {"name": data.get("app", {}).get("name", "GeoConnect")},
        "globe": data.get("globe", {}),
        "view": data.get("view", {}),
        "resolver": {"enabled": bool(resolver.get("base_url"))},
    }
