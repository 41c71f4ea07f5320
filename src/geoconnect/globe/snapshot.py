from __future__ import annotations

# This module is the "orchestrator" for the derived-data pipeline.
# It wires together:
# - domain input (points + connection mode + view config)
# - the spherical centroid
# - connection topology
# - per-connection great-circle distances
#
# Design goal:
# - Recompute everything on every call. Point counts are small and human-entered,
#   so there is no cache and no incremental update to get wrong.

import logging
import time
from datetime import datetime, timezone
from typing import Any, Mapping, Sequence

from geoconnect.config.overrides import apply_settings_overrides  # Safely applies per-request config overrides.
from geoconnect.config.settings import Settings, get_settings  # Loads typed settings from YAML (and env overrides).
from geoconnect.core.geo import to_cartesian
from geoconnect.domain.models import (
    ConnectionMode,
    ConnectionPair,
    ConnectionStyle,
    GeoPoint,
    GlobeSnapshot,
    Segment,
    SnapshotRequest,
    ViewConfig,
)
from geoconnect.topology.centroid import calculate_centroid
from geoconnect.topology.connections import connection_distances, generate_connections

logger = logging.getLogger(__name__)


def _straight_segments(connections: Sequence[ConnectionPair], *, radius: float) -> list[Segment]:
    # Straight connections are drawn as chords, so the renderer needs both endpoints in 3D.
    out: list[Segment] = []
    for conn in connections:
        start = to_cartesian(conn.start.lat, conn.start.lng, radius)
        end = to_cartesian(conn.end.lat, conn.end.lng, radius)
        out.append(Segment(start=start.as_tuple(), end=end.as_tuple()))
    return out


def build_snapshot(
    points: Sequence[GeoPoint],
    mode: ConnectionMode,
    *,
    view: ViewConfig | None = None,
    settings: Settings | None = None,
    settings_overrides: Mapping[str, Any] | None = None,
) -> GlobeSnapshot:
    """Derive centroid, connections and distances for the current point list.

    Raises:
        ValueError: If `settings_overrides` contains disallowed keys or invalid values.
    """
    started = time.perf_counter()
    # Start from the shared settings, then apply any safe per-request tuning on a copy.
    settings = apply_settings_overrides(settings or get_settings(), settings_overrides)
    # An explicit view wins; otherwise the configured default view is used.
    view = view or settings.view
    points = list(points)
    mode = ConnectionMode(mode)

    centroid = calculate_centroid(points)
    connections = generate_connections(points, mode, centroid, centroid_color=settings.globe.centroid_color)
    distances = connection_distances(
        connections,
        centroid_label=settings.globe.centroid_label,
        radius_km=settings.globe.earth_radius_km,
    )
    # Connection style never changes which pairs exist, only what the renderer needs to draw them.
    segments = (
        _straight_segments(connections, radius=settings.globe.radius)
        if view.connection_style is ConnectionStyle.STRAIGHT
        else []
    )

    compute_ms = int((time.perf_counter() - started) * 1000)
    logger.debug(
        "Built snapshot mode=%s points=%d connections=%d in %dms",
        mode.value,
        len(points),
        len(connections),
        compute_ms,
    )

    return GlobeSnapshot(
        generated_at=datetime.now(timezone.utc),
        mode=mode,
        view=view,
        points=points,
        centroid=centroid,
        connections=connections,
        distances=distances,
        segments=segments,
        meta={
            "point_count": len(points),
            "connection_count": len(connections),
            "compute_ms": compute_ms,
        },
    )


def snapshot_from_request(request: SnapshotRequest, *, settings: Settings | None = None) -> GlobeSnapshot:
    """Convenience wrapper used by the API and CLI."""
    return build_snapshot(
        request.points,
        request.mode,
        view=request.view,
        settings=settings,
        settings_overrides=request.settings_overrides,
    )
