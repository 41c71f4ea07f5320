"""
Small text formatting helpers.

Used by the CLI to print compact summaries of a snapshot.
"""

from __future__ import annotations

from geoconnect.domain.models import GlobeSnapshot


def one_line_summary(snapshot: GlobeSnapshot) -> str:
    """Render a compact single-line summary for a snapshot."""
    parts = [f"mode={snapshot.mode.value}", f"points={len(snapshot.points)}"]
    if snapshot.centroid is None:
        parts.append("centroid=none")
    else:
        parts.append(f"centroid=({snapshot.centroid.lat:.4f}, {snapshot.centroid.lng:.4f})")
    parts.append(f"connections={len(snapshot.connections)}")
    return " | ".join(parts)


def distance_lines(snapshot: GlobeSnapshot) -> list[str]:
    """One `A ↔ B: 1,234.5 km` line per connection."""
    return [f"{d.label}: {d.distance_km:,.1f} km" for d in snapshot.distances]
