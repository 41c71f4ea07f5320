"""
Point file loader.

The CLI can read a starting point list from a local JSON file: an array of objects
with `name`, `lat`, `lng` and optionally `id` and `color`. We validate it into typed
Pydantic models so downstream code can assume a consistent shape.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter

from geoconnect.core.env import resolve_project_path
from geoconnect.domain.models import GeoPoint


_POINTS_ADAPTER = TypeAdapter(list[GeoPoint])


def load_points(path: str | Path) -> list[GeoPoint]:
    """Load and validate a point list JSON file (order is preserved)."""
    resolved = resolve_project_path(path)
    payload = json.loads(resolved.read_text(encoding="utf-8"))
    return _POINTS_ADAPTER.validate_python(payload)
