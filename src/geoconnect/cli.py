"""
GeoConnect CLI entrypoint.

This CLI is intended for quick local checks without a globe frontend.
It delegates all derivation logic to `geoconnect.globe.snapshot.build_snapshot`.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from pydantic import ValidationError

from geoconnect.catalog.loader import load_points
from geoconnect.config.settings import get_settings
from geoconnect.core.geo import distance_km
from geoconnect.core.logging import configure_logging
from geoconnect.domain.models import ConnectionMode, ConnectionStyle, Coordinate
from geoconnect.globe.explain import distance_lines, one_line_summary
from geoconnect.globe.points import PointCollection
from geoconnect.globe.snapshot import build_snapshot
from geoconnect.ingestion.resolver_client import HttpLocationResolver


def _parse_point_arg(value: str) -> tuple[str, float, float]:
    """Parse a `NAME=LAT,LNG` CLI argument; coordinates must be in range."""
    if "=" not in value:
        raise ValueError(f"Invalid --point '{value}', expected NAME=LAT,LNG")
    name, coords = value.rsplit("=", 1)
    parts = coords.split(",")
    if len(parts) != 2:
        raise ValueError(f"Invalid --point '{value}', expected NAME=LAT,LNG")
    try:
        coord = Coordinate(lat=float(parts[0]), lng=float(parts[1]))
    except ValidationError as e:
        raise ValueError(f"Invalid --point '{value}': " + "; ".join(err["msg"] for err in e.errors())) from e
    except ValueError as e:
        raise ValueError(f"Invalid --point '{value}', expected NAME=LAT,LNG") from e
    if not name.strip():
        raise ValueError(f"Invalid --point '{value}', name must not be blank")
    return name.strip(), coord.lat, coord.lng


def _cmd_snapshot(args: argparse.Namespace) -> int:
    """Handle the `snapshot` subcommand."""
    settings = get_settings()
    collection = PointCollection(palette=settings.globe.palette)

    try:
        if args.points_file:
            for point in load_points(args.points_file):
                collection.append(point)
        for raw in args.point:
            name, lat, lng = _parse_point_arg(raw)
            collection.add(name, lat, lng)
    except (OSError, ValueError) as e:
        print(f"geoconnect snapshot: error: {e}", file=sys.stderr)
        return 2

    view = settings.view
    if args.style:
        view = view.model_copy(update={"connection_style": ConnectionStyle(args.style)})

    snapshot = build_snapshot(collection.points, ConnectionMode(args.mode), view=view, settings=settings)

    if args.json:
        print(json.dumps(snapshot.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    print(one_line_summary(snapshot))
    for line in distance_lines(snapshot):
        print(f"  - {line}")
    return 0


def _cmd_distance(args: argparse.Namespace) -> int:
    settings = get_settings()
    km = distance_km(args.lat1, args.lng1, args.lat2, args.lng2, radius_km=settings.globe.earth_radius_km)
    print(f"{km:.3f}")
    return 0


def _cmd_resolve(args: argparse.Namespace) -> int:
    resolver = HttpLocationResolver(get_settings())
    location = resolver.resolve(args.text)
    if location is None:
        print("Could not find that location. Please try being more specific.", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(location.model_dump(mode="json"), ensure_ascii=False))
    else:
        print(f"{location.name}={location.lat},{location.lng}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the GeoConnect CLI."""
    parser = argparse.ArgumentParser(prog="geoconnect")
    parser.add_argument("--log-level", default=None, help="Override GEOCONNECT_LOG_LEVEL for this run.")
    sub = parser.add_subparsers(dest="command", required=True)

    snap = sub.add_parser("snapshot", help="Centroid, connections and distances for a list of points.")
    snap.add_argument("--point", action="append", default=[], help="Repeatable: NAME=LAT,LNG (in order).")
    snap.add_argument("--points-file", default=None, help="JSON array of points, loaded before --point values.")
    snap.add_argument("--mode", choices=[m.value for m in ConnectionMode], default=ConnectionMode.STAR.value)
    snap.add_argument("--style", choices=[s.value for s in ConnectionStyle], default=None)
    snap.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    snap.set_defaults(func=_cmd_snapshot)

    dist = sub.add_parser("distance", help="Great-circle distance in km between two coordinates.")
    dist.add_argument("lat1", type=float)
    dist.add_argument("lng1", type=float)
    dist.add_argument("lat2", type=float)
    dist.add_argument("lng2", type=float)
    dist.set_defaults(func=_cmd_distance)

    res = sub.add_parser("resolve", help="Resolve free text to coordinates via the configured resolver.")
    res.add_argument("text")
    res.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    res.set_defaults(func=_cmd_resolve)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m geoconnect.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
