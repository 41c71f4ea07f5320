import math

from geoconnect.config.settings import DEFAULT_PALETTE
from geoconnect.domain.models import ConnectionMode, GeoPoint, ResolvedLocation
from geoconnect.globe.points import PointCollection, add_from_text
from geoconnect.globe.snapshot import build_snapshot


class StubResolver:
    def __init__(self, result: ResolvedLocation | None):
        self.result = result
        self.calls: list[str] = []

    def resolve(self, text: str) -> ResolvedLocation | None:
        self.calls.append(text)
        return self.result


def test_add_assigns_ids_and_cycles_palette():
    points = PointCollection(palette=["#a", "#b"])
    p1 = points.add("One", 1, 1)
    p2 = points.add("Two", 2, 2)
    p3 = points.add("Three", 3, 3)

    assert [p.color for p in (p1, p2, p3)] == ["#a", "#b", "#a"]
    assert len({p1.id, p2.id, p3.id}) == 3
    assert [p.name for p in points] == ["One", "Two", "Three"]


def test_default_palette_is_used():
    points = PointCollection()
    assert points.add("One", 0, 0).color == DEFAULT_PALETTE[0]


def test_remove_by_id():
    points = PointCollection()
    keep = points.add("Keep", 0, 0)
    drop = points.add("Drop", 1, 1)

    assert points.remove(drop.id) is True
    assert points.remove("missing") is False
    assert points.points == (keep,)


def test_points_view_is_a_snapshot():
    points = PointCollection()
    points.add("One", 0, 0)
    view = points.points
    points.add("Two", 1, 1)
    assert len(view) == 1
    assert len(points) == 2


def test_append_keeps_explicit_color_and_fills_missing_one():
    points = PointCollection(palette=["#a", "#b"])
    explicit = points.append(GeoPoint(name="Explicit", lat=0, lng=0, color="#123456"))
    implicit = points.append(GeoPoint(name="Implicit", lat=0, lng=0))
    assert explicit.color == "#123456"
    assert implicit.color == "#b"


def test_add_from_text_appends_resolved_location():
    points = PointCollection()
    resolver = StubResolver(ResolvedLocation(lat=19.4326, lng=-99.1332, name="Mexico City"))

    added = add_from_text(points, resolver, "my house in Mexico City")

    assert added is not None
    assert added.name == "Mexico City"
    assert points.points == (added,)
    assert resolver.calls == ["my house in Mexico City"]


def test_add_from_text_no_result_adds_nothing():
    points = PointCollection()
    assert add_from_text(points, StubResolver(None), "nowhere") is None
    assert len(points) == 0


def test_add_from_text_skips_blank_input_without_calling_resolver():
    resolver = StubResolver(ResolvedLocation(lat=0, lng=0, name="X"))
    assert add_from_text(PointCollection(), resolver, "   ") is None
    assert resolver.calls == []


def test_add_from_text_keeps_out_of_range_resolver_output():
    points = PointCollection()
    points.add("Origin", 0, 0)
    resolver = StubResolver(ResolvedLocation(lat=95, lng=10, name="Odd"))

    point = add_from_text(points, resolver, "odd place")

    assert point is not None
    assert (point.lat, point.lng) == (95, 10)
    assert len(points) == 2

    snapshot = build_snapshot(points.points, ConnectionMode.MESH)
    assert math.isfinite(snapshot.centroid.lat)
    assert math.isfinite(snapshot.centroid.lng)
    assert all(math.isfinite(d.distance_km) for d in snapshot.distances)


def test_empty_palette_is_rejected():
    import pytest

    with pytest.raises(ValueError, match="palette"):
        PointCollection(palette=[])
