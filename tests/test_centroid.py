import math

import pytest

from geoconnect.domain.models import GeoCentroid, GeoPoint
from geoconnect.topology.centroid import calculate_centroid


def _p(name: str, lat: float, lng: float) -> GeoPoint:
    return GeoPoint(name=name, lat=lat, lng=lng)


def test_centroid_of_empty_list_is_none():
    assert calculate_centroid([]) is None


def test_centroid_of_one_point_is_that_point_exactly():
    p = _p("Tokyo", 35.6762, 139.6503)
    assert calculate_centroid([p]) == GeoCentroid(lat=35.6762, lng=139.6503)


def test_centroid_of_equator_pair():
    c = calculate_centroid([_p("a", 0, 0), _p("b", 0, 90)])
    assert c.lat == pytest.approx(0.0, abs=1e-9)
    assert c.lng == pytest.approx(45.0)


def test_centroid_across_the_antimeridian():
    # A naive mean would put this at lng 0, on the opposite side of the globe.
    c = calculate_centroid([_p("a", 10, 179), _p("b", -10, -179)])
    assert c.lat == pytest.approx(0.0, abs=1e-9)
    assert abs(c.lng) == pytest.approx(180.0)


def test_centroid_near_the_pole():
    c = calculate_centroid([_p("a", 80, 0), _p("b", 80, 180)])
    assert c.lat == pytest.approx(90.0)


def test_centroid_is_order_invariant():
    pts = [_p("a", 19.4326, -99.1332), _p("b", 35.6762, 139.6503), _p("c", -33.8688, 151.2093), _p("d", 51.5, -0.12)]
    forward = calculate_centroid(pts)
    backward = calculate_centroid(list(reversed(pts)))
    assert forward.lat == pytest.approx(backward.lat)
    assert forward.lng == pytest.approx(backward.lng)


def test_centroid_of_antipodal_points_does_not_raise():
    c = calculate_centroid([_p("a", 0, 0), _p("b", 0, 180)])
    assert math.isfinite(c.lat)
    assert math.isfinite(c.lng)


def test_centroid_mexico_city_tokyo_is_spherical_not_arithmetic():
    c = calculate_centroid([_p("Mexico City", 19.4326, -99.1332), _p("Tokyo", 35.6762, 139.6503)])
    # The spherical mean sits over the North Pacific.
    assert c.lat == pytest.approx(46.5, abs=0.5)
    assert c.lng == pytest.approx(-152.2, abs=0.5)
    # The arithmetic mean would be roughly (27.55, 20.26), over Africa.
    assert abs(c.lat - 27.55) > 10
    assert abs(c.lng - 20.26) > 90


def test_centroid_accepts_any_lat_lng_objects():
    class Raw:
        def __init__(self, lat, lng):
            self.lat = lat
            self.lng = lng

    c = calculate_centroid([Raw(0, 0), Raw(0, 90)])
    assert c.lng == pytest.approx(45.0)
