import math

import pytest

from geoconnect.core.geo import (
    DEFAULT_GLOBE_RADIUS,
    EARTH_RADIUS_KM,
    degrees_to_radians,
    distance_km,
    radians_to_degrees,
    to_cartesian,
)


@pytest.mark.parametrize("x", [0.0, 1.0, -45.5, 180.0, 359.99, -1234.5678, 1e-9])
def test_degree_radian_conversions_are_inverses(x):
    assert degrees_to_radians(radians_to_degrees(x)) == pytest.approx(x)
    assert radians_to_degrees(degrees_to_radians(x)) == pytest.approx(x)


def test_degrees_to_radians_known_values():
    assert degrees_to_radians(180) == pytest.approx(math.pi)
    assert degrees_to_radians(90) == pytest.approx(math.pi / 2)
    assert radians_to_degrees(math.pi) == pytest.approx(180)


def test_to_cartesian_north_pole_is_up():
    p = to_cartesian(90, 0)
    assert p.as_tuple() == pytest.approx((0.0, DEFAULT_GLOBE_RADIUS, 0.0), abs=1e-9)


def test_to_cartesian_reference_meridian_and_east():
    # lat 0 / lng 0 lands on +x; lng 90 lands on -z.
    assert to_cartesian(0, 0).as_tuple() == pytest.approx((100.0, 0.0, 0.0), abs=1e-9)
    assert to_cartesian(0, 90).as_tuple() == pytest.approx((0.0, 0.0, -100.0), abs=1e-9)


def test_to_cartesian_scales_with_radius():
    p = to_cartesian(35.6762, 139.6503, radius=1.0)
    q = to_cartesian(35.6762, 139.6503, radius=6371.0)
    assert math.sqrt(p.x**2 + p.y**2 + p.z**2) == pytest.approx(1.0)
    assert q.as_tuple() == pytest.approx(tuple(c * 6371.0 for c in p.as_tuple()))


def test_to_cartesian_accepts_out_of_range_input():
    p = to_cartesian(120, 400)
    assert all(math.isfinite(c) for c in p.as_tuple())


@pytest.mark.parametrize("lat,lng", [(0, 0), (19.4326, -99.1332), (-89.9, 179.9), (90, -180)])
def test_distance_to_self_is_zero(lat, lng):
    assert distance_km(lat, lng, lat, lng) == pytest.approx(0.0, abs=1e-9)


def test_distance_is_symmetric():
    a = (19.4326, -99.1332)
    b = (35.6762, 139.6503)
    assert distance_km(*a, *b) == pytest.approx(distance_km(*b, *a))


def test_distance_quarter_great_circle_on_equator():
    assert distance_km(0, 0, 0, 90) == pytest.approx(10007.5, abs=0.1)


def test_distance_antipodal_is_half_circumference():
    assert distance_km(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_distance_mexico_city_to_tokyo():
    km = distance_km(19.4326, -99.1332, 35.6762, 139.6503)
    assert 11300 <= km <= 11400


def test_distance_uses_custom_radius():
    assert distance_km(0, 0, 0, 90, radius_km=1.0) == pytest.approx(math.pi / 2)


def test_distance_passes_nan_through():
    assert math.isnan(distance_km(float("nan"), 0, 10, 10))
