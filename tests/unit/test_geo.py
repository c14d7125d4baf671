import math
from unittest.mock import patch

import pytest

from logicon.services.geo import EARTH_RADIUS_KM, great_circle_km


def test_identical_points_are_zero():
    assert great_circle_km(40.0, -73.0, 40.0, -73.0) == 0.0


@pytest.mark.parametrize(
    "point",
    [(40.7128, -74.0060), (51.5007, -0.1246), (-33.8568, 151.2153), (89.9999, 12.0)],
)
def test_nearly_identical_points_never_leave_acos_domain(point):
    # Rounding can make the cosine term exceed 1.0 for points this close
    lat, lng = point
    assert great_circle_km(lat, lng, lat, lng + 1e-9) == pytest.approx(0.0, abs=1e-3)


def test_symmetric():
    a = great_circle_km(40.0, -73.0, 41.0, -74.0)
    b = great_circle_km(41.0, -74.0, 40.0, -73.0)
    assert a == pytest.approx(b, rel=1e-12)


def test_one_degree_of_latitude():
    expected = EARTH_RADIUS_KM * math.radians(1.0)
    assert great_circle_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(expected, rel=1e-9)


def test_antipodal_points_are_half_circumference():
    assert great_circle_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)
    assert great_circle_km(90.0, 0.0, -90.0, 0.0) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)


def test_known_city_pair():
    # New York to London, roughly 5570 km
    assert great_circle_km(40.7128, -74.0060, 51.5074, -0.1278) == pytest.approx(5570, rel=0.01)


def test_cosine_term_is_clamped():
    with patch("logicon.services.geo.math.sin", return_value=1.0), patch(
        "logicon.services.geo.math.cos", return_value=1.0
    ):
        # cos*cos*cos + sin*sin == 2.0 without the clamp
        assert great_circle_km(10.0, 10.0, 11.0, 12.0) == 0.0
