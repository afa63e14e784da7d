# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import dataclasses
import math

import pytest

from globeframe.geometry import (
    CartesianUnit,
    GeoPoint,
    antipode,
    normalize_longitude,
    to_cartesian_unit,
    to_geo_point,
)


@pytest.mark.parametrize(
    "lat,lng",
    [
        (10.0, 20.0),
        (-45.5, 170.0),
        (0.0, -179.9),
        (89.0, 0.0),
        (-89.5, 123.4),
        (45.815, 15.9819),
        (37.7749, -122.4194),
        (0.0, 180.0),
    ],
)
def test_round_trip_reproduces_point(lat, lng):
    out_lat, out_lng = to_geo_point(to_cartesian_unit(GeoPoint(lat, lng)))
    assert out_lat == pytest.approx(lat, abs=1e-9)
    assert out_lng == pytest.approx(lng, abs=1e-9)


def test_cartesian_axes():
    v = to_cartesian_unit(GeoPoint(0.0, 0.0))
    assert v.as_tuple() == pytest.approx((1.0, 0.0, 0.0))
    v = to_cartesian_unit(GeoPoint(0.0, 90.0))
    assert v.as_tuple() == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)
    v = to_cartesian_unit(GeoPoint(90.0, 0.0))
    assert v.as_tuple() == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)


def test_cartesian_is_unit_length():
    for lat, lng in [(12.3, -45.6), (-70.0, 160.0), (33.3, 0.1)]:
        x, y, z = to_cartesian_unit(GeoPoint(lat, lng)).as_tuple()
        assert math.sqrt(x * x + y * y + z * z) == pytest.approx(1.0)


def test_inverse_accepts_unnormalized_vectors():
    lat, lng = to_geo_point(CartesianUnit(0.0, 3.0, 3.0))
    assert lat == pytest.approx(45.0)
    assert lng == pytest.approx(90.0)


def test_inverse_rejects_zero_vector():
    with pytest.raises(ValueError):
        to_geo_point(CartesianUnit(0.0, 0.0, 0.0))


@pytest.mark.parametrize(
    "raw,expected",
    [
        (0.0, 0.0),
        (180.0, 180.0),
        (-180.0, 180.0),
        (190.0, -170.0),
        (-190.0, 170.0),
        (360.0, 0.0),
        (540.0, 180.0),
        (-179.5, -179.5),
    ],
)
def test_normalize_longitude(raw, expected):
    assert normalize_longitude(raw) == pytest.approx(expected)


def test_normalize_longitude_stays_in_half_open_range():
    for raw in range(-1080, 1081, 15):
        out = normalize_longitude(float(raw))
        assert -180.0 < out <= 180.0


def test_antipode():
    p = antipode(GeoPoint(10.0, 20.0, "x"))
    assert (p.lat, p.lng, p.label) == (-10.0, -160.0, "x")
    assert antipode(GeoPoint(0.0, 0.0)).lng == 180.0


@pytest.mark.parametrize(
    "lat,lng",
    [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -200.0), (math.nan, 0.0)],
)
def test_geopoint_rejects_invalid_coordinates(lat, lng):
    with pytest.raises(ValueError):
        GeoPoint(lat, lng)


def test_geopoint_is_immutable():
    p = GeoPoint(1.0, 2.0, "home")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.lat = 3.0  # type: ignore[misc]
