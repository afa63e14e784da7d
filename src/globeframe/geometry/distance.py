# SPDX-License-Identifier: Apache-2.0
"""Great-circle distances between geographic points."""

from __future__ import annotations

import math

from .coords import GeoPoint

EARTH_RADIUS_KM = 6371.0


def angular_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Return the great-circle angle between ``a`` and ``b`` in radians.

    Uses the haversine form, which stays well conditioned for nearby points.
    The result always lies in ``[0, pi]``.
    """

    lat_a = math.radians(a.lat)
    lat_b = math.radians(b.lat)
    d_lat = lat_b - lat_a
    d_lng = math.radians(b.lng - a.lng)
    h = (
        math.sin(d_lat / 2.0) ** 2
        + math.cos(lat_a) * math.cos(lat_b) * math.sin(d_lng / 2.0) ** 2
    )
    # Rounding can push h a hair above 1 for antipodal pairs.
    return 2.0 * math.asin(min(1.0, math.sqrt(h)))


def haversine_km(
    a: GeoPoint, b: GeoPoint, *, radius_km: float = EARTH_RADIUS_KM
) -> float:
    return radius_km * angular_distance(a, b)
