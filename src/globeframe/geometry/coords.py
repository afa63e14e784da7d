# SPDX-License-Identifier: Apache-2.0
"""Conversions between geographic coordinates and unit-sphere vectors.

Latitude is treated as the elevation angle and longitude as the azimuth. The
forward mapping always lands on the unit sphere; the inverse accepts any
non-zero vector and projects it back to latitude/longitude in degrees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A labelled geographic location in degrees."""

    lat: float
    lng: float
    label: str = ""

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            raise ValueError(f"coordinates must be finite: ({self.lat}, {self.lng})")
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"latitude out of range [-90, 90]: {self.lat}")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"longitude out of range [-180, 180]: {self.lng}")


@dataclass(frozen=True, slots=True)
class CartesianUnit:
    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


def normalize_longitude(lng: float) -> float:
    """Wrap ``lng`` (degrees) into the half-open interval (-180, 180]."""

    wrapped = ((lng + 180.0) % 360.0) - 180.0
    if wrapped <= -180.0:
        wrapped += 360.0
    return wrapped


def to_cartesian_unit(point: GeoPoint) -> CartesianUnit:
    lat = math.radians(point.lat)
    lng = math.radians(point.lng)
    cos_lat = math.cos(lat)
    return CartesianUnit(
        x=cos_lat * math.cos(lng),
        y=cos_lat * math.sin(lng),
        z=math.sin(lat),
    )


def to_geo_point(vector: CartesianUnit) -> tuple[float, float]:
    """Return ``(lat, lng)`` in degrees for a non-zero vector.

    The vector does not need to be normalized. The zero vector has no
    direction and raises ``ValueError``; callers that sum unit vectors must
    handle cancellation before calling this.
    """

    x, y, z = vector.as_tuple()
    if x == 0.0 and y == 0.0 and z == 0.0:
        raise ValueError("zero vector has no geographic direction")
    lat = math.degrees(math.atan2(z, math.hypot(x, y)))
    lng = normalize_longitude(math.degrees(math.atan2(y, x)))
    return lat, lng


def antipode(point: GeoPoint) -> GeoPoint:
    """Return the point diametrically opposite ``point`` on the sphere."""

    return GeoPoint(
        lat=-point.lat,
        lng=normalize_longitude(point.lng + 180.0),
        label=point.label,
    )
