# SPDX-License-Identifier: Apache-2.0
"""Pure spherical geometry used to frame the globe camera."""

from __future__ import annotations

from .coords import (
    CartesianUnit,
    GeoPoint,
    antipode,
    normalize_longitude,
    to_cartesian_unit,
    to_geo_point,
)
from .distance import EARTH_RADIUS_KM, angular_distance, haversine_km
from .framing import FramingResult, compute_framing
from .zoom import altitude_at, clamp_progress, compute_close_altitude, should_apply

__all__ = [
    "CartesianUnit",
    "EARTH_RADIUS_KM",
    "FramingResult",
    "GeoPoint",
    "altitude_at",
    "angular_distance",
    "antipode",
    "clamp_progress",
    "compute_close_altitude",
    "compute_framing",
    "haversine_km",
    "normalize_longitude",
    "should_apply",
    "to_cartesian_unit",
    "to_geo_point",
]
