# SPDX-License-Identifier: Apache-2.0
"""Camera framing geometry for decorative globe widgets."""

from __future__ import annotations

from .config import DEFAULT_CONFIG, FramingConfig
from .geometry import (
    CartesianUnit,
    FramingResult,
    GeoPoint,
    altitude_at,
    angular_distance,
    compute_close_altitude,
    compute_framing,
    haversine_km,
    to_cartesian_unit,
    to_geo_point,
)

__all__ = [
    "CartesianUnit",
    "DEFAULT_CONFIG",
    "FramingConfig",
    "FramingResult",
    "GeoPoint",
    "altitude_at",
    "angular_distance",
    "compute_close_altitude",
    "compute_framing",
    "haversine_km",
    "to_cartesian_unit",
    "to_geo_point",
]

__version__ = "0.1.0"
