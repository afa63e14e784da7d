# SPDX-License-Identifier: Apache-2.0
"""Fit-all-points camera framing on the globe.

The camera center is the spherical centroid of the input points (normalized
sum of their unit vectors) rather than the arithmetic mean of latitude and
longitude, which breaks across the antimeridian and near the poles. The wide
altitude grows with the angular spread: the largest great-circle angle from
the center to any point.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from ..config import DEFAULT_CONFIG, FramingConfig
from .coords import (
    CartesianUnit,
    GeoPoint,
    normalize_longitude,
    to_cartesian_unit,
    to_geo_point,
)
from .distance import angular_distance

logger = logging.getLogger(__name__)

_QUARTER_TURN = math.pi / 2.0


@dataclass(frozen=True, slots=True)
class FramingResult:
    center_lat: float
    center_lng: float
    wide_altitude: float

    @property
    def center(self) -> GeoPoint:
        return GeoPoint(lat=self.center_lat, lng=self.center_lng, label="center")


def spherical_centroid(
    points: Sequence[GeoPoint], *, config: FramingConfig = DEFAULT_CONFIG
) -> tuple[float, float] | None:
    """Return the normalized vector-sum center, or ``None`` on cancellation."""

    vectors = np.array(
        [to_cartesian_unit(p).as_tuple() for p in points], dtype=float
    )
    total = vectors.sum(axis=0)
    magnitude = float(np.linalg.norm(total))
    if magnitude <= config.cancellation_epsilon:
        return None
    x, y, z = (total / magnitude).tolist()
    return to_geo_point(CartesianUnit(x, y, z))


def angular_spread(points: Iterable[GeoPoint], center: GeoPoint) -> float:
    """Largest great-circle angle (radians) from ``center`` to any point."""

    return max((angular_distance(center, p) for p in points), default=0.0)


def spread_altitude(spread: float, *, config: FramingConfig = DEFAULT_CONFIG) -> float:
    """Map an angular spread onto the ``[close, far]`` altitude range."""

    ratio = min(max(spread / _QUARTER_TURN, 0.0), 1.0)
    span = config.far_altitude - config.close_altitude
    altitude = config.close_altitude + span * (
        config.spread_floor + config.spread_weight * ratio
    )
    return min(max(altitude, config.close_altitude), config.far_altitude)


def compute_framing(
    points: Iterable[GeoPoint], *, config: FramingConfig = DEFAULT_CONFIG
) -> FramingResult:
    """Compute the camera center and wide altitude that keep ``points`` in view.

    - no points: the default center at the far altitude;
    - one point: centered on it, just outside the close altitude;
    - otherwise: spherical centroid, with altitude scaled by angular spread.
      Points that cancel out (e.g. an antipodal pair) fall back to the
      default center.
    """

    pts = list(points)
    if not pts:
        return FramingResult(
            center_lat=config.default_center_lat,
            center_lng=normalize_longitude(config.default_center_lng),
            wide_altitude=config.far_altitude,
        )

    if len(pts) == 1:
        only = pts[0]
        wide = config.close_altitude + config.single_point_margin
        wide = min(max(wide, config.close_altitude), config.far_altitude)
        return FramingResult(
            center_lat=only.lat,
            center_lng=normalize_longitude(only.lng),
            wide_altitude=wide,
        )

    centroid = spherical_centroid(pts, config=config)
    if centroid is None:
        logger.debug(
            "Unit vectors of %d points cancel out; using default center", len(pts)
        )
        center_lat = config.default_center_lat
        center_lng = normalize_longitude(config.default_center_lng)
    else:
        center_lat, center_lng = centroid

    center = GeoPoint(lat=center_lat, lng=center_lng, label="center")
    spread = angular_spread(pts, center)
    wide = spread_altitude(spread, config=config)
    logger.debug(
        "Framed %d points at (%.4f, %.4f) spread=%.4f rad altitude=%.4f",
        len(pts),
        center_lat,
        center_lng,
        spread,
        wide,
    )
    return FramingResult(
        center_lat=center_lat, center_lng=center_lng, wide_altitude=wide
    )
