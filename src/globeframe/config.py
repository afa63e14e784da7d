# SPDX-License-Identifier: Apache-2.0
"""Tunable constants for camera framing.

The module-level names are the defaults. ``FramingConfig`` bundles them so a
caller can override any subset, either explicitly or through
``GLOBEFRAME_*`` environment variables.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, fields, replace
from typing import Mapping

FAR_ALTITUDE = 1.2
CLOSE_ALTITUDE = 0.6
SINGLE_POINT_MARGIN = 0.15
ZOOM_DELTA = 0.6
# Empirically tuned weights: minimum pull-back plus share scaled by spread.
SPREAD_FLOOR = 0.35
SPREAD_WEIGHT = 0.65
DEFAULT_CENTER_LAT = 20.0
DEFAULT_CENTER_LNG = 0.0
ALTITUDE_EPSILON = 0.0005
CANCELLATION_EPSILON = 1e-9

ENV_PREFIX = "GLOBEFRAME_"


@dataclass(frozen=True, slots=True)
class FramingConfig:
    far_altitude: float = FAR_ALTITUDE
    close_altitude: float = CLOSE_ALTITUDE
    single_point_margin: float = SINGLE_POINT_MARGIN
    zoom_delta: float = ZOOM_DELTA
    spread_floor: float = SPREAD_FLOOR
    spread_weight: float = SPREAD_WEIGHT
    default_center_lat: float = DEFAULT_CENTER_LAT
    default_center_lng: float = DEFAULT_CENTER_LNG
    altitude_epsilon: float = ALTITUDE_EPSILON
    cancellation_epsilon: float = CANCELLATION_EPSILON

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value}")
        for name in (
            "single_point_margin",
            "altitude_epsilon",
            "cancellation_epsilon",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.close_altitude > self.far_altitude:
            raise ValueError(
                f"close_altitude ({self.close_altitude}) must not exceed "
                f"far_altitude ({self.far_altitude})"
            )
        if self.zoom_delta < 0:
            raise ValueError("zoom_delta must be non-negative")
        if not -90.0 <= self.default_center_lat <= 90.0:
            raise ValueError("default_center_lat out of range [-90, 90]")
        if not -180.0 <= self.default_center_lng <= 180.0:
            raise ValueError("default_center_lng out of range [-180, 180]")

    def with_overrides(self, **overrides: float) -> FramingConfig:
        return replace(self, **overrides)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FramingConfig:
        """Build a config from ``GLOBEFRAME_<FIELD>`` variables.

        Unset or empty variables keep their defaults. A value that does not
        parse as a float raises ``ValueError`` naming the variable.
        """

        env = os.environ if environ is None else environ
        overrides: dict[str, float] = {}
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            raw = (env.get(key) or "").strip()
            if not raw:
                continue
            try:
                overrides[f.name] = float(raw)
            except ValueError as exc:
                raise ValueError(f"{key} must be a number, got {raw!r}") from exc
        return cls(**overrides)


DEFAULT_CONFIG = FramingConfig()
