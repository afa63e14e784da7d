# SPDX-License-Identifier: Apache-2.0
"""Scroll-coupled zoom between the wide and close altitudes."""

from __future__ import annotations

import math

from ..config import ALTITUDE_EPSILON, DEFAULT_CONFIG, FramingConfig


def compute_close_altitude(
    wide_altitude: float, *, config: FramingConfig = DEFAULT_CONFIG
) -> float:
    """Return the zoomed-in altitude paired with ``wide_altitude``.

    Never drops below the configured close altitude, and never exceeds
    ``wide_altitude`` itself.
    """

    close = max(config.close_altitude, wide_altitude - config.zoom_delta)
    return min(close, wide_altitude)


def clamp_progress(progress: float) -> float:
    """Clamp ``progress`` into [0, 1]; NaN maps to 0."""

    if math.isnan(progress):
        return 0.0
    return min(max(progress, 0.0), 1.0)


def altitude_at(wide_altitude: float, close_altitude: float, progress: float) -> float:
    """Linearly interpolate from wide (progress 0) to close (progress 1).

    Progress outside ``[0, 1]`` is clamped and NaN counts as 0. Both
    endpoints are reproduced exactly.
    """

    t = clamp_progress(progress)
    if t == 0.0:
        return wide_altitude
    if t == 1.0:
        return close_altitude
    return wide_altitude - (wide_altitude - close_altitude) * t


def should_apply(
    last_applied: float | None, target: float, *, epsilon: float = ALTITUDE_EPSILON
) -> bool:
    """Return False when ``target`` is within ``epsilon`` of the last write."""

    if last_applied is None:
        return True
    return abs(last_applied - target) >= epsilon
