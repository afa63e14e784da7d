# SPDX-License-Identifier: Apache-2.0
"""Default two-point globe scene: home marker, viewer marker and their arc."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .config import DEFAULT_CONFIG, FramingConfig
from .geometry import GeoPoint, compute_close_altitude, compute_framing, haversine_km
from .utils.serialize import to_obj

HOME = GeoPoint(lat=45.815, lng=15.9819, label="Petar (general area)")
VIEWER_PLACEHOLDER = GeoPoint(lat=37.7749, lng=-122.4194, label="Viewer (placeholder)")


@dataclass(frozen=True, slots=True)
class Arc:
    start_lat: float
    start_lng: float
    end_lat: float
    end_lng: float

    @classmethod
    def between(cls, start: GeoPoint, end: GeoPoint) -> Arc:
        return cls(
            start_lat=start.lat,
            start_lng=start.lng,
            end_lat=end.lat,
            end_lng=end.lng,
        )


def default_points(viewer: GeoPoint | None = None) -> tuple[GeoPoint, GeoPoint]:
    """Return ``(home, viewer)``; the viewer defaults to a placeholder."""

    return HOME, viewer or VIEWER_PLACEHOLDER


def rounded_distance_km(a: GeoPoint, b: GeoPoint) -> int:
    return round(haversine_km(a, b))


def describe_scene(
    points: Sequence[GeoPoint] | None = None,
    *,
    config: FramingConfig = DEFAULT_CONFIG,
) -> dict[str, Any]:
    """Summarize a scene as a JSON-serializable mapping.

    With two or more points, the arc and distance join the last point (the
    viewer) to the first (home), matching how the globe draws them.
    """

    pts = list(default_points() if points is None else points)
    framing = compute_framing(pts, config=config)
    out: dict[str, Any] = {
        "points": [to_obj(p) for p in pts],
        "framing": to_obj(framing),
        "close_altitude": compute_close_altitude(
            framing.wide_altitude, config=config
        ),
        "arcs": [],
        "distance_km": None,
    }
    if len(pts) >= 2:
        home, viewer = pts[0], pts[-1]
        out["arcs"] = [to_obj(Arc.between(viewer, home))]
        out["distance_km"] = rounded_distance_km(viewer, home)
    return out
