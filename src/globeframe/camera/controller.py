# SPDX-License-Identifier: Apache-2.0
"""Per-camera state that turns framing results into camera writes.

The controller caches the framing for the current point set, remembers the
last altitude it wrote, and only pushes values into the injected sink once
the rendering side has reported that it is ready.

State transitions::

    UNINITIALIZED --on_ready()--> FRAMED --set_progress()--> INTERPOLATED
          ^                         ^                              |
          |                         +------ set_points() ----------+
          +-- set_points() before the sink is ready

``on_ready()`` writes the wide framing and then any remembered progress, so
a camera that becomes ready mid-scroll lands at the right altitude at once.
``set_points()`` on a ready camera writes only the wide framing for the new
center; the remembered progress takes effect on the next ``set_progress()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Protocol

from ..config import DEFAULT_CONFIG, FramingConfig
from ..geometry import (
    FramingResult,
    GeoPoint,
    altitude_at,
    clamp_progress,
    compute_close_altitude,
    compute_framing,
    should_apply,
)

logger = logging.getLogger(__name__)


class CameraPhase(str, Enum):
    UNINITIALIZED = "uninitialized"
    FRAMED = "framed"
    INTERPOLATED = "interpolated"


@dataclass(frozen=True, slots=True)
class PointOfView:
    lat: float
    lng: float
    altitude: float


class CameraSink(Protocol):
    """Camera-apply hook implemented by the rendering engine.

    ``transition_ms == 0`` requests an instantaneous move.
    """

    def point_of_view(self, pov: PointOfView, transition_ms: int = 0) -> None: ...


class GlobeCameraController:
    """Drive a globe camera from a point set and a progress signal."""

    def __init__(
        self,
        sink: CameraSink,
        points: Iterable[GeoPoint] = (),
        *,
        config: FramingConfig = DEFAULT_CONFIG,
        transition_ms: int = 0,
    ) -> None:
        self._sink = sink
        self._config = config
        self._transition_ms = int(transition_ms)
        self._points: tuple[GeoPoint, ...] = tuple(points)
        self._framing = compute_framing(self._points, config=config)
        self._close = compute_close_altitude(
            self._framing.wide_altitude, config=config
        )
        self._progress = 0.0
        self._last_altitude: float | None = None
        self._ready = False
        self._phase = CameraPhase.UNINITIALIZED

    @property
    def phase(self) -> CameraPhase:
        return self._phase

    @property
    def points(self) -> tuple[GeoPoint, ...]:
        return self._points

    @property
    def framing(self) -> FramingResult:
        return self._framing

    @property
    def close_altitude(self) -> float:
        return self._close

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def last_applied_altitude(self) -> float | None:
        return self._last_altitude

    @property
    def ready(self) -> bool:
        return self._ready

    def target(self, progress: float | None = None) -> PointOfView:
        """Return the camera target for ``progress`` (current value if None)."""

        p = self._progress if progress is None else progress
        return PointOfView(
            lat=self._framing.center_lat,
            lng=self._framing.center_lng,
            altitude=altitude_at(self._framing.wide_altitude, self._close, p),
        )

    def on_ready(self) -> None:
        """Rendering engine is ready: apply the base framing, then progress.

        May be called again (e.g. after textures reload) to re-assert the
        framing.
        """

        self._ready = True
        self._apply_base()
        self._apply_progress()

    def set_points(self, points: Iterable[GeoPoint]) -> bool:
        """Replace the point set. Returns True when the framing was re-derived.

        A ready camera moves to the new wide framing only; the current
        progress is not re-applied until the next ``set_progress()``.
        """

        new_points = tuple(points)
        if new_points == self._points:
            return False
        self._points = new_points
        self._framing = compute_framing(new_points, config=self._config)
        self._close = compute_close_altitude(
            self._framing.wide_altitude, config=self._config
        )
        self._last_altitude = None
        logger.debug(
            "Point set changed (%d points); reframing at (%.4f, %.4f)",
            len(new_points),
            self._framing.center_lat,
            self._framing.center_lng,
        )
        if self._ready:
            self._apply_base()
        else:
            self._phase = CameraPhase.UNINITIALIZED
        return True

    def set_progress(self, progress: float) -> bool:
        """Record ``progress`` and push the matching altitude if it moved.

        Returns True when a camera write happened. Before the sink is ready
        the value is only remembered.
        """

        self._progress = clamp_progress(float(progress))
        if not self._ready:
            return False
        return self._apply_progress()

    def _apply_base(self) -> None:
        pov = PointOfView(
            lat=self._framing.center_lat,
            lng=self._framing.center_lng,
            altitude=self._framing.wide_altitude,
        )
        self._write(pov)
        self._phase = CameraPhase.FRAMED

    def _apply_progress(self) -> bool:
        pov = self.target()
        if not should_apply(
            self._last_altitude, pov.altitude, epsilon=self._config.altitude_epsilon
        ):
            logger.debug("Skipping camera update at altitude %.5f", pov.altitude)
            return False
        self._write(pov)
        self._phase = CameraPhase.INTERPOLATED
        return True

    def _write(self, pov: PointOfView) -> None:
        self._sink.point_of_view(pov, self._transition_ms)
        self._last_altitude = pov.altitude
        logger.debug(
            "Camera -> lat=%.4f lng=%.4f altitude=%.5f",
            pov.lat,
            pov.lng,
            pov.altitude,
        )
