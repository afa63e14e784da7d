# SPDX-License-Identifier: Apache-2.0
"""Command line entry point: ``globeframe <command> [options]``."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Any, Sequence

from globeframe.camera import GlobeCameraController, PointOfView, ProgressCoalescer
from globeframe.config import FramingConfig
from globeframe.geometry import (
    GeoPoint,
    altitude_at,
    angular_distance,
    compute_close_altitude,
    compute_framing,
    haversine_km,
)
from globeframe.scene import default_points, describe_scene
from globeframe.utils.cli_helpers import (
    apply_verbosity_flags,
    configure_logging_from_env,
)
from globeframe.utils.io_utils import write_payload
from globeframe.utils.serialize import dumps, to_obj


def parse_point(text: str) -> GeoPoint:
    """Parse ``LAT,LNG[,LABEL]`` into a GeoPoint."""

    parts = [p.strip() for p in text.split(",", 2)]
    if len(parts) < 2:
        raise ValueError(f"Expected LAT,LNG[,LABEL], got {text!r}")
    try:
        lat = float(parts[0])
        lng = float(parts[1])
    except ValueError as exc:
        raise ValueError(f"Invalid coordinates in {text!r}") from exc
    label = parts[2] if len(parts) == 3 else ""
    return GeoPoint(lat=lat, lng=lng, label=label)


def _points_from_ns(ns: argparse.Namespace) -> list[GeoPoint]:
    raw = getattr(ns, "point", None)
    if not raw:
        return list(default_points())
    try:
        return [parse_point(p) for p in raw]
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


def _config_from_env() -> FramingConfig:
    try:
        return FramingConfig.from_env()
    except ValueError as exc:
        raise SystemExit(f"Invalid framing configuration: {exc}") from exc


def _prepare(ns: argparse.Namespace) -> FramingConfig:
    apply_verbosity_flags(ns)
    configure_logging_from_env()
    return _config_from_env()


def _progress_steps(ns: argparse.Namespace) -> list[float]:
    if ns.progress:
        return list(ns.progress)
    steps = max(int(ns.steps), 1)
    return [i / steps for i in range(steps + 1)]


def _cmd_frame(ns: argparse.Namespace) -> int:
    config = _prepare(ns)
    points = _points_from_ns(ns)
    framing = compute_framing(points, config=config)
    close = compute_close_altitude(framing.wide_altitude, config=config)
    payload: dict[str, Any] = {
        "points": to_obj(points),
        "framing": to_obj(framing),
        "close_altitude": close,
    }
    if ns.progress:
        payload["targets"] = [
            {"progress": p, "altitude": altitude_at(framing.wide_altitude, close, p)}
            for p in ns.progress
        ]
    logging.info(
        "Framed %d point(s) at (%.4f, %.4f), altitude %.4f",
        len(points),
        framing.center_lat,
        framing.center_lng,
        framing.wide_altitude,
    )
    write_payload(dumps(payload), ns.output)
    return 0


def _cmd_distance(ns: argparse.Namespace) -> int:
    apply_verbosity_flags(ns)
    configure_logging_from_env()
    try:
        a = parse_point(ns.a)
        b = parse_point(ns.b)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    radians = angular_distance(a, b)
    payload = {
        "a": to_obj(a),
        "b": to_obj(b),
        "angular_distance_rad": radians,
        "angular_distance_deg": math.degrees(radians),
        "distance_km": haversine_km(a, b),
    }
    write_payload(dumps(payload), ns.output)
    return 0


class _RecordingSink:
    def __init__(self) -> None:
        self.writes: list[dict[str, Any]] = []

    def point_of_view(self, pov: PointOfView, transition_ms: int = 0) -> None:
        self.writes.append({**to_obj(pov), "transition_ms": transition_ms})


def _cmd_zoom(ns: argparse.Namespace) -> int:
    """Replay a progress sequence through a camera controller."""

    config = _prepare(ns)
    points = _points_from_ns(ns)
    sink = _RecordingSink()
    controller = GlobeCameraController(sink, points, config=config)
    controller.on_ready()

    coalescer = ProgressCoalescer(controller.set_progress)
    per_frame = max(int(ns.per_frame), 1)
    steps = _progress_steps(ns)
    frames = 0
    for i, value in enumerate(steps, start=1):
        coalescer.submit(value)
        if i % per_frame == 0 and coalescer.flush():
            frames += 1
    if coalescer.flush():
        frames += 1

    payload = {
        "framing": to_obj(controller.framing),
        "close_altitude": controller.close_altitude,
        "submitted": len(steps),
        "frames": frames,
        "phase": to_obj(controller.phase),
        "writes": sink.writes,
    }
    logging.info(
        "Replayed %d progress value(s) over %d frame(s); %d camera write(s)",
        len(steps),
        frames,
        len(sink.writes),
    )
    write_payload(dumps(payload), ns.output)
    return 0


def _cmd_scene(ns: argparse.Namespace) -> int:
    config = _prepare(ns)
    points = _points_from_ns(ns)
    write_payload(dumps(describe_scene(points, config=config)), ns.output)
    return 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("-o", "--output", default="-", help="Output path or '-'")
    p.add_argument("--verbose", action="store_true", help="Verbose logging")
    p.add_argument("--quiet", action="store_true", help="Only log errors")


def _add_points(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--point",
        action="append",
        metavar="LAT,LNG[,LABEL]",
        help="Point to frame (repeatable; defaults to the built-in scene)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="globeframe",
        description="Camera framing geometry for globe widgets.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_frame = sub.add_parser("frame", help="Compute center and altitudes")
    _add_points(p_frame)
    p_frame.add_argument(
        "--progress",
        action="append",
        type=float,
        help="Also report the altitude at this progress (repeatable)",
    )
    _add_common(p_frame)
    p_frame.set_defaults(func=_cmd_frame)

    p_dist = sub.add_parser("distance", help="Great-circle distance of two points")
    p_dist.add_argument("a", metavar="LAT,LNG[,LABEL]")
    p_dist.add_argument("b", metavar="LAT,LNG[,LABEL]")
    _add_common(p_dist)
    p_dist.set_defaults(func=_cmd_distance)

    p_zoom = sub.add_parser("zoom", help="Replay progress updates through a camera")
    _add_points(p_zoom)
    p_zoom.add_argument(
        "--progress",
        action="append",
        type=float,
        help="Explicit progress value (repeatable); overrides --steps",
    )
    p_zoom.add_argument(
        "--steps", type=int, default=10, help="Evenly spaced steps from 0 to 1"
    )
    p_zoom.add_argument(
        "--per-frame",
        type=int,
        default=1,
        help="Progress updates submitted between frame ticks",
    )
    _add_common(p_zoom)
    p_zoom.set_defaults(func=_cmd_zoom)

    p_scene = sub.add_parser("scene", help="Describe points, arcs and distance")
    _add_points(p_scene)
    _add_common(p_scene)
    p_scene.set_defaults(func=_cmd_scene)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(list(argv) if argv is not None else None)
    return int(ns.func(ns))


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
