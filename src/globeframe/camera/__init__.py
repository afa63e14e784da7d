# SPDX-License-Identifier: Apache-2.0
"""Caller-side camera plumbing around the framing geometry."""

from __future__ import annotations

from .controller import CameraPhase, CameraSink, GlobeCameraController, PointOfView
from .scheduling import ProgressCoalescer

__all__ = [
    "CameraPhase",
    "CameraSink",
    "GlobeCameraController",
    "PointOfView",
    "ProgressCoalescer",
]
