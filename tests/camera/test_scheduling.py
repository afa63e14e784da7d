# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from globeframe.camera import GlobeCameraController, PointOfView, ProgressCoalescer
from globeframe.scene import default_points


def test_only_latest_value_is_delivered():
    delivered: list[float] = []
    coalescer = ProgressCoalescer(delivered.append)
    for value in (0.1, 0.2, 0.3):
        coalescer.submit(value)
    assert coalescer.pending == 0.3
    assert coalescer.flush() is True
    assert delivered == [0.3]
    assert coalescer.pending is None
    assert coalescer.flush() is False
    assert delivered == [0.3]


def test_cancel_discards_pending():
    delivered: list[float] = []
    coalescer = ProgressCoalescer(delivered.append)
    coalescer.submit(0.4)
    coalescer.cancel()
    assert coalescer.flush() is False
    assert delivered == []


def test_coalescer_feeds_controller_once_per_frame():
    writes: list[PointOfView] = []

    class Sink:
        def point_of_view(self, pov, transition_ms=0):
            writes.append(pov)

    controller = GlobeCameraController(Sink(), default_points())
    controller.on_ready()
    coalescer = ProgressCoalescer(controller.set_progress)

    for i in range(1, 21):
        coalescer.submit(i / 20)
    coalescer.flush()

    assert len(writes) == 2
    assert writes[-1].altitude == controller.close_altitude
