# SPDX-License-Identifier: Apache-2.0
"""Coalesce rapid progress updates into one delivery per frame."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class ProgressCoalescer:
    """Hold only the most recent progress value until the next frame tick.

    ``submit`` may be called any number of times between ticks; each call
    replaces the pending value. ``flush`` (called once per rendered frame)
    hands the latest value to ``deliver`` and reports whether it did.
    """

    def __init__(self, deliver: Callable[[float], Any]) -> None:
        self._deliver = deliver
        self._pending: float | None = None
        self._superseded = 0

    @property
    def pending(self) -> float | None:
        return self._pending

    def submit(self, progress: float) -> None:
        if self._pending is not None:
            self._superseded += 1
        self._pending = float(progress)

    def cancel(self) -> None:
        self._pending = None
        self._superseded = 0

    def flush(self) -> bool:
        if self._pending is None:
            return False
        value = self._pending
        if self._superseded:
            logger.debug(
                "Dropped %d superseded progress updates before %.4f",
                self._superseded,
                value,
            )
        self._pending = None
        self._superseded = 0
        self._deliver(value)
        return True
