# SPDX-License-Identifier: Apache-2.0
"""Shared helpers for the command line: verbosity and logging setup."""

from __future__ import annotations

import logging
import os
from typing import Any

VERBOSITY_ENV = "GLOBEFRAME_VERBOSITY"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "quiet": logging.ERROR,
}


def apply_verbosity_flags(ns: Any) -> None:
    """Map ``--verbose``/``--quiet`` onto ``GLOBEFRAME_VERBOSITY``."""

    if getattr(ns, "verbose", False):
        os.environ[VERBOSITY_ENV] = "debug"
    elif getattr(ns, "quiet", False):
        os.environ[VERBOSITY_ENV] = "quiet"


def configure_logging_from_env(default: str = "info") -> int:
    """Configure root logging from ``GLOBEFRAME_VERBOSITY``.

    Accepts ``debug``, ``info`` or ``quiet``; unknown values fall back to
    ``default``. Returns the level that was applied.
    """

    name = (os.environ.get(VERBOSITY_ENV) or default).strip().lower()
    level = _LEVELS.get(name, _LEVELS.get(default, logging.INFO))
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    logging.getLogger().setLevel(level)
    return level
