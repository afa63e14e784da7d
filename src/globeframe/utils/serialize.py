# SPDX-License-Identifier: Apache-2.0
"""Lightweight serializers for globeframe objects (dataclasses and enums).

Frozen, slotted dataclasses have no ``__dict__``, so they go through
``dataclasses.asdict``; everything else passes through unchanged.
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Iterable


def to_obj(x: Any) -> Any:
    """Convert a value to a JSON-serializable object when possible.

    - Dataclass instances → asdict
    - Enums → their value
    - Dicts → dicts with converted values
    - Lists/tuples → lists of converted items
    - Everything else is returned as-is
    """
    if is_dataclass(x) and not isinstance(x, type):
        return asdict(x)
    if isinstance(x, Enum):
        return x.value
    if isinstance(x, dict):
        return {k: to_obj(v) for k, v in x.items()}
    if isinstance(x, (list, tuple)):
        return to_list(x)
    return x


def to_list(items: Iterable[Any]) -> list[Any]:
    """Convert an iterable of values via to_obj, returning a list."""
    return [to_obj(i) for i in items]


def dumps(payload: Any) -> bytes:
    """Encode ``payload`` as indented UTF-8 JSON with a trailing newline."""
    return (json.dumps(to_obj(payload), indent=2) + "\n").encode("utf-8")
