# SPDX-License-Identifier: Apache-2.0
import json

from globeframe.camera import CameraPhase
from globeframe.geometry import FramingResult, GeoPoint
from globeframe.utils.io_utils import write_payload
from globeframe.utils.serialize import dumps, to_list, to_obj


def test_to_obj_handles_slotted_dataclasses_and_enums():
    assert to_obj(GeoPoint(1.0, 2.0, "a")) == {"lat": 1.0, "lng": 2.0, "label": "a"}
    assert to_obj(CameraPhase.FRAMED) == "framed"
    assert to_obj(GeoPoint) is GeoPoint
    assert to_obj({"k": 1}) == {"k": 1}


def test_to_list_converts_nested_items():
    items = to_list((GeoPoint(0.0, 0.0), FramingResult(1.0, 2.0, 0.9)))
    assert items[1] == {"center_lat": 1.0, "center_lng": 2.0, "wide_altitude": 0.9}


def test_write_payload_creates_parent_dirs(tmp_path):
    target = tmp_path / "nested" / "dir" / "out.json"
    write_payload(dumps({"p": GeoPoint(3.0, 4.0)}), str(target))
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data == {"p": {"lat": 3.0, "lng": 4.0, "label": ""}}
    assert target.read_bytes().endswith(b"\n")
