"""Tests for the FloorPlanData JSON companion format."""
import json
import math

import pytest

from floorplan.core.builder import FloorPlanBuilder
from floorplan.models import FloorPlanData, SurfaceKind


class TestJsonCompanion:
    def test_round_trip(self, room_plan):
        restored = FloorPlanData.from_json(room_plan.to_json())
        assert restored == room_plan

    def test_round_trip_empty(self, empty_plan):
        assert FloorPlanData.from_json(empty_plan.to_json()) == empty_plan

    def test_field_names(self, room_plan):
        payload = json.loads(room_plan.to_json())
        assert set(payload) == {"elements", "boundingBox", "roomDimensions"}
        assert set(payload["elements"][0]) == {"rect", "rotation", "type", "label"}
        assert set(payload["boundingBox"]) == {"x", "y", "width", "height"}
        assert set(payload["roomDimensions"]) == {"width", "height", "depth"}

    def test_element_type_encoding(self, room_plan):
        payload = json.loads(room_plan.to_json())
        types = [e["type"] for e in payload["elements"]]
        assert types[0] == {"kind": "wall", "category": None}
        assert types[-1] == {"kind": "object", "category": "bed"}

    def test_round_trip_preserves_values(self, room_plan):
        restored = FloorPlanData.from_json(room_plan.to_json(indent=2))
        for before, after in zip(room_plan.elements, restored.elements):
            assert after.rect.x == pytest.approx(before.rect.x)
            assert after.rotation == pytest.approx(before.rotation)
            assert after.label == before.label
        assert restored.elements_of(SurfaceKind.OBJECT)[0].label == "Bed"

    def test_snake_case_input_accepted(self):
        data = FloorPlanData.model_validate({
            "elements": [],
            "bounding_box": {"x": 0, "y": 0, "width": 1, "height": 1},
            "room_dimensions": {"width": 1, "height": 2, "depth": 1},
        })
        assert data.bounding_box.width == 1.0

    def test_non_strict_round_trip_keeps_nan(self, make_surface):
        bad = make_surface(SurfaceKind.WALL, math.nan, 0.0, 1.0, 0.1)
        data = FloorPlanBuilder(strict=False).build([bad])
        text = data.to_json()
        assert "NaN" in text
        restored = FloorPlanData.from_json(text)
        assert math.isnan(restored.elements[0].rect.x)
        assert math.isnan(restored.bounding_box.x)
        assert restored.elements[0].rect.width == pytest.approx(1.0)
