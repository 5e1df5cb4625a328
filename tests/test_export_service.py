"""Tests for services/export_service.py and core/registry.py."""
import math
from datetime import datetime

import pytest

from floorplan.core.builder import FloorPlanBuilder
from floorplan.core.errors import MalformedGeometryError, UnsupportedFormatError
from floorplan.core.registry import EncoderRegistry, create_default_registry
from floorplan.encoders.dxf import DxfEncoder
from floorplan.encoders.svg import SvgEncoder
from floorplan.models import (
    ExportFormat, ExportParams, FloorPlanData, Rect, RoomDimensions, SvgParams,
)
from floorplan.services.export_service import ExportService


@pytest.fixture
def service():
    return ExportService()


class TestRegistry:
    def test_default_encoders(self):
        registry = create_default_registry()
        assert isinstance(registry.get_encoder(ExportFormat.SVG), SvgEncoder)
        assert isinstance(registry.get_encoder("dxf"), DxfEncoder)

    def test_unknown_format(self):
        with pytest.raises(UnsupportedFormatError) as info:
            create_default_registry().get_encoder("pdf")
        assert info.value.kind == "unsupported-format"
        assert "pdf" in str(info.value)

    def test_unregistered_format(self):
        registry = EncoderRegistry()
        registry.register(SvgEncoder())
        with pytest.raises(UnsupportedFormatError):
            registry.get_encoder(ExportFormat.DXF)

    def test_unregister(self):
        registry = create_default_registry()
        registry.unregister(ExportFormat.SVG)
        assert [e.get_id() for e in registry.list_encoders()] == ["export.dxf"]


class TestExport:
    def test_dispatch_svg(self, service, room_plan):
        doc = service.export(room_plan, ExportFormat.SVG)
        assert doc == SvgEncoder().encode(room_plan, ExportParams())

    def test_dispatch_dxf(self, service, room_plan):
        doc = service.export(room_plan, "dxf", include_dimensions=False)
        assert doc == DxfEncoder().encode(room_plan, ExportParams(include_dimensions=False))

    def test_flag_overrides_params(self, service, one_of_each_plan):
        params = ExportParams(include_dimensions=True, svg=SvgParams(scale=10.0))
        doc = service.export(one_of_each_plan, ExportFormat.SVG, False, params)
        assert 'class="dimension"' not in doc
        assert 'width="40"' in doc
        # Caller's params are left untouched
        assert params.include_dimensions is True

    def test_unknown_format(self, service, room_plan):
        with pytest.raises(UnsupportedFormatError):
            service.export(room_plan, "obj")

    def test_build_then_export(self, service, room_surfaces):
        data = service.build(room_surfaces)
        doc = service.export(data, ExportFormat.DXF)
        assert doc.count("LWPOLYLINE") == 7


class TestSavedPlanChecks:
    def test_non_finite_room_dimensions_rejected(self, service, single_wall_plan):
        bad = single_wall_plan.model_copy(
            update={"room_dimensions": RoomDimensions(width=math.nan, height=2.5, depth=3.0)},
        )
        with pytest.raises(MalformedGeometryError) as excinfo:
            service.export(bad, ExportFormat.DXF)
        assert excinfo.value.index is None
        assert excinfo.value.field == "roomDimensions"

    def test_non_finite_element_rejected(self, service, one_of_each_plan):
        elements = list(one_of_each_plan.elements)
        elements[3] = elements[3].model_copy(update={"rotation": math.inf})
        bad = one_of_each_plan.model_copy(update={"elements": tuple(elements)})
        with pytest.raises(MalformedGeometryError) as excinfo:
            service.export(bad, ExportFormat.SVG)
        assert (excinfo.value.index, excinfo.value.surface_kind) == (3, "door")
        assert excinfo.value.field == "rotation"

    def test_non_strict_service_exports_as_is(self):
        service = ExportService(builder=FloorPlanBuilder(strict=False))
        bad = FloorPlanData(bounding_box=Rect(x=math.nan, y=0.0, width=1.0, height=1.0))
        assert service.export(bad, ExportFormat.DXF).endswith("EOF")


class TestStatistics:
    def test_counts(self, service, room_surfaces):
        stats = service.statistics(room_surfaces)
        assert (stats.wall_count, stats.door_count, stats.window_count) == (4, 1, 1)
        assert (stats.opening_count, stats.object_count) == (1, 1)
        assert stats.total_elements == 8
        assert stats.floor_area == pytest.approx(49.0)
        assert stats.summary == "4 walls, 1 door, 1 window, 1 object, 49.0 m² floor"
        center = stats.room_center
        assert (center.x, center.y, center.z) == pytest.approx((2.0, 1.25, 1.5))

    def test_empty(self, service):
        stats = service.statistics([])
        assert stats.total_elements == 0
        assert stats.summary == "No elements detected"
        assert stats.room_center is None


class TestFilenames:
    def test_suggested_filename(self, service):
        when = datetime(2024, 1, 31, 15, 45, 0)
        assert service.suggested_filename(ExportFormat.DXF, when) == "FloorPlan_20240131_154500.dxf"
        assert service.suggested_filename("svg", when) == "FloorPlan_20240131_154500.svg"

    def test_list_formats(self, service):
        formats = {f["id"]: f for f in service.list_formats()}
        assert formats["svg"]["media_type"] == "image/svg+xml"
        assert formats["dxf"]["name"] == "DXF (AutoCAD)"
