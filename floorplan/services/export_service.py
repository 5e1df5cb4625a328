"""High-level floor-plan service — facade for the API layer and embedding apps."""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Iterable

from floorplan.models import (
    ExportFormat, ExportParams, FloorPlanData, ScanStatistics,
    SurfaceKind, SurfaceRecord,
)
from floorplan.core import geometry
from floorplan.core.builder import FloorPlanBuilder, check_floor_plan
from floorplan.core.registry import EncoderRegistry, create_default_registry

logger = logging.getLogger(__name__)

FILE_PREFIX = "FloorPlan"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class ExportService:
    """Builds floor plans from surfaces and dispatches them to encoders."""

    def __init__(
        self,
        registry: EncoderRegistry | None = None,
        builder: FloorPlanBuilder | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.builder = builder or FloorPlanBuilder()

    def build(self, surfaces: Iterable[SurfaceRecord]) -> FloorPlanData:
        return self.builder.build(surfaces)

    def export(
        self,
        data: FloorPlanData,
        format: ExportFormat | str,
        include_dimensions: bool = True,
        params: ExportParams | None = None,
    ) -> str:
        """Serialize ``data`` in ``format``. Pure dispatch, no file I/O.

        A strict service refuses plans carrying NaN or infinite values.
        """
        encoder = self.registry.get_encoder(format)
        if self.builder.strict:
            check_floor_plan(data)
        if params is None:
            params = ExportParams()
        params = params.model_copy(update={"include_dimensions": include_dimensions})

        document = encoder.encode(data, params)
        logger.info(
            "Exported %d elements as %s (%d chars)",
            len(data.elements), encoder.format.value, len(document),
        )
        return document

    def statistics(self, surfaces: Iterable[SurfaceRecord]) -> ScanStatistics:
        surfaces = list(surfaces)
        counts = {kind: 0 for kind in SurfaceKind}
        for surface in surfaces:
            counts[surface.kind] += 1
        walls = [s for s in surfaces if s.kind == SurfaceKind.WALL]
        return ScanStatistics(
            wall_count=counts[SurfaceKind.WALL],
            door_count=counts[SurfaceKind.DOOR],
            window_count=counts[SurfaceKind.WINDOW],
            opening_count=counts[SurfaceKind.OPENING],
            object_count=counts[SurfaceKind.OBJECT],
            floor_area=geometry.approximate_floor_area(walls),
            room_center=geometry.room_center(walls),
        )

    def suggested_filename(
        self, format: ExportFormat | str, when: datetime | None = None,
    ) -> str:
        """E.g. ``FloorPlan_20240131_154500.dxf``."""
        encoder = self.registry.get_encoder(format)
        when = when or datetime.now()
        return f"{FILE_PREFIX}_{when.strftime(TIMESTAMP_FORMAT)}.{encoder.file_extension}"

    def list_formats(self) -> list[dict[str, str]]:
        return [
            {
                "id": e.format.value,
                "name": e.get_name(),
                "extension": e.file_extension,
                "media_type": e.media_type,
            }
            for e in self.registry.list_encoders()
        ]
