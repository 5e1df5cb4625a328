"""API request/response schemas."""

from __future__ import annotations
from pydantic import model_validator

from floorplan.models import FloorPlanData, SurfaceRecord
from floorplan.models.base import ExchangeModel


class SurfacesRequest(ExchangeModel):
    """Request body carrying raw scanner surfaces."""
    surfaces: list[SurfaceRecord]


class ExportRequest(ExchangeModel):
    """Request body for /export/{format}: a saved floor plan or raw surfaces."""
    floor_plan: FloorPlanData | None = None
    surfaces: list[SurfaceRecord] | None = None
    include_dimensions: bool = True

    @model_validator(mode="after")
    def _exactly_one_source(self) -> ExportRequest:
        if (self.floor_plan is None) == (self.surfaces is None):
            raise ValueError("provide exactly one of floorPlan or surfaces")
        return self


class FormatInfo(ExchangeModel):
    id: str
    name: str
    extension: str
    media_type: str


class ErrorResponse(ExchangeModel):
    detail: str
    kind: str
