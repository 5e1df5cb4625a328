"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Response

from floorplan.models import FloorPlanData, ScanStatistics
from floorplan.services.export_service import ExportService
from floorplan.api.schemas import (
    ErrorResponse, ExportRequest, FormatInfo, SurfacesRequest,
)

router = APIRouter()

# Shared service instance
_service = ExportService()


@router.post(
    "/floorplan",
    response_model=FloorPlanData,
    responses={422: {"model": ErrorResponse}},
)
async def build_floor_plan(request: SurfacesRequest) -> FloorPlanData:
    """Project scanned surfaces onto a 2D floor plan."""
    return _service.build(request.surfaces)


@router.post(
    "/export/{format}",
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def export_floor_plan(format: str, request: ExportRequest) -> Response:
    """Render a floor plan (saved, or built from surfaces) as SVG or DXF."""
    encoder = _service.registry.get_encoder(format)
    data = request.floor_plan
    if data is None:
        data = _service.build(request.surfaces or [])

    document = _service.export(data, encoder.format, request.include_dimensions)
    filename = _service.suggested_filename(encoder.format)
    return Response(
        content=document,
        media_type=encoder.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/statistics", response_model=ScanStatistics)
async def scan_statistics(request: SurfacesRequest) -> ScanStatistics:
    """Element counts and approximate floor area."""
    return _service.statistics(request.surfaces)


@router.get("/formats", response_model=list[FormatInfo])
async def list_formats() -> list[FormatInfo]:
    """List all available export formats."""
    return [FormatInfo(**f) for f in _service.list_formats()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
