"""Export formats and per-format export parameters."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field


class ExportFormat(str, Enum):
    SVG = "svg"
    DXF = "dxf"

    @property
    def file_extension(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ExportFormat.SVG: "SVG (Vector Graphics)",
    ExportFormat.DXF: "DXF (AutoCAD)",
}


class SvgParams(BaseModel):
    """SVG layout. Distances are SVG user units."""
    scale: float = Field(default=100.0, gt=0)   # Units per meter
    padding: float = 50.0               # Margin on every side
    dimension_offset: float = 30.0      # Gap between plan and dimension lines
    label_baseline_offset: float = 4.0  # Nudges labels onto the visual centre
    rotate_elements: bool = True        # Rotate rects about their centre like the live view


class DxfParams(BaseModel):
    """DXF layout. Distances are drawing units (meters at scale 1.0)."""
    scale: float = Field(default=1.0, gt=0)
    insertion_units: int = 6            # $INSUNITS 6 = meters
    label_text_height: float = 0.15
    dimension_text_height: float = 0.2
    dimension_offset: float = 0.3
    emit_openings: bool = False         # Openings get their own OPENINGS layer when enabled


class ExportParams(BaseModel):
    """User-adjustable export options."""
    include_dimensions: bool = True
    svg: SvgParams = Field(default_factory=SvgParams)
    dxf: DxfParams = Field(default_factory=DxfParams)
