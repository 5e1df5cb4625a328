"""Abstract base class for all floor-plan document encoders.

Every export format implements this interface. Encoders are:
- Pure: the same FloorPlanData and params always give the same text
- Self-contained: each owns its coordinate transform, units and styling
- Line-buffered: output is collected in a list and joined once
"""

from __future__ import annotations
import math
from abc import ABC, abstractmethod

from floorplan.models import ExportFormat, ExportParams, FloorPlanData


class DocumentEncoder(ABC):
    """
    Base class for all document encoders.

    Subclasses set ``format`` and ``media_type`` and implement ``encode()``.
    The registry looks encoders up by ``format``.
    """

    format: ExportFormat
    media_type: str = "text/plain"

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this encoder (e.g., 'export.svg')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'SVG (Vector Graphics)')."""
        ...

    @abstractmethod
    def encode(self, data: FloorPlanData, params: ExportParams) -> str:
        """Serialize the floor plan to a complete document."""
        ...

    @property
    def file_extension(self) -> str:
        return self.format.file_extension


def fmt(value: float, places: int = 6) -> str:
    """Compact decimal rendering: 200.0 -> '200', 0.30000000000000004 -> '0.3'."""
    if not math.isfinite(value):
        return str(value)
    text = f"{value:.{places}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text
