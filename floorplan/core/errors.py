"""Exception hierarchy for floor-plan building and export."""

from __future__ import annotations


class FloorPlanError(Exception):
    """Base class. ``kind`` is a stable, machine-readable error identifier."""

    kind: str = "floor-plan-error"


class MalformedGeometryError(FloorPlanError):
    """A surface or floor-plan element carried NaN or infinite values.

    ``index`` is None when the bad value sits on the plan itself
    (bounding box or room dimensions) rather than on one element.
    """

    kind = "malformed-geometry"

    def __init__(self, index: int | None, surface_kind: str, field: str) -> None:
        self.index = index
        self.surface_kind = surface_kind
        self.field = field
        where = surface_kind if index is None else f"#{index} ({surface_kind})"
        super().__init__(f"{where} has a non-finite {field}")


class UnsupportedFormatError(FloorPlanError):
    """No encoder is registered for the requested export format."""

    kind = "unsupported-format"

    def __init__(self, format_id: str) -> None:
        self.format_id = format_id
        super().__init__(f"no encoder registered for format '{format_id}'")
