"""Floor-plan builder — projects scanned surfaces onto a normalized 2D model."""

from __future__ import annotations
import logging
from typing import Iterable

from floorplan.models import (
    SurfaceRecord, SurfaceKind, KIND_ORDER, ElementType,
    FloorPlanElement, FloorPlanData,
)
from floorplan.core import geometry
from floorplan.core.errors import MalformedGeometryError

logger = logging.getLogger(__name__)


class FloorPlanBuilder:
    """
    Stateless floor-plan builder.

    Takes the surfaces of one scan, projects each to a floor-plan element,
    and returns a complete FloorPlanData. Elements come out grouped as
    walls, doors, windows, openings, objects; input order is kept inside
    each group.

    With ``strict`` (the default) surfaces carrying NaN or infinite
    values are rejected with MalformedGeometryError. Non-strict builders
    pass such values through untouched.
    """

    def __init__(self, strict: bool = True) -> None:
        self.strict = strict

    def build(self, surfaces: Iterable[SurfaceRecord]) -> FloorPlanData:
        surfaces = list(surfaces)
        if self.strict:
            self._validate(surfaces)

        groups: dict[SurfaceKind, list[SurfaceRecord]] = {k: [] for k in KIND_ORDER}
        for surface in surfaces:
            groups[surface.kind].append(surface)

        elements: list[FloorPlanElement] = []
        for kind in KIND_ORDER:
            for surface in groups[kind]:
                elements.append(self._element_from(surface))

        data = FloorPlanData(
            elements=tuple(elements),
            bounding_box=geometry.bounding_box(elements),
            room_dimensions=geometry.room_dimensions(groups[SurfaceKind.WALL]),
        )

        logger.debug(
            "Built floor plan: %s",
            ", ".join(f"{len(groups[k])} {k.value}" for k in KIND_ORDER),
        )
        return data

    def _element_from(self, surface: SurfaceRecord) -> FloorPlanElement:
        if surface.kind == SurfaceKind.OBJECT:
            # Missing categories still produce a labelled object.
            element_type = ElementType.object(surface.category or "")
        else:
            element_type = ElementType(kind=surface.kind)

        return FloorPlanElement(
            rect=geometry.rect_from_surface(surface),
            rotation=geometry.rotation_from_transform(surface.transform),
            type=element_type,
            label=surface.label,
        )

    def _validate(self, surfaces: list[SurfaceRecord]) -> None:
        for index, surface in enumerate(surfaces):
            if not surface.transform.is_finite():
                logger.warning("Rejecting surface #%d: non-finite transform", index)
                raise MalformedGeometryError(index, surface.kind.value, "transform")
            if not surface.dimensions.is_finite():
                logger.warning("Rejecting surface #%d: non-finite dimensions", index)
                raise MalformedGeometryError(index, surface.kind.value, "dimensions")


def build_floor_plan(surfaces: Iterable[SurfaceRecord]) -> FloorPlanData:
    """Build a floor plan with the default (strict) builder."""
    return FloorPlanBuilder().build(surfaces)


def check_floor_plan(data: FloorPlanData) -> None:
    """Raise MalformedGeometryError if a saved plan holds NaN or infinite values."""
    if data.is_finite():
        return
    for index, element in enumerate(data.elements):
        if not element.is_finite():
            logger.warning("Rejecting floor plan: element #%d is non-finite", index)
            field = "rect" if not element.rect.is_finite() else "rotation"
            raise MalformedGeometryError(index, element.kind.value, field)
    field = "boundingBox" if not data.bounding_box.is_finite() else "roomDimensions"
    logger.warning("Rejecting floor plan: non-finite %s", field)
    raise MalformedGeometryError(None, "floor plan", field)
