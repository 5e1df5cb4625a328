"""Room geometry — surface projection, bounding boxes, room extent and area."""

from __future__ import annotations
import math
from typing import Iterable

from floorplan.models import (
    FloorPlanElement, Rect, RoomDimensions, SurfaceRecord, Transform, Vector3,
)


def rect_from_surface(surface: SurfaceRecord) -> Rect:
    """Top-down footprint: world X/Z position minus half the X/Z extent."""
    position = surface.transform.position
    dims = surface.dimensions
    return Rect(
        x=position.x - dims.width / 2,
        y=position.z - dims.depth / 2,
        width=dims.width,
        height=dims.depth,
    )


def rotation_from_transform(transform: Transform) -> float:
    """Heading of the local X axis on the floor plane, in (-pi, pi]."""
    axis = transform.local_x_axis
    angle = math.atan2(axis.z, axis.x)
    if angle <= -math.pi:
        angle += 2 * math.pi
    # Fold -0.0 into 0.0
    return angle + 0.0


def bounding_box(elements: Iterable[FloorPlanElement]) -> Rect:
    """Smallest rectangle containing every element rect; zero when empty."""
    box: Rect | None = None
    for element in elements:
        box = element.rect if box is None else box.union(element.rect)
    return box if box is not None else Rect.zero()


def room_dimensions(walls: Iterable[SurfaceRecord]) -> RoomDimensions:
    """Width/height/depth of the box spanned by wall extents."""
    min_x = min_y = min_z = math.inf
    max_x = max_y = max_z = -math.inf
    found = False

    for wall in walls:
        found = True
        p = wall.transform.position
        hw = wall.dimensions.width / 2
        hh = wall.dimensions.height / 2
        hd = wall.dimensions.depth / 2
        min_x, max_x = min(min_x, p.x - hw), max(max_x, p.x + hw)
        min_y, max_y = min(min_y, p.y - hh), max(max_y, p.y + hh)
        min_z, max_z = min(min_z, p.z - hd), max(max_z, p.z + hd)

    if not found:
        return RoomDimensions()

    return RoomDimensions(
        width=max_x - min_x,
        height=max_y - min_y,
        depth=max_z - min_z,
    )


def approximate_floor_area(walls: Iterable[SurfaceRecord]) -> float:
    """
    Footprint area of the walls in square meters.

    Each wall contributes its centre +/- half its width on both floor
    axes, which covers walls running along X as well as along Z.
    """
    min_x = min_z = math.inf
    max_x = max_z = -math.inf
    found = False

    for wall in walls:
        found = True
        p = wall.transform.position
        hw = wall.dimensions.width / 2
        min_x, max_x = min(min_x, p.x - hw), max(max_x, p.x + hw)
        min_z, max_z = min(min_z, p.z - hw), max(max_z, p.z + hw)

    if not found:
        return 0.0
    return (max_x - min_x) * (max_z - min_z)


def room_center(walls: Iterable[SurfaceRecord]) -> Vector3 | None:
    """Mean wall position, or None when there are no walls."""
    positions = [w.transform.position for w in walls]
    if not positions:
        return None
    n = len(positions)
    return Vector3(
        x=sum(p.x for p in positions) / n,
        y=sum(p.y for p in positions) / n,
        z=sum(p.z for p in positions) / n,
    )
