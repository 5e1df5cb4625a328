"""Shared test fixtures for floor-plan building and export tests."""
import math

import pytest

from floorplan.models import (
    Dimensions, ElementType, FloorPlanData, FloorPlanElement, Rect,
    RoomDimensions, SurfaceKind, SurfaceRecord, Transform, Vector3,
)
from floorplan.core.builder import FloorPlanBuilder


def _surface(kind, x, z, width, depth, yaw=0.0, y=1.25, height=2.5, category=None):
    return SurfaceRecord(
        kind=kind,
        transform=Transform.from_yaw(yaw, Vector3(x=x, y=y, z=z)),
        dimensions=Dimensions(width=width, height=height, depth=depth),
        category=category,
    )


@pytest.fixture
def make_surface():
    """Factory: make_surface(kind, x, z, width, depth, yaw=0, ...)."""
    return _surface


@pytest.fixture
def room_surfaces():
    """A 4 x 3 m room: four walls, a door, a window, an opening and a bed.

    Deliberately interleaved so the builder has to regroup by kind.
    """
    return [
        _surface(SurfaceKind.OBJECT, 3.0, 1.5, 1.6, 2.0, y=0.3, height=0.6, category="bed"),
        _surface(SurfaceKind.WALL, 2.0, 0.0, 4.0, 0.1),
        _surface(SurfaceKind.DOOR, 2.0, 3.0, 0.9, 0.1, y=1.0, height=2.0),
        _surface(SurfaceKind.WALL, 2.0, 3.0, 4.0, 0.1),
        _surface(SurfaceKind.WALL, 0.0, 1.5, 3.0, 0.1, yaw=math.pi / 2),
        _surface(SurfaceKind.OPENING, 0.0, 1.5, 1.0, 0.1, yaw=math.pi / 2, y=1.0, height=2.0),
        _surface(SurfaceKind.WINDOW, 2.0, 0.0, 1.2, 0.1, y=1.5, height=1.0),
        _surface(SurfaceKind.WALL, 4.0, 1.5, 3.0, 0.1, yaw=math.pi / 2),
    ]


@pytest.fixture
def room_plan(room_surfaces):
    return FloorPlanBuilder().build(room_surfaces)


@pytest.fixture
def single_wall_plan():
    """One 2 x 3 m wall rect whose bounding box is the rect itself."""
    rect = Rect(x=0.0, y=0.0, width=2.0, height=3.0)
    return FloorPlanData(
        elements=(FloorPlanElement(rect=rect, type=ElementType.wall()),),
        bounding_box=rect,
        room_dimensions=RoomDimensions(width=2.0, height=2.5, depth=3.0),
    )


@pytest.fixture
def one_of_each_plan():
    """One element of every kind, listed out of drawing order."""
    def el(x, y, w, h, element_type, label=None):
        return FloorPlanElement(
            rect=Rect(x=x, y=y, width=w, height=h), type=element_type, label=label,
        )

    elements = (
        el(2.0, 1.0, 1.0, 0.5, ElementType.object("sofa"), "Sofa"),
        el(0.0, 0.0, 4.0, 0.1, ElementType.wall()),
        el(1.0, 2.9, 1.0, 0.1, ElementType.opening()),
        el(3.0, 2.9, 0.8, 0.1, ElementType.door()),
        el(1.5, 0.0, 1.2, 0.1, ElementType.window()),
    )
    return FloorPlanData(
        elements=elements,
        bounding_box=Rect(x=0.0, y=0.0, width=4.0, height=3.0),
        room_dimensions=RoomDimensions(width=3.456, height=2.4, depth=2.0),
    )


@pytest.fixture
def empty_plan():
    return FloorPlanBuilder().build([])
