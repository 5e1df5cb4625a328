"""Normalized 2D floor-plan model and its JSON companion format."""

from __future__ import annotations
import math
from pydantic import model_validator

from .base import ExchangeModel
from .geometry import Rect
from .surfaces import SurfaceKind


class ElementType(ExchangeModel):
    """
    Tagged element kind: wall | door | window | opening | object(category).

    ``category`` is required for objects and rejected for everything else.
    """
    kind: SurfaceKind
    category: str | None = None

    @model_validator(mode="after")
    def _check_category(self) -> ElementType:
        if self.kind == SurfaceKind.OBJECT:
            if self.category is None:
                raise ValueError("object elements need a category")
        elif self.category is not None:
            raise ValueError(f"{self.kind.value} elements do not carry a category")
        return self

    @classmethod
    def wall(cls) -> ElementType:
        return cls(kind=SurfaceKind.WALL)

    @classmethod
    def door(cls) -> ElementType:
        return cls(kind=SurfaceKind.DOOR)

    @classmethod
    def window(cls) -> ElementType:
        return cls(kind=SurfaceKind.WINDOW)

    @classmethod
    def opening(cls) -> ElementType:
        return cls(kind=SurfaceKind.OPENING)

    @classmethod
    def object(cls, category: str) -> ElementType:
        return cls(kind=SurfaceKind.OBJECT, category=category)


class FloorPlanElement(ExchangeModel):
    """Top-down projection of one surface."""
    rect: Rect
    rotation: float = 0.0       # Radians, (-pi, pi]
    type: ElementType
    label: str | None = None    # Furniture display name; None for structure

    @property
    def kind(self) -> SurfaceKind:
        return self.type.kind

    def is_finite(self) -> bool:
        return self.rect.is_finite() and math.isfinite(self.rotation)


class RoomDimensions(ExchangeModel):
    """Room extent derived from walls only. ``height`` is the vertical extent."""
    width: float = 0.0
    height: float = 0.0
    depth: float = 0.0

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.width, self.height, self.depth))


class FloorPlanData(ExchangeModel):
    """The complete floor plan handed to the encoders."""
    elements: tuple[FloorPlanElement, ...] = ()
    bounding_box: Rect = Rect.zero()
    room_dimensions: RoomDimensions = RoomDimensions()

    def elements_of(self, kind: SurfaceKind) -> list[FloorPlanElement]:
        """Elements of one kind, in model order."""
        return [e for e in self.elements if e.type.kind == kind]

    def is_finite(self) -> bool:
        return (
            self.bounding_box.is_finite()
            and self.room_dimensions.is_finite()
            and all(e.is_finite() for e in self.elements)
        )

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, payload: str | bytes) -> FloorPlanData:
        return cls.model_validate_json(payload)
