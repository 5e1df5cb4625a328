"""Scanner input models — one record per detected wall, door, window, opening or object."""

from __future__ import annotations
import math
from enum import Enum
from pydantic import field_validator, model_validator

from .base import ExchangeModel
from .geometry import Transform


class SurfaceKind(str, Enum):
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
    OPENING = "opening"
    OBJECT = "object"


# Floor-plan drawing order.
KIND_ORDER: tuple[SurfaceKind, ...] = (
    SurfaceKind.WALL,
    SurfaceKind.DOOR,
    SurfaceKind.WINDOW,
    SurfaceKind.OPENING,
    SurfaceKind.OBJECT,
)


class ObjectCategory(str, Enum):
    STORAGE = "storage"
    REFRIGERATOR = "refrigerator"
    STOVE = "stove"
    BED = "bed"
    SINK = "sink"
    WASHER_DRYER = "washerDryer"
    TOILET = "toilet"
    BATHTUB = "bathtub"
    OVEN = "oven"
    DISHWASHER = "dishwasher"
    TABLE = "table"
    SOFA = "sofa"
    CHAIR = "chair"
    FIREPLACE = "fireplace"
    TELEVISION = "television"
    STAIRS = "stairs"


CATEGORY_LABELS: dict[str, str] = {
    ObjectCategory.STORAGE.value: "Storage",
    ObjectCategory.REFRIGERATOR.value: "Fridge",
    ObjectCategory.STOVE.value: "Stove",
    ObjectCategory.BED.value: "Bed",
    ObjectCategory.SINK.value: "Sink",
    ObjectCategory.WASHER_DRYER.value: "Washer",
    ObjectCategory.TOILET.value: "Toilet",
    ObjectCategory.BATHTUB.value: "Bathtub",
    ObjectCategory.OVEN.value: "Oven",
    ObjectCategory.DISHWASHER.value: "Dishwasher",
    ObjectCategory.TABLE.value: "Table",
    ObjectCategory.SOFA.value: "Sofa",
    ObjectCategory.CHAIR.value: "Chair",
    ObjectCategory.FIREPLACE.value: "Fireplace",
    ObjectCategory.TELEVISION.value: "TV",
    ObjectCategory.STAIRS.value: "Stairs",
}

FALLBACK_LABEL = "Object"


def label_for_category(category: str | ObjectCategory | None) -> str:
    """Display name for a furniture category; unknown categories get "Object"."""
    if isinstance(category, ObjectCategory):
        category = category.value
    if not category:
        return FALLBACK_LABEL
    return CATEGORY_LABELS.get(category, FALLBACK_LABEL)


class Dimensions(ExchangeModel):
    """3D extent of a surface along its local X (width), Y (height) and Z (depth) axes."""
    width: float
    height: float
    depth: float

    @field_validator("width", "height", "depth")
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("extent must be >= 0")
        return value

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.width, self.height, self.depth))


class SurfaceRecord(ExchangeModel):
    """A single element detected by the room scanner."""
    kind: SurfaceKind
    transform: Transform
    dimensions: Dimensions
    # Only meaningful for objects. Kept as a plain string so categories
    # added by newer scanners still parse.
    category: str | None = None

    @model_validator(mode="after")
    def _category_only_on_objects(self) -> SurfaceRecord:
        if self.kind != SurfaceKind.OBJECT and self.category is not None:
            raise ValueError(f"{self.kind.value} surfaces do not carry a category")
        return self

    @property
    def label(self) -> str | None:
        if self.kind != SurfaceKind.OBJECT:
            return None
        return label_for_category(self.category)
