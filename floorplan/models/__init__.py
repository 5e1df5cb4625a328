from .geometry import Point2D, Vector3, Rect, Transform
from .surfaces import (
    SurfaceKind, ObjectCategory, Dimensions, SurfaceRecord,
    KIND_ORDER, label_for_category,
)
from .floorplan import ElementType, FloorPlanElement, RoomDimensions, FloorPlanData
from .parameters import ExportFormat, SvgParams, DxfParams, ExportParams
from .statistics import ScanStatistics

__all__ = [
    "Point2D", "Vector3", "Rect", "Transform",
    "SurfaceKind", "ObjectCategory", "Dimensions", "SurfaceRecord",
    "KIND_ORDER", "label_for_category",
    "ElementType", "FloorPlanElement", "RoomDimensions", "FloorPlanData",
    "ExportFormat", "SvgParams", "DxfParams", "ExportParams",
    "ScanStatistics",
]
