"""Geometric primitives used throughout the floor-plan pipeline."""

from __future__ import annotations
import math
from pydantic import field_validator

from .base import ExchangeModel


class Point2D(ExchangeModel):
    """Point on the floor plan (world X maps to x, world Z maps to y)."""
    x: float
    y: float


class Vector3(ExchangeModel):
    """Point or direction in 3D world space (Y is up)."""
    x: float
    y: float
    z: float


class Rect(ExchangeModel):
    """Axis-aligned rectangle in floor-plan meters."""
    x: float
    y: float
    width: float
    height: float

    @field_validator("width", "height")
    @classmethod
    def _non_negative(cls, value: float) -> float:
        # NaN passes on purpose: non-strict builds propagate it unchanged.
        if value < 0:
            raise ValueError("rectangle extent must be >= 0")
        return value

    @classmethod
    def zero(cls) -> Rect:
        return cls(x=0.0, y=0.0, width=0.0, height=0.0)

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> Rect:
        return cls(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.width, self.height))

    def to_local(self, origin: Rect, scale: float) -> Rect:
        """This rect relative to ``origin``'s minimum corner, scaled."""
        return Rect(
            x=(self.x - origin.min_x) * scale,
            y=(self.y - origin.min_y) * scale,
            width=self.width * scale,
            height=self.height * scale,
        )

    def corners(self) -> list[Point2D]:
        """Corners in (min,min) (max,min) (max,max) (min,max) order."""
        return [
            Point2D(x=self.min_x, y=self.min_y),
            Point2D(x=self.max_x, y=self.min_y),
            Point2D(x=self.max_x, y=self.max_y),
            Point2D(x=self.min_x, y=self.max_y),
        ]

    def union(self, other: Rect) -> Rect:
        return Rect.from_bounds(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )


class Transform(ExchangeModel):
    """
    4x4 spatial transform stored column-major, as scanners report it.

    Column 0 is the local X axis, column 1 local Y, column 2 local Z and
    column 3 the world translation.
    """
    columns: tuple[
        tuple[float, float, float, float],
        tuple[float, float, float, float],
        tuple[float, float, float, float],
        tuple[float, float, float, float],
    ]

    @classmethod
    def identity(cls) -> Transform:
        return cls.from_yaw(0.0, Vector3(x=0.0, y=0.0, z=0.0))

    @classmethod
    def from_yaw(cls, angle: float, position: Vector3) -> Transform:
        """Rotation of ``angle`` radians about the vertical axis plus a translation.

        The local X axis ends up at ``(cos a, 0, sin a)`` so that
        ``atan2(x_axis.z, x_axis.x)`` recovers ``angle``.
        """
        c, s = math.cos(angle), math.sin(angle)
        return cls(columns=(
            (c, 0.0, s, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (-s, 0.0, c, 0.0),
            (position.x, position.y, position.z, 1.0),
        ))

    @property
    def position(self) -> Vector3:
        col = self.columns[3]
        return Vector3(x=col[0], y=col[1], z=col[2])

    @property
    def local_x_axis(self) -> Vector3:
        col = self.columns[0]
        return Vector3(x=col[0], y=col[1], z=col[2])

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for col in self.columns for v in col)
