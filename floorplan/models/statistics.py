"""Scan summary statistics."""

from __future__ import annotations
from pydantic import computed_field

from .base import ExchangeModel
from .geometry import Vector3

NO_ELEMENTS_DETECTED = "No elements detected"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


class ScanStatistics(ExchangeModel):
    """Element counts and approximate floor area for a scan."""
    wall_count: int = 0
    door_count: int = 0
    window_count: int = 0
    opening_count: int = 0
    object_count: int = 0
    floor_area: float = 0.0     # Square meters
    room_center: Vector3 | None = None     # World-space centre of the walls

    @computed_field
    @property
    def total_elements(self) -> int:
        return (
            self.wall_count + self.door_count + self.window_count
            + self.opening_count + self.object_count
        )

    @computed_field
    @property
    def summary(self) -> str:
        """Short description, e.g. "4 walls, 1 door, 12.0 m² floor"."""
        parts: list[str] = []
        if self.wall_count > 0:
            parts.append(_plural(self.wall_count, "wall"))
        if self.door_count > 0:
            parts.append(_plural(self.door_count, "door"))
        if self.window_count > 0:
            parts.append(_plural(self.window_count, "window"))
        if self.object_count > 0:
            parts.append(_plural(self.object_count, "object"))
        if self.floor_area > 0:
            parts.append(f"{self.floor_area:.1f} m² floor")
        return ", ".join(parts) if parts else NO_ELEMENTS_DETECTED
