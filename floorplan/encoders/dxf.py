"""DXF (AutoCAD R2000 / AC1015, ASCII) encoder.

A DXF file is a flat sequence of group-code / value line pairs. The
document written here has a HEADER (version and units), a TABLES
section declaring one layer per element family, an ENTITIES section
with one closed LWPOLYLINE per element plus TEXT for labels and
dimensions, and the EOF marker.

World meters are drawing units (scale 1.0), shifted so the bounding
box minimum sits on the origin. The Y axis is not flipped.
"""

from __future__ import annotations

from floorplan.encoders.base import DocumentEncoder, fmt
from floorplan.models import (
    DxfParams, ExportFormat, ExportParams, FloorPlanData, FloorPlanElement,
    Rect, SurfaceKind,
)

ACAD_VERSION = "AC1015"
LINETYPE = "CONTINUOUS"

# (layer name, ACI color) in TABLES order
LAYERS: tuple[tuple[str, int], ...] = (
    ("WALLS", 7),
    ("DOORS", 3),
    ("WINDOWS", 5),
    ("OBJECTS", 8),
    ("DIMENSIONS", 1),
)
OPENINGS_LAYER = ("OPENINGS", 9)

# Layer per element kind. Openings only get one when emit_openings is set.
ENTITY_LAYERS: dict[SurfaceKind, str] = {
    SurfaceKind.WALL: "WALLS",
    SurfaceKind.DOOR: "DOORS",
    SurfaceKind.WINDOW: "WINDOWS",
    SurfaceKind.OPENING: OPENINGS_LAYER[0],
    SurfaceKind.OBJECT: "OBJECTS",
}


def _dxf_text(text: str) -> str:
    """Escape non-ASCII as ``\\U+XXXX``; AC1015 text is read as ANSI."""
    parts: list[str] = []
    for ch in text:
        code = ord(ch)
        if code < 0x80:
            parts.append(ch)
        elif code <= 0xFFFF:
            parts.append(f"\\U+{code:04X}")
        else:
            # UTF-16 surrogate pair
            code -= 0x10000
            parts.append(f"\\U+{0xD800 + (code >> 10):04X}\\U+{0xDC00 + (code & 0x3FF):04X}")
    return "".join(parts)


class DxfWriter:
    """Accumulates group-code / value pairs."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def pair(self, code: int, value: object) -> None:
        self._lines.append(str(code))
        self._lines.append(fmt(value) if isinstance(value, float) else str(value))

    def begin_section(self, name: str) -> None:
        self.pair(0, "SECTION")
        self.pair(2, name)

    def end_section(self) -> None:
        self.pair(0, "ENDSEC")

    def getvalue(self) -> str:
        return "\n".join(self._lines)


class DxfEncoder(DocumentEncoder):
    """Floor plan as an AutoCAD-compatible ASCII DXF drawing."""

    format = ExportFormat.DXF
    media_type = "application/dxf"

    def get_id(self) -> str:
        return "export.dxf"

    def get_name(self) -> str:
        return self.format.display_name

    def encode(self, data: FloorPlanData, params: ExportParams) -> str:
        p = params.dxf
        w = DxfWriter()

        self._write_header(w, p)
        self._write_tables(w, self._layers(p))

        w.begin_section("ENTITIES")
        box = data.bounding_box
        for kind in self._entity_kinds(p):
            for element in data.elements_of(kind):
                self._write_element(w, element, box, p)
        if params.include_dimensions:
            self._write_dimensions(w, data, p)
        w.end_section()

        w.pair(0, "EOF")
        return w.getvalue()

    def _layers(self, p: DxfParams) -> tuple[tuple[str, int], ...]:
        if p.emit_openings:
            return LAYERS + (OPENINGS_LAYER,)
        return LAYERS

    def _entity_kinds(self, p: DxfParams) -> list[SurfaceKind]:
        kinds = [SurfaceKind.WALL, SurfaceKind.DOOR, SurfaceKind.WINDOW]
        if p.emit_openings:
            kinds.append(SurfaceKind.OPENING)
        kinds.append(SurfaceKind.OBJECT)
        return kinds

    def _write_header(self, w: DxfWriter, p: DxfParams) -> None:
        w.begin_section("HEADER")
        w.pair(9, "$ACADVER")
        w.pair(1, ACAD_VERSION)
        w.pair(9, "$INSUNITS")
        w.pair(70, p.insertion_units)
        w.end_section()

    def _write_tables(self, w: DxfWriter, layers: tuple[tuple[str, int], ...]) -> None:
        w.begin_section("TABLES")
        w.pair(0, "TABLE")
        w.pair(2, "LAYER")
        w.pair(70, len(layers))
        for name, color in layers:
            w.pair(0, "LAYER")
            w.pair(2, name)
            w.pair(70, 0)
            w.pair(62, color)
            w.pair(6, LINETYPE)
        w.pair(0, "ENDTAB")
        w.end_section()

    def _write_element(
        self,
        w: DxfWriter,
        element: FloorPlanElement,
        box: Rect,
        p: DxfParams,
    ) -> None:
        local = element.rect.to_local(box, p.scale)
        layer = ENTITY_LAYERS[element.kind]

        w.pair(0, "LWPOLYLINE")
        w.pair(8, layer)
        w.pair(90, 4)
        w.pair(70, 1)   # closed
        for corner in local.corners():
            w.pair(10, corner.x)
            w.pair(20, corner.y)

        if element.kind == SurfaceKind.OBJECT and element.label:
            self._write_text(
                w, layer, local.mid_x, local.mid_y,
                p.label_text_height, element.label,
            )

    def _write_dimensions(self, w: DxfWriter, data: FloorPlanData, p: DxfParams) -> None:
        dims = data.room_dimensions
        total_w = data.bounding_box.width * p.scale
        total_h = data.bounding_box.height * p.scale

        self._write_text(
            w, "DIMENSIONS", total_w / 2, -p.dimension_offset,
            p.dimension_text_height, f"{dims.width:.2f} m",
        )
        self._write_text(
            w, "DIMENSIONS", total_w + p.dimension_offset, total_h / 2,
            p.dimension_text_height, f"{dims.depth:.2f} m",
        )

    def _write_text(
        self, w: DxfWriter, layer: str, x: float, y: float, height: float, text: str,
    ) -> None:
        w.pair(0, "TEXT")
        w.pair(8, layer)
        w.pair(10, float(x))
        w.pair(20, float(y))
        w.pair(40, float(height))
        # Group values are single lines
        w.pair(1, _dxf_text(" ".join(text.splitlines())))
