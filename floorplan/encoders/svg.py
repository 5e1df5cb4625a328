"""SVG 1.1 encoder.

Draws the plan at a fixed scale (1 m = 100 user units by default) inside a
padding margin. Elements are drawn as rects, one group per kind, in the
order walls, doors, windows, openings, objects; object labels and the
optional width/depth dimensions are text on top.
"""

from __future__ import annotations
import math
import re
from xml.sax.saxutils import escape

from floorplan.encoders.base import DocumentEncoder, fmt
from floorplan.models import (
    ExportFormat, ExportParams, FloorPlanData, FloorPlanElement,
    KIND_ORDER, Rect, SurfaceKind, SvgParams,
)

SVG_NS = "http://www.w3.org/2000/svg"

STYLE_RULES = (
    ".wall { fill: none; stroke: #333333; stroke-width: 8; }",
    ".door { fill: none; stroke: #8B4513; stroke-width: 4; }",
    ".window { fill: #87CEEB; stroke: #4169E1; stroke-width: 2; fill-opacity: 0.5; }",
    ".opening { fill: none; stroke: #999999; stroke-width: 2; stroke-dasharray: 5,5; }",
    ".object { fill: #E0E0E0; stroke: #666666; stroke-width: 1; }",
    ".dimension { font-family: Arial, sans-serif; font-size: 12px; fill: #666666; }",
    ".label { font-family: Arial, sans-serif; font-size: 10px; fill: #333333; text-anchor: middle; }",
)

ARROW_MARKER = (
    '<defs>\n'
    '    <marker id="arrow" viewBox="0 0 10 10" refX="5" refY="5" '
    'markerWidth="6" markerHeight="6" orient="auto-start-reverse">\n'
    '        <path d="M 0 0 L 10 5 L 0 10 z" fill="#666666"/>\n'
    '    </marker>\n'
    '</defs>'
)

# CSS class per element kind
CSS_CLASSES: dict[SurfaceKind, str] = {
    SurfaceKind.WALL: "wall",
    SurfaceKind.DOOR: "door",
    SurfaceKind.WINDOW: "window",
    SurfaceKind.OPENING: "opening",
    SurfaceKind.OBJECT: "object",
}


def _canvas(value: float) -> int:
    return int(value) if math.isfinite(value) else 0


# Characters XML 1.0 forbids even when escaped
XML_INVALID_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def _xml_text(text: str) -> str:
    return escape(XML_INVALID_CHARS.sub("", text))


class SvgEncoder(DocumentEncoder):
    """Floor plan as a standalone SVG document."""

    format = ExportFormat.SVG
    media_type = "image/svg+xml"

    def get_id(self) -> str:
        return "export.svg"

    def get_name(self) -> str:
        return self.format.display_name

    def encode(self, data: FloorPlanData, params: ExportParams) -> str:
        p = params.svg
        box = data.bounding_box
        plan_w = box.width * p.scale
        plan_h = box.height * p.scale
        width = _canvas(plan_w + p.padding * 2)
        height = _canvas(plan_h + p.padding * 2)

        out: list[str] = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="{SVG_NS}" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}">',
            "<title>Floor Plan</title>",
            "<style>",
        ]
        out.extend(f"    {rule}" for rule in STYLE_RULES)
        out.append("</style>")
        if params.include_dimensions:
            out.append(ARROW_MARKER)
        out.append(f'<g transform="translate({fmt(p.padding)}, {fmt(p.padding)})">')

        for kind in KIND_ORDER:
            for element in data.elements_of(kind):
                self._draw_element(out, element, box, p)

        if params.include_dimensions:
            self._draw_dimensions(out, data, p)

        out.append("</g>")
        out.append("</svg>")
        return "\n".join(out)

    def _draw_element(
        self,
        out: list[str],
        element: FloorPlanElement,
        box: Rect,
        p: SvgParams,
    ) -> None:
        local = element.rect.to_local(box, p.scale)

        attrs = (
            f'class="{CSS_CLASSES[element.kind]}" '
            f'x="{fmt(local.x)}" y="{fmt(local.y)}" '
            f'width="{fmt(local.width)}" height="{fmt(local.height)}"'
        )
        # Rotations that print as 0 degrees are left off
        degrees = fmt(math.degrees(element.rotation))
        if p.rotate_elements and degrees != "0":
            attrs += f' transform="rotate({degrees}, {fmt(local.mid_x)}, {fmt(local.mid_y)})"'
        out.append(f"    <rect {attrs}/>")

        if element.kind == SurfaceKind.OBJECT and element.label:
            out.append(
                f'    <text class="label" x="{fmt(local.mid_x)}" '
                f'y="{fmt(local.mid_y + p.label_baseline_offset)}">{_xml_text(element.label)}</text>'
            )

    def _draw_dimensions(self, out: list[str], data: FloorPlanData, p: SvgParams) -> None:
        dims = data.room_dimensions
        plan_w = data.bounding_box.width * p.scale
        plan_h = data.bounding_box.height * p.scale

        # Width, below the plan
        bottom_y = plan_h + p.dimension_offset
        out.append(
            f'    <line x1="0" y1="{fmt(bottom_y)}" x2="{fmt(plan_w)}" y2="{fmt(bottom_y)}" '
            'stroke="#666" stroke-width="1" marker-start="url(#arrow)" marker-end="url(#arrow)"/>'
        )
        out.append(
            f'    <text class="dimension" x="{fmt(plan_w / 2)}" y="{fmt(bottom_y + 15)}" '
            f'text-anchor="middle">{dims.width:.2f}m</text>'
        )

        # Depth, right of the plan, reading top to bottom
        right_x = plan_w + p.dimension_offset
        text_x = right_x + 10
        text_y = plan_h / 2
        out.append(
            f'    <line x1="{fmt(right_x)}" y1="0" x2="{fmt(right_x)}" y2="{fmt(plan_h)}" '
            'stroke="#666" stroke-width="1"/>'
        )
        out.append(
            f'    <text class="dimension" x="{fmt(text_x)}" y="{fmt(text_y)}" '
            f'transform="rotate(90, {fmt(text_x)}, {fmt(text_y)})">{dims.depth:.2f}m</text>'
        )
