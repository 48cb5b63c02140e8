"""Render a classified caption block as SVG.

Each line becomes one path whose four corners are drawn in one of three
styles:

    convex  — ordinary rounded corner (outer edge of the block)
    square  — flush or welded edge
    fillet  — square corner plus a concave flare into the neighbour's row,
              used where a line is narrower than the one it touches

Boxes stack without vertical gaps so the paths read as one outline.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from captionkit.config import Settings
from captionkit.engine.classifier import Alignment, DecorationResult, classify
from captionkit.engine.lines import LineModel
from captionkit.engine.metrics import effective_font_size
from captionkit.engine.style import RenderConfig
from captionkit.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)


class CornerStyle(str, enum.Enum):
    CONVEX = "convex"
    SQUARE = "square"
    FILLET = "fillet"


@dataclass(frozen=True)
class CaptionGeometry:
    base_font_size: float = 48.0
    line_height_em: float = 1.35
    block_margin: float = 50.0
    font_family: str = "Arial, Helvetica, sans-serif"
    font_weight: str = "700"

    @classmethod
    def from_settings(cls, settings: Settings) -> CaptionGeometry:
        return cls(
            base_font_size=settings.base_font_size,
            line_height_em=settings.line_height_em,
            block_margin=settings.block_margin,
            font_family=settings.font_family,
            font_weight=settings.font_weight,
        )


@dataclass
class LineBox:
    x: float
    y: float
    width: float
    height: float
    radius: float
    font_size: float
    corners: dict[str, CornerStyle]


@dataclass
class RenderedCaption:
    svg: str
    width: float
    height: float
    decorations: list[DecorationResult]
    boxes: list[LineBox]


def _edge_corner(
    has_neighbour: bool,
    connected: bool,
    flagged: bool,
    neighbour_flagged: bool,
) -> CornerStyle:
    if not has_neighbour:
        return CornerStyle.CONVEX
    if connected:
        return CornerStyle.SQUARE
    if flagged:
        return CornerStyle.FILLET
    if neighbour_flagged:
        return CornerStyle.CONVEX
    return CornerStyle.SQUARE


def corner_styles(decorations: Sequence[DecorationResult], index: int) -> dict[str, CornerStyle]:
    """Resolve the four corner styles of one line from the classification."""
    d = decorations[index]
    above = decorations[index - 1] if index > 0 else None
    below = decorations[index + 1] if index + 1 < len(decorations) else None

    styles: dict[str, CornerStyle] = {}
    for side in ("left", "right"):
        styles[f"top_{side}"] = _edge_corner(
            above is not None,
            d.connect_top,
            getattr(d, f"round_top_{side}"),
            above is not None and getattr(above, f"round_bottom_{side}"),
        )
        styles[f"bottom_{side}"] = _edge_corner(
            below is not None,
            d.connect_bottom,
            getattr(d, f"round_bottom_{side}"),
            below is not None and getattr(below, f"round_top_{side}"),
        )
    return styles


def _n(v: float) -> str:
    return str(round(v, 2))


def box_path(box: LineBox) -> str:
    """Outline path of one line box, clockwise from the top-left corner."""
    x, y, w, h = box.x, box.y, box.width, box.height
    limit = max(0.0, min(box.radius, w / 2, h / 2))

    def r(corner: str) -> float:
        return limit if box.corners[corner] is CornerStyle.CONVEX else 0.0

    tl, tr, br, bl = r("top_left"), r("top_right"), r("bottom_right"), r("bottom_left")
    parts = [f"M{_n(x + tl)} {_n(y)}", f"H{_n(x + w - tr)}"]
    if tr:
        parts.append(f"A{_n(tr)} {_n(tr)} 0 0 1 {_n(x + w)} {_n(y + tr)}")
    parts.append(f"V{_n(y + h - br)}")
    if br:
        parts.append(f"A{_n(br)} {_n(br)} 0 0 1 {_n(x + w - br)} {_n(y + h)}")
    parts.append(f"H{_n(x + bl)}")
    if bl:
        parts.append(f"A{_n(bl)} {_n(bl)} 0 0 1 {_n(x)} {_n(y + h - bl)}")
    parts.append(f"V{_n(y + tl)}")
    if tl:
        parts.append(f"A{_n(tl)} {_n(tl)} 0 0 1 {_n(x + tl)} {_n(y)}")
    parts.append("Z")
    return " ".join(parts)


def fillet_path(cx: float, cy: float, hx: int, vy: int, radius: float) -> str:
    """Concave flare hugging corner (cx, cy).

    hx points away from the box horizontally (-1 left, +1 right), vy points
    into the box's own row (+1 for top corners, -1 for bottom corners).
    """
    sweep = 1 if hx * vy < 0 else 0
    return (
        f"M{_n(cx)} {_n(cy)} H{_n(cx + hx * radius)} "
        f"A{_n(radius)} {_n(radius)} 0 0 {sweep} {_n(cx)} {_n(cy + vy * radius)} Z"
    )


def _fillets(box: LineBox) -> list[str]:
    paths = []
    corner_points = {
        "top_left": (box.x, box.y, -1, 1),
        "top_right": (box.x + box.width, box.y, 1, 1),
        "bottom_left": (box.x, box.y + box.height, -1, -1),
        "bottom_right": (box.x + box.width, box.y + box.height, 1, -1),
    }
    radius = max(0.0, min(box.radius, box.height / 2))
    if radius == 0:
        return paths
    for corner, (cx, cy, hx, vy) in corner_points.items():
        if box.corners[corner] is CornerStyle.FILLET:
            paths.append(fillet_path(cx, cy, hx, vy, radius))
    return paths


def layout_boxes(
    lines: Sequence[LineModel],
    decorations: Sequence[DecorationResult],
    alignment: Alignment,
    geometry: CaptionGeometry,
) -> tuple[list[LineBox], float, float]:
    """Place line boxes on the canvas. Returns (boxes, canvas_w, canvas_h)."""
    widths = [
        d.forced_width if d.forced_width is not None else line.width
        for line, d in zip(lines, decorations)
    ]
    content_w = max(widths, default=0.0)
    max_radius = max((line.corner_radius for line in lines), default=0.0)
    pad_left = geometry.block_margin if alignment is Alignment.LEFT else max_radius
    pad_right = geometry.block_margin if alignment is Alignment.RIGHT else max_radius

    boxes: list[LineBox] = []
    y = 0.0
    for i, (line, w) in enumerate(zip(lines, widths)):
        font_size = effective_font_size(line.scale, geometry.base_font_size)
        h = font_size * geometry.line_height_em
        if alignment is Alignment.LEFT:
            x = pad_left
        elif alignment is Alignment.RIGHT:
            x = pad_left + content_w - w
        else:
            x = pad_left + (content_w - w) / 2
        boxes.append(LineBox(
            x=x,
            y=y,
            width=w,
            height=h,
            radius=line.corner_radius,
            font_size=font_size,
            corners=corner_styles(decorations, i),
        ))
        y += h

    return boxes, pad_left + content_w + pad_right, y


def _text_element(line: LineModel, box: LineBox, config: RenderConfig) -> dict[str, Any]:
    inset = min(box.radius, box.width / 2)
    if config.alignment is Alignment.LEFT:
        x, anchor = box.x + inset, "start"
    elif config.alignment is Alignment.RIGHT:
        x, anchor = box.x + box.width - inset, "end"
    else:
        x, anchor = box.x + box.width / 2, "middle"
    return {
        "tag": "text",
        "group": "text",
        "x": _n(x),
        "y": _n(box.y + box.height / 2),
        "font-size": _n(box.font_size),
        "text-anchor": anchor,
        "xml:space": "preserve",
        "text": line.text,
    }


def render_caption(
    lines: Sequence[LineModel],
    config: RenderConfig,
    geometry: CaptionGeometry | None = None,
    decorations: Sequence[DecorationResult] | None = None,
) -> RenderedCaption:
    """Render measured lines as a standalone SVG document.

    Args:
        lines: Measured lines, top to bottom.
        config: Alignment and colors.
        geometry: Font and spacing parameters (defaults match Settings defaults).
        decorations: Precomputed classification; computed here when omitted.
    """
    geometry = geometry or CaptionGeometry()
    if decorations is None:
        decorations = classify(lines, config.alignment)
    elif len(decorations) != len(lines):
        raise ValueError(f"Got {len(decorations)} decorations for {len(lines)} lines")
    decorations = list(decorations)

    boxes, canvas_w, canvas_h = layout_boxes(lines, decorations, config.alignment, geometry)

    elements: list[dict[str, Any]] = []
    for box in boxes:
        elements.append({"tag": "path", "group": "background", "d": box_path(box)})
        for d in _fillets(box):
            elements.append({"tag": "path", "group": "background", "d": d})
    for line, box in zip(lines, boxes):
        elements.append(_text_element(line, box, config))

    groups = {
        "background": {"fill": config.background_color},
        "text": {
            "fill": config.foreground_color,
            "font-family": geometry.font_family,
            "font-weight": geometry.font_weight,
            "dominant-baseline": "central",
        },
    }
    if config.transparent:
        groups["background"]["fill-opacity"] = _n(config.fill_opacity)

    svg = serialize_svg(
        elements,
        canvas_w,
        canvas_h,
        title="\n".join(line.text for line in lines),
        groups=groups,
    )
    logger.info(
        "Rendered %d caption lines (%s) at %.0fx%.0f",
        len(lines), config.alignment.value, canvas_w, canvas_h,
    )
    return RenderedCaption(
        svg=svg,
        width=canvas_w,
        height=canvas_h,
        decorations=decorations,
        boxes=boxes,
    )
