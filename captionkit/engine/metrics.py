"""Measurement seam — attach caller-measured widths and derived radii to lines.

Text shaping happens outside this package. Callers hand over one pixel
width per line; the corner radius is derived from the em-based constant.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from captionkit.engine.lines import LineModel


def effective_font_size(scale: float, base_font_size: float) -> float:
    return base_font_size * scale


def corner_radius_for(scale: float, base_font_size: float, radius_em: float) -> float:
    """Corner radius in pixels for a line rendered at `scale`."""
    return radius_em * effective_font_size(scale, base_font_size)


def measure_line(
    line: LineModel,
    width: float,
    base_font_size: float,
    radius_em: float,
    corner_radius: float | None = None,
) -> LineModel:
    if not math.isfinite(width) or width < 0:
        raise ValueError(f"Line width must be finite and non-negative, got {width}")
    if corner_radius is None:
        corner_radius = corner_radius_for(line.scale, base_font_size, radius_em)
    elif not math.isfinite(corner_radius) or corner_radius < 0:
        raise ValueError(f"Corner radius must be finite and non-negative, got {corner_radius}")
    return line.measured(width, corner_radius)


def measure_lines(
    lines: Sequence[LineModel],
    widths: Sequence[float],
    base_font_size: float,
    radius_em: float,
) -> list[LineModel]:
    """Pair each line with its measured width, in order."""
    if len(lines) != len(widths):
        raise ValueError(
            f"Got {len(widths)} widths for {len(lines)} lines"
        )
    return [
        measure_line(line, width, base_font_size, radius_em)
        for line, width in zip(lines, widths)
    ]
