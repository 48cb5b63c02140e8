"""LineModel — one caption line and its construction from raw input text.

Raw input is one record per newline. Each record may carry a font-scale
suffix after a delimiter:

    "Big news|1.5"   -> text="Big news", scale=1.5
    "plain line"     -> text="plain line", scale=1.0

Malformed suffixes never raise; they fall back to the default scale.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "|"
DEFAULT_SCALE = 1.0

_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


@dataclass(frozen=True)
class LineModel:
    """A single caption line.

    `width` stays None until the caller has measured the rendered text.
    Measurement produces a new instance; a LineModel is never mutated.
    """

    text: str
    scale: float = DEFAULT_SCALE
    # Measured box width in pixels
    width: float | None = None
    # Corner radius in pixels (radius-in-em x effective font size)
    corner_radius: float = 0.0

    @property
    def is_measured(self) -> bool:
        return self.width is not None

    def measured(self, width: float, corner_radius: float) -> LineModel:
        return replace(self, width=float(width), corner_radius=float(corner_radius))


def parse_scale(suffix: str | None) -> float:
    """Parse a scale suffix, falling back to 1.0 for anything unusable.

    Only the leading decimal literal counts, so "2x" reads as 2 and "1_5"
    as 1. Digits are ASCII only.
    """
    if suffix is None:
        return DEFAULT_SCALE
    match = _LEADING_FLOAT.match(suffix)
    if match is None:
        logger.debug("Unparseable scale suffix %r, using %.1f", suffix, DEFAULT_SCALE)
        return DEFAULT_SCALE
    value = float(match.group(1))
    if not math.isfinite(value) or value <= 0:
        logger.debug("Non-positive scale %r, using %.1f", suffix, DEFAULT_SCALE)
        return DEFAULT_SCALE
    return value


def parse_line(raw: str, delimiter: str = DEFAULT_DELIMITER) -> LineModel:
    """Build a LineModel from one raw record.

    Splits on the first delimiter; text after a second delimiter is dropped.
    """
    parts = raw.split(delimiter)
    text = parts[0]
    suffix = parts[1] if len(parts) > 1 else None
    return LineModel(text=text, scale=parse_scale(suffix))


def parse_caption(
    raw_text: str,
    delimiter: str = DEFAULT_DELIMITER,
    trim: bool = False,
    drop_empty: bool = False,
) -> list[LineModel]:
    """Split a multi-line caption into LineModels, top to bottom.

    Args:
        raw_text: Newline-separated caption text.
        delimiter: Separator between line text and its scale suffix.
        trim: Strip whitespace around each record before parsing.
        drop_empty: Skip records that are empty (after trimming, if enabled).

    Returns:
        One LineModel per kept record, in visual order.
    """
    records = raw_text.replace("\r\n", "\n").split("\n")
    lines: list[LineModel] = []
    for record in records:
        if trim:
            record = record.strip()
        if drop_empty and not record:
            continue
        lines.append(parse_line(record, delimiter))
    return lines
