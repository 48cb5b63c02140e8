"""Corner classification — decide how adjacent caption lines meet.

Walks consecutive pairs (prev, curr) top to bottom. For each pair exactly one
of three cases holds:

    A. curr is narrower  -> curr gets rounded top corners
    B. curr is wider     -> prev gets rounded bottom corners
    C. widths are close  -> both are welded to max(prev.width, curr.width)

"Close" means within a tolerance derived from each line's corner radius,
boundary included: a difference exactly equal to the combined tolerance
welds, as do equal widths with zero radius.
Centered text can drift on both sides at once, so the tolerance doubles.
The aligned edge (left for left-aligned, right for right-aligned) is flush
and never rounded.

Pairs are processed strictly in order, so in a welded chain a later pair
overwrites the forced width an earlier pair gave to the shared line.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from captionkit.engine.lines import LineModel

logger = logging.getLogger(__name__)


class Alignment(str, enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class DecorationResult:
    """Corner flags and optional welded width for one line."""

    index: int
    round_top_left: bool = False
    round_top_right: bool = False
    round_bottom_left: bool = False
    round_bottom_right: bool = False
    # Shared width when welded to a neighbour; None keeps the natural width
    forced_width: float | None = None
    connect_top: bool = False
    connect_bottom: bool = False

    @property
    def is_plain(self) -> bool:
        return not (
            self.round_top_left
            or self.round_top_right
            or self.round_bottom_left
            or self.round_bottom_right
            or self.connect_top
            or self.connect_bottom
        )


def tolerance(line: LineModel, alignment: Alignment) -> float:
    """Pixel slack within which two widths count as equal."""
    factor = 2 if alignment is Alignment.CENTER else 1
    return line.corner_radius * factor


def classify(
    lines: Sequence[LineModel],
    alignment: Alignment | str,
) -> list[DecorationResult]:
    """Classify every adjacent pair of measured lines.

    Args:
        lines: Measured lines in visual (top-to-bottom) order.
        alignment: Global text alignment for the block.

    Returns:
        One DecorationResult per line, index-aligned with `lines`.

    Raises:
        ValueError: If a line has not been measured or the alignment is unknown.
    """
    alignment = Alignment(alignment)
    for i, line in enumerate(lines):
        if line.width is None:
            raise ValueError(f"Line {i} ({line.text!r}) has no measured width")

    results = [DecorationResult(index=i) for i in range(len(lines))]
    round_left = alignment is not Alignment.LEFT
    round_right = alignment is not Alignment.RIGHT
    counts = {"narrower": 0, "wider": 0, "welded": 0}

    for i in range(1, len(lines)):
        prev, curr = lines[i - 1], lines[i]
        prev_tol = tolerance(prev, alignment)
        curr_tol = tolerance(curr, alignment)

        if prev.width - prev_tol > curr.width + curr_tol:
            results[i].round_top_left = round_left
            results[i].round_top_right = round_right
            counts["narrower"] += 1
        elif prev.width + prev_tol < curr.width - curr_tol:
            results[i - 1].round_bottom_left = round_left
            results[i - 1].round_bottom_right = round_right
            counts["wider"] += 1
        else:
            width = max(prev.width, curr.width)
            results[i - 1].forced_width = width
            results[i - 1].connect_bottom = True
            results[i].forced_width = width
            results[i].connect_top = True
            counts["welded"] += 1

    logger.debug(
        "Classified %d lines (%s): %d narrower, %d wider, %d welded",
        len(lines),
        alignment.value,
        counts["narrower"],
        counts["wider"],
        counts["welded"],
    )
    return results
