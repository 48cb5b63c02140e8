"""captionkit caption-shape engine."""

from captionkit.engine.lines import LineModel, parse_caption, parse_line
from captionkit.engine.classifier import Alignment, DecorationResult, classify
from captionkit.engine.metrics import measure_lines
from captionkit.engine.style import PALETTE, RenderConfig

__all__ = [
    "LineModel",
    "parse_caption",
    "parse_line",
    "Alignment",
    "DecorationResult",
    "classify",
    "measure_lines",
    "PALETTE",
    "RenderConfig",
]
