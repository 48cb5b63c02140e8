"""POST /api/classify — corner classification for measured lines."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from captionkit.config import Settings
from captionkit.dependencies import get_settings
from captionkit.engine.classifier import classify
from captionkit.engine.lines import LineModel
from captionkit.engine.metrics import measure_line
from captionkit.models.requests import ClassifyRequest, MeasuredLine
from captionkit.models.responses import ClassifyResponse, DecorationOut

router = APIRouter()


def to_line_models(lines: list[MeasuredLine], settings: Settings) -> list[LineModel]:
    """Build measured LineModels, deriving missing radii from settings."""
    return [
        measure_line(
            LineModel(text=line.text, scale=line.scale),
            line.width,
            base_font_size=settings.base_font_size,
            radius_em=settings.radius_em,
            corner_radius=line.corner_radius,
        )
        for line in lines
    ]


@router.post("/classify", response_model=ClassifyResponse)
async def classify_lines(
    req: ClassifyRequest,
    settings: Settings = Depends(get_settings),
) -> ClassifyResponse:
    lines = to_line_models(req.lines, settings)
    decorations = classify(lines, req.alignment)
    return ClassifyResponse(
        alignment=req.alignment.value,
        decorations=[DecorationOut.model_validate(d, from_attributes=True) for d in decorations],
    )
