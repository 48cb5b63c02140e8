"""POST /api/render — classified caption block as SVG."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from captionkit.api.classify import to_line_models
from captionkit.config import Settings
from captionkit.dependencies import get_settings
from captionkit.engine.style import RenderConfig
from captionkit.models.requests import RenderRequest, StyleOptions
from captionkit.models.responses import DecorationOut, RenderResponse
from captionkit.svg.renderer import CaptionGeometry, render_caption

router = APIRouter()


def _render_config(style: StyleOptions) -> RenderConfig:
    if style.preset:
        return RenderConfig.from_preset(style.preset, style.alignment, style.transparent)
    return RenderConfig(
        alignment=style.alignment,
        background_color=style.background_color,
        foreground_color=style.foreground_color,
        transparent=style.transparent,
    )


@router.post("/render", response_model=RenderResponse)
async def render(
    req: RenderRequest,
    settings: Settings = Depends(get_settings),
) -> RenderResponse:
    try:
        config = _render_config(req.style)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    lines = to_line_models(req.lines, settings)
    rendered = render_caption(lines, config, CaptionGeometry.from_settings(settings))

    return RenderResponse(
        svg=rendered.svg,
        width=round(rendered.width, 2),
        height=round(rendered.height, 2),
        decorations=[
            DecorationOut.model_validate(d, from_attributes=True) for d in rendered.decorations
        ],
    )
