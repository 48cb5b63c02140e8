"""POST /api/lines — split raw caption text into lines."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from captionkit.config import Settings
from captionkit.dependencies import get_settings
from captionkit.engine.lines import parse_caption
from captionkit.models.requests import ParseRequest
from captionkit.models.responses import LineOut, ParseResponse

router = APIRouter()


@router.post("/lines", response_model=ParseResponse)
async def parse_lines(
    req: ParseRequest,
    settings: Settings = Depends(get_settings),
) -> ParseResponse:
    lines = parse_caption(
        req.text,
        delimiter=req.delimiter or settings.scale_delimiter,
        trim=req.trim,
        drop_empty=req.drop_empty,
    )
    return ParseResponse(lines=[LineOut(text=line.text, scale=line.scale) for line in lines])
