"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from captionkit import __version__
from captionkit.engine.style import PALETTE
from captionkit.models.responses import HealthResponse, PresetOut

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        presets=len(PALETTE),
    )


@router.get("/palette", response_model=list[PresetOut])
async def palette() -> list[PresetOut]:
    return [PresetOut.model_validate(p, from_attributes=True) for p in PALETTE]
