"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    presets: int = 0


class PresetOut(BaseModel):
    name: str
    background: str
    foreground: str
    foreground_if_transparent: str | None = None


class LineOut(BaseModel):
    text: str
    scale: float


class ParseResponse(BaseModel):
    lines: list[LineOut] = Field(default_factory=list)


class DecorationOut(BaseModel):
    index: int
    round_top_left: bool = False
    round_top_right: bool = False
    round_bottom_left: bool = False
    round_bottom_right: bool = False
    forced_width: float | None = None
    connect_top: bool = False
    connect_bottom: bool = False


class ClassifyResponse(BaseModel):
    alignment: str
    decorations: list[DecorationOut] = Field(default_factory=list)


class RenderResponse(BaseModel):
    svg: str
    width: float
    height: float
    decorations: list[DecorationOut] = Field(default_factory=list)
