"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from captionkit.engine.classifier import Alignment
from captionkit.engine.style import validate_color


class ParseRequest(BaseModel):
    text: str = Field(..., description="Raw caption text, one line per newline")
    delimiter: str | None = Field(
        default=None,
        min_length=1,
        description="Scale suffix delimiter; the scale_delimiter setting when omitted",
    )
    trim: bool = Field(default=False, description="Strip whitespace around each line")
    drop_empty: bool = Field(default=False, description="Skip empty lines")


class MeasuredLine(BaseModel):
    text: str = Field(..., description="Line text")
    scale: float = Field(default=1.0, gt=0, description="Per-line font scale")
    width: float = Field(..., ge=0, allow_inf_nan=False, description="Measured box width in pixels")
    corner_radius: float | None = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Corner radius in pixels; derived from settings when omitted",
    )


class ClassifyRequest(BaseModel):
    lines: list[MeasuredLine] = Field(..., description="Measured lines, top to bottom")
    alignment: Alignment = Field(default=Alignment.LEFT)


class StyleOptions(BaseModel):
    alignment: Alignment = Field(default=Alignment.LEFT)
    preset: str | None = Field(default=None, description="Palette preset name; overrides colors")
    background_color: str = Field(default="#ffffff")
    foreground_color: str = Field(default="#000000")
    transparent: bool = Field(default=False)

    @field_validator("background_color", "foreground_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        return validate_color(value)


class RenderRequest(BaseModel):
    lines: list[MeasuredLine] = Field(..., description="Measured lines, top to bottom")
    style: StyleOptions = Field(default_factory=StyleOptions)
