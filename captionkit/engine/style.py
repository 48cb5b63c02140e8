"""Render configuration and the preset color palette."""

from __future__ import annotations

import re
from dataclasses import dataclass

from captionkit.engine.classifier import Alignment

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Fill alpha for transparent backgrounds: 0xC0 / 0xFF
TRANSPARENT_ALPHA = 0xC0 / 0xFF


@dataclass(frozen=True)
class ColorPreset:
    name: str
    background: str
    foreground: str
    # Text color to use instead when the background is see-through
    foreground_if_transparent: str | None = None

    def text_color(self, transparent: bool) -> str:
        if transparent and self.foreground_if_transparent:
            return self.foreground_if_transparent
        return self.foreground


PALETTE: tuple[ColorPreset, ...] = (
    ColorPreset("white", "#ffffff", "#000000", foreground_if_transparent="#ffffff"),
    ColorPreset("black", "#000000", "#ffffff"),
    ColorPreset("red", "#ea403f", "#ffffff"),
    ColorPreset("orange", "#ff933d", "#ffffff"),
    ColorPreset("yellow", "#f2cd46", "#000000"),
    ColorPreset("lime-green", "#78c25e", "#ffffff"),
    ColorPreset("teal", "#77c8a6", "#ffffff"),
    ColorPreset("light-blue", "#3496f0", "#ffffff"),
    ColorPreset("dark-blue", "#2344b2", "#ffffff"),
    ColorPreset("violet", "#5756d4", "#ffffff"),
    ColorPreset("pink", "#f7d7e9", "#000000"),
    ColorPreset("brown", "#a3895b", "#ffffff"),
    ColorPreset("dark-green", "#32523b", "#ffffff"),
    ColorPreset("blue-gray", "#2f688c", "#ffffff"),
    ColorPreset("light-gray", "#92979e", "#000000"),
    ColorPreset("dark-gray", "#333333", "#ffffff"),
)

_PRESETS_BY_NAME = {p.name: p for p in PALETTE}


def get_preset(name: str) -> ColorPreset:
    try:
        return _PRESETS_BY_NAME[name]
    except KeyError:
        raise ValueError(f"Unknown color preset: {name!r}") from None


def validate_color(value: str) -> str:
    if not _HEX_COLOR.match(value):
        raise ValueError(f"Expected a #rgb or #rrggbb color, got {value!r}")
    return value.lower()


@dataclass(frozen=True)
class RenderConfig:
    """Everything the renderer needs besides the lines themselves."""

    alignment: Alignment = Alignment.LEFT
    background_color: str = "#ffffff"
    foreground_color: str = "#000000"
    transparent: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "alignment", Alignment(self.alignment))
        object.__setattr__(self, "background_color", validate_color(self.background_color))
        object.__setattr__(self, "foreground_color", validate_color(self.foreground_color))

    @classmethod
    def from_preset(
        cls,
        name: str,
        alignment: Alignment | str = Alignment.LEFT,
        transparent: bool = False,
    ) -> RenderConfig:
        preset = get_preset(name)
        return cls(
            alignment=Alignment(alignment),
            background_color=preset.background,
            foreground_color=preset.text_color(transparent),
            transparent=transparent,
        )

    @property
    def fill_opacity(self) -> float:
        return TRANSPARENT_ALPHA if self.transparent else 1.0
