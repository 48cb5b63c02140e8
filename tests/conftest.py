"""Shared test fixtures."""

from __future__ import annotations

import pytest

from captionkit.engine.lines import LineModel


# Captions from the batch-automation examples

REJECTIONS_CAPTION = "What I wish I knew\nbefore 6 months of rejections"

FILTERED_CAPTION = (
    "Turns out I was not being rejected\n"
    "I was being filtered\n"
    "75% of resumes never reach a human"
)

SCALED_CAPTION = "POV:|1.5\nyou finally|abc\nship it|-2\n|"


def measured(width: float, radius: float = 4.0, text: str = "line", scale: float = 1.0) -> LineModel:
    return LineModel(text=text, scale=scale, width=width, corner_radius=radius)


@pytest.fixture
def narrowing_lines() -> list[LineModel]:
    return [measured(300), measured(200)]


@pytest.fixture
def widening_lines() -> list[LineModel]:
    return [measured(200), measured(300)]


@pytest.fixture
def equal_lines() -> list[LineModel]:
    return [measured(240), measured(240), measured(240)]
