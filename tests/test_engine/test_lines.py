"""Tests for LineModel construction."""

import dataclasses

import pytest

from captionkit.engine.lines import LineModel, parse_caption, parse_line, parse_scale
from tests.conftest import FILTERED_CAPTION, SCALED_CAPTION


def test_parse_line_without_suffix():
    line = parse_line("Hello world")
    assert line.text == "Hello world"
    assert line.scale == 1.0
    assert line.width is None


def test_parse_line_with_scale():
    line = parse_line("Text|1.5")
    assert line.text == "Text"
    assert line.scale == 1.5


@pytest.mark.parametrize("raw", ["Text|abc", "Text|", "Text|-2", "Text|0", "Text|nan", "Text|inf"])
def test_malformed_scale_falls_back(raw):
    line = parse_line(raw)
    assert line.text == "Text"
    assert line.scale == 1.0


def test_split_on_first_delimiter_only():
    line = parse_line("a|2|3")
    assert line.text == "a"
    assert line.scale == 2.0


def test_text_kept_verbatim():
    line = parse_line("  padded  |2")
    assert line.text == "  padded  "
    assert line.scale == 2.0


def test_custom_delimiter():
    line = parse_line("Text;0.5", delimiter=";")
    assert line.text == "Text"
    assert line.scale == 0.5


def test_scale_suffix_whitespace():
    assert parse_scale(" 1.25 ") == 1.25
    assert parse_scale(None) == 1.0


def test_parse_caption_keeps_order():
    lines = parse_caption(FILTERED_CAPTION)
    assert [l.text for l in lines] == [
        "Turns out I was not being rejected",
        "I was being filtered",
        "75% of resumes never reach a human",
    ]


def test_parse_caption_scales():
    lines = parse_caption(SCALED_CAPTION)
    assert [(l.text, l.scale) for l in lines] == [
        ("POV:", 1.5),
        ("you finally", 1.0),
        ("ship it", 1.0),
        ("", 1.0),
    ]


def test_parse_caption_trim_and_drop_empty():
    lines = parse_caption("  first \n\n   \nsecond|2\r\n", trim=True, drop_empty=True)
    assert [(l.text, l.scale) for l in lines] == [("first", 1.0), ("second", 2.0)]


def test_parse_caption_keeps_empty_by_default():
    lines = parse_caption("a\n\nb")
    assert len(lines) == 3
    assert lines[1].text == ""


def test_line_model_is_immutable():
    line = parse_line("Text")
    with pytest.raises(dataclasses.FrozenInstanceError):
        line.width = 10.0


def test_measured_returns_new_instance():
    line = LineModel(text="Text", scale=2.0)
    m = line.measured(120, 8)
    assert m is not line
    assert m.width == 120.0
    assert m.corner_radius == 8.0
    assert m.scale == 2.0
    assert not line.is_measured
    assert m.is_measured


@pytest.mark.parametrize(
    "suffix, expected",
    [
        ("2x", 2.0),
        ("1_5", 1.0),
        ("1.5em", 1.5),
        (".5", 0.5),
        ("2e-1", 0.2),
        ("+3", 3.0),
        ("1e999", 1.0),
        ("x2", 1.0),
        ("٢", 1.0),
    ],
)
def test_scale_reads_leading_number(suffix, expected):
    assert parse_line(f"T|{suffix}").scale == expected
