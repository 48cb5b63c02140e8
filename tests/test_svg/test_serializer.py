"""Tests for SVG serialization."""

from captionkit.svg.serializer import serialize_svg


def test_empty_document():
    svg = serialize_svg([], 10, 20)
    assert 'viewBox="0 0 10 20"' in svg
    assert svg.endswith("</svg>")


def test_self_closing_and_text_elements():
    svg = serialize_svg(
        [
            {"tag": "path", "d": "M0 0 H10 Z"},
            {"tag": "text", "x": "1", "y": "2", "text": "a < b"},
        ],
        10,
        10,
    )
    assert '<path d="M0 0 H10 Z" />' in svg
    assert '<text x="1" y="2">a &lt; b</text>' in svg


def test_groups_wrap_members():
    svg = serialize_svg(
        [{"tag": "path", "group": "bg", "d": "M0 0"}],
        10,
        10,
        groups={"bg": {"fill": "#000000"}, "unused": {"fill": "#ffffff"}},
    )
    assert '<g fill="#000000">' in svg
    assert 'fill="#ffffff"' not in svg
    assert "group=" not in svg


def test_title_escaped():
    svg = serialize_svg([], 1, 1, title="Q&A")
    assert "<title>Q&amp;A</title>" in svg
