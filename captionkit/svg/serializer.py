"""Write SVG markup from element dictionaries."""

from __future__ import annotations

from html import escape
from typing import Any


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float,
    canvas_h: float,
    title: str = "",
    groups: dict[str, dict[str, str]] | None = None,
) -> str:
    """Generate SVG markup from element definitions.

    Each element is a dict with a "tag" key, an optional "text" key for
    character content, an optional "group" key naming an entry in `groups`,
    and SVG attributes for everything else.
    """
    w = round(canvas_w, 2)
    h = round(canvas_h, 2)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    ungrouped = [e for e in elements if not e.get("group")]
    for elem in ungrouped:
        lines.append("  " + _element(elem))

    for name, attrs in (groups or {}).items():
        members = [e for e in elements if e.get("group") == name]
        if not members:
            continue
        lines.append(f"  <g {_attrs(attrs)}>")
        for elem in members:
            lines.append("    " + _element(elem))
        lines.append("  </g>")

    lines.append("</svg>")
    return "\n".join(lines)


def _attrs(attrs: dict[str, Any]) -> str:
    return " ".join(f'{k}="{escape(str(v))}"' for k, v in attrs.items())


def _element(elem: dict[str, Any]) -> str:
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "text", "group")}
    attr_str = _attrs(attrs)
    if "text" in elem:
        return f"<{tag} {attr_str}>{escape(elem['text'], quote=False)}</{tag}>"
    return f"<{tag} {attr_str} />"
