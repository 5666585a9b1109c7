"""Write SVG markup from element definitions.

An element is a dict: ``tag`` plus attributes, with optional ``children``
(nested elements) and ``text`` (character data).
"""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr

_RESERVED = ("tag", "children", "text")


def format_number(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def serialize_element(elem: dict[str, Any], indent: int = 1) -> list[str]:
    """Lines for one element and its subtree."""
    pad = "  " * indent
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in _RESERVED and v is not None}
    attr_str = "".join(f" {k}={quoteattr(format_number(v))}" for k, v in attrs.items())

    children = elem.get("children") or []
    text = elem.get("text")

    if not children and text is None:
        return [f"{pad}<{tag}{attr_str} />"]
    if not children:
        return [f"{pad}<{tag}{attr_str}>{escape(str(text))}</{tag}>"]

    lines = [f"{pad}<{tag}{attr_str}>"]
    for child in children:
        lines.extend(serialize_element(child, indent + 1))
    lines.append(f"{pad}</{tag}>")
    return lines


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 600.0,
    canvas_h: float = 700.0,
    title: str = "",
    description: str = "",
    styles: dict[str, str] | None = None,
) -> str:
    """Generate SVG markup from element definitions."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {format_number(float(canvas_w))} {format_number(float(canvas_h))}"'
        f' xmlns="http://www.w3.org/2000/svg" width="100%" height="100%"'
        f' style="position: relative; font-family: sans-serif" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    if styles:
        lines.append("  <style>")
        for selector, props in styles.items():
            lines.append(f"    {selector} {{ {props} }}")
        lines.append("  </style>")

    for elem in elements:
        lines.extend(serialize_element(elem))

    lines.append("</svg>")
    return "\n".join(lines)
