"""Attribute readers — numbers with unit suffixes, canvas dimensions, fill."""

from __future__ import annotations

import math
import re

# Leading float, like JS parseFloat: "800px" → 800, "1e3" → 1000, "12abc" → 12
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")
_STYLE_FILL_RE = re.compile(r"fill\s*:\s*([^;]+)", re.IGNORECASE)

DEFAULT_FILL = "#000000"


def parse_number(value: str | None, default: float) -> float:
    """Parse a numeric attribute, ignoring any trailing unit suffix.

    Missing, empty, unparsable and non-finite values yield ``default``.
    """
    if not value:
        return default
    m = _LEADING_FLOAT_RE.match(value)
    if m is None:
        return default
    try:
        parsed = float(m.group(1))
    except ValueError:
        return default
    if not math.isfinite(parsed):
        return default
    return parsed


def parse_viewbox(value: str | None) -> tuple[float, float, float, float] | None:
    """Split a viewBox on whitespace and/or commas. Needs exactly 4 fields."""
    if not value:
        return None
    parts = _VIEWBOX_SPLIT_RE.split(value.strip())
    if len(parts) != 4:
        return None
    min_x, min_y, width, height = (parse_number(p, 0.0) for p in parts)
    return (min_x, min_y, width, height)


def resolve_dimensions(attrs: dict[str, str]) -> tuple[float, float]:
    """Canvas width/height from root attributes, falling back to viewBox.

    viewBox only fills in a value that is still ≤ 0; a positive direct
    attribute always wins.
    """
    width = parse_number(attrs.get("width"), 0.0)
    height = parse_number(attrs.get("height"), 0.0)

    if width <= 0 or height <= 0:
        viewbox = parse_viewbox(attrs.get("viewBox"))
        if viewbox is not None:
            _, _, vb_width, vb_height = viewbox
            if width <= 0:
                width = vb_width
            if height <= 0:
                height = vb_height

    return width, height


def resolve_fill(attrs: dict[str, str]) -> str:
    """Explicit fill attribute, else ``fill:`` in style, else black. Stored verbatim."""
    fill = attrs.get("fill")
    if fill:
        return fill
    style = attrs.get("style")
    if style:
        m = _STYLE_FILL_RE.search(style)
        if m:
            return m.group(1).strip()
    return DEFAULT_FILL
