"""Rectangle extraction — decoded <rect> nodes → Rectangle list."""

from __future__ import annotations

import logging
from typing import Any

from svgproc.models.parse_result import Rectangle
from svgproc.svg.attributes import parse_number, resolve_fill
from svgproc.svg.decoder import ATTRS_KEY, Node, as_list
from svgproc.svg.limits import ParserLimits

logger = logging.getLogger(__name__)


def _rect_from_node(node: Any, svg_width: float, svg_height: float) -> Rectangle | None:
    """Build one Rectangle, or None when its width or height is not positive."""
    attrs: dict[str, str] = node.get(ATTRS_KEY, {}) if isinstance(node, dict) else {}

    x = parse_number(attrs.get("x"), 0.0)
    y = parse_number(attrs.get("y"), 0.0)
    width = parse_number(attrs.get("width"), 0.0)
    height = parse_number(attrs.get("height"), 0.0)

    if width <= 0 or height <= 0:
        return None

    return Rectangle(
        x=x,
        y=y,
        width=width,
        height=height,
        fill=resolve_fill(attrs),
        # Touching the edge is still in bounds
        is_out_of_bounds=x + width > svg_width or y + height > svg_height,
    )


def extract_rectangles(
    root: Node,
    svg_width: float,
    svg_height: float,
    limits: ParserLimits,
) -> list[Rectangle]:
    """Walk the root's <rect> children in document order.

    Excess rectangles past ``limits.max_rectangles`` are truncated, and
    degenerate ones are dropped. Neither is an error.
    """
    nodes = as_list(root.get("rect"))

    if len(nodes) > limits.max_rectangles:
        logger.warning(
            "SVG has too many rectangles, truncating: total=%d max=%d",
            len(nodes),
            limits.max_rectangles,
        )
        nodes = nodes[: limits.max_rectangles]

    items: list[Rectangle] = []
    dropped = 0
    for node in nodes:
        rect = _rect_from_node(node, svg_width, svg_height)
        if rect is None:
            dropped += 1
            continue
        items.append(rect)

    if dropped:
        logger.debug("Dropped %d rectangles with non-positive size", dropped)
    return items
