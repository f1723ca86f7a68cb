"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgproc.svg.limits import ParserLimits


# Valid SVG with 3 in-bounds rectangles
VALID_SVG = '''<svg width="1200" height="400" xmlns="http://www.w3.org/2000/svg">
  <rect x="50" y="80" width="300" height="120" fill="#FF0000" />
  <rect x="400" y="100" width="500" height="200" fill="#00FF00" />
  <rect x="950" y="50" width="200" height="300" fill="#0000FF" />
</svg>'''

OUT_OF_BOUNDS_SVG = '''<svg width="800" height="400" xmlns="http://www.w3.org/2000/svg">
  <rect x="50" y="50" width="200" height="200" fill="#FFAA00" />
  <rect x="700" y="100" width="200" height="250" fill="#FF0000" />
</svg>'''

EMPTY_SVG = '<svg width="600" height="300" xmlns="http://www.w3.org/2000/svg"></svg>'

SINGLE_RECT_SVG = '''<svg width="800" height="600" xmlns="http://www.w3.org/2000/svg">
  <rect x="10" y="10" width="100" height="100" fill="#000" />
</svg>'''

MALFORMED_SVG = "<svg><not closed properly"


def make_svg(rects: list[str], width: str = "800", height: str = "600") -> str:
    return (
        f'<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">'
        + "".join(rects)
        + "</svg>"
    )


@pytest.fixture
def valid_svg() -> str:
    return VALID_SVG


@pytest.fixture
def out_of_bounds_svg() -> str:
    return OUT_OF_BOUNDS_SVG


@pytest.fixture
def empty_svg() -> str:
    return EMPTY_SVG


@pytest.fixture
def small_limits() -> ParserLimits:
    return ParserLimits(max_file_size_bytes=1024, max_rectangles=5, max_dimension=1000, parse_timeout_ms=2000)
