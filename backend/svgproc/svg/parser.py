"""SVG rectangle parser — facade over the decoder, extractor and metrics.

raw text → size guard → decode (with timeout) → root check → dimensions
→ dimension gates → extract/filter/truncate → issues + coverage → ParseResult

Every gate failure raises ParseError; nothing partial is returned.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from svgproc.models.parse_result import ParseResult
from svgproc.svg import reader
from svgproc.svg.attributes import resolve_dimensions
from svgproc.svg.decoder import ATTRS_KEY, decode_xml
from svgproc.svg.errors import ParseError, ParseErrorKind
from svgproc.svg.extractor import extract_rectangles
from svgproc.svg.limits import DEFAULT_LIMITS, ParserLimits
from svgproc.svg.metrics import collect_issues, coverage_ratio

logger = logging.getLogger(__name__)

_ROOT_TAG = "svg"


def check_size(svg_text: str, limits: ParserLimits) -> int:
    """Reject input over the byte ceiling. Returns the UTF-8 byte length."""
    # Lone surrogates are counted, not rejected; the decoder reports them as bad XML
    size = len(svg_text.encode("utf-8", "surrogatepass"))
    if size > limits.max_file_size_bytes:
        raise ParseError(
            ParseErrorKind.PAYLOAD_TOO_LARGE,
            f"SVG content exceeds maximum size of {limits.max_file_size_mb:g}MB",
            size_bytes=size,
            max_file_size_bytes=limits.max_file_size_bytes,
        )
    return size


def _validate_dimensions(width: float, height: float, limits: ParserLimits) -> None:
    if width <= 0 or height <= 0:
        raise ParseError(
            ParseErrorKind.INVALID_DIMENSIONS,
            "Invalid SVG: width and height must be positive",
            width=width,
            height=height,
        )
    if width > limits.max_dimension or height > limits.max_dimension:
        raise ParseError(
            ParseErrorKind.DIMENSION_TOO_LARGE,
            f"Invalid SVG: dimensions exceed maximum of {limits.max_dimension:g}px",
            width=width,
            height=height,
            max_dimension=limits.max_dimension,
        )


def parse_svg(svg_text: str, limits: ParserLimits | None = None) -> ParseResult:
    """Parse raw SVG text into a ParseResult."""
    limits = limits or DEFAULT_LIMITS

    check_size(svg_text, limits)

    tree = decode_xml(svg_text, limits.parse_timeout_ms)

    root = tree.get(_ROOT_TAG)
    if root is None:
        raise ParseError(
            ParseErrorKind.MISSING_ROOT_ELEMENT,
            "Invalid SVG: No root svg element found",
            root_tag=next(iter(tree), None),
        )

    svg_width, svg_height = resolve_dimensions(root.get(ATTRS_KEY, {}))
    _validate_dimensions(svg_width, svg_height, limits)

    items = extract_rectangles(root, svg_width, svg_height, limits)
    issues = collect_issues(items)

    result = ParseResult(
        svg_width=svg_width,
        svg_height=svg_height,
        items=tuple(items),
        coverage_ratio=coverage_ratio(items, svg_width, svg_height),
        issues=issues,
    )
    logger.info(
        "Parsed SVG: %d rectangles, canvas %g×%g, issues=%s",
        result.items_count,
        svg_width,
        svg_height,
        [i.value for i in issues],
    )
    return result


def parse_svg_file(path: str | Path, limits: ParserLimits | None = None) -> ParseResult:
    """Read an SVG file and parse it. Read failures surface as IO_FAILURE."""
    start = time.perf_counter()

    try:
        content = reader.read_svg_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("SVG read failed: %s (%s)", path, e)
        raise ParseError(
            ParseErrorKind.IO_FAILURE,
            f"Failed to read or parse SVG: {e}",
            path=str(path),
        ) from e

    logger.debug("Parsing SVG file %s (%d chars)", path, len(content))
    result = parse_svg(content, limits)

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(
        "SVG parsed successfully: %s in %.0fms, %d rectangles",
        path,
        elapsed,
        result.items_count,
    )
    return result
