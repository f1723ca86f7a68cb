"""SVG rectangle extraction engine."""

from svgproc.svg.errors import ParseError, ParseErrorKind
from svgproc.svg.limits import DEFAULT_LIMITS, ParserLimits
from svgproc.svg.parser import parse_svg, parse_svg_file

__all__ = [
    "DEFAULT_LIMITS",
    "ParseError",
    "ParseErrorKind",
    "ParserLimits",
    "parse_svg",
    "parse_svg_file",
]
