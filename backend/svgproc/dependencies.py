"""FastAPI dependency injection."""

from __future__ import annotations

from svgproc.config import Settings, settings
from svgproc.svg.limits import ParserLimits


def get_settings() -> Settings:
    return settings


def get_parser_limits() -> ParserLimits:
    return ParserLimits.from_settings(settings)
