"""Parser limits — immutable guard rails shared by every parse call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svgproc.config import Settings


@dataclass(frozen=True)
class ParserLimits:
    """Caps applied to each parse. Protects against hostile or malformed SVGs."""

    # 5 MiB; large inputs blow up memory during decode
    max_file_size_bytes: int = 5 * 1024 * 1024
    # Beyond this index rectangles are ignored (truncation, not failure)
    max_rectangles: int = 10_000
    # Canvas width/height ceiling, keeps area math sane
    max_dimension: float = 100_000
    # Wall-clock budget for XML decoding
    parse_timeout_ms: int = 5_000

    @property
    def max_file_size_mb(self) -> float:
        return self.max_file_size_bytes / 1024 / 1024

    @classmethod
    def from_settings(cls, settings: Settings) -> ParserLimits:
        return cls(
            max_file_size_bytes=settings.parser_max_file_size_bytes,
            max_rectangles=settings.parser_max_rectangles,
            max_dimension=settings.parser_max_dimension,
            parse_timeout_ms=settings.parser_timeout_ms,
        )


DEFAULT_LIMITS = ParserLimits()
