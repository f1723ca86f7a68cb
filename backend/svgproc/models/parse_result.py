"""Parse result models — the engine's output, immutable once built."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Issue(str, enum.Enum):
    EMPTY = "EMPTY"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"


class Rectangle(BaseModel):
    """One axis-aligned <rect> pulled out of the SVG."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    fill: str = "#000000"
    is_out_of_bounds: bool = False

    @property
    def area(self) -> float:
        return self.width * self.height


class ParseResult(BaseModel):
    """Dimensions, rectangles and summary metrics for one SVG."""

    model_config = ConfigDict(frozen=True)

    svg_width: float = Field(..., gt=0)
    svg_height: float = Field(..., gt=0)
    items: tuple[Rectangle, ...] = ()
    coverage_ratio: float = 0.0
    issues: tuple[Issue, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def items_count(self) -> int:
        return len(self.items)

    def has_issue(self, issue: Issue) -> bool:
        return issue in self.issues
