"""Issue flags and coverage ratio over the surviving rectangles."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from svgproc.models.parse_result import Issue, Rectangle

_RATIO_DECIMALS = 4


def collect_issues(items: Sequence[Rectangle]) -> tuple[Issue, ...]:
    issues: list[Issue] = []
    if not items:
        issues.append(Issue.EMPTY)
    if any(r.is_out_of_bounds for r in items):
        issues.append(Issue.OUT_OF_BOUNDS)
    return tuple(issues)


def coverage_ratio(items: Sequence[Rectangle], svg_width: float, svg_height: float) -> float:
    """Summed rectangle area over canvas area, rounded to 4 decimals.

    Overlaps are counted twice, so the ratio can exceed 1.0. Canvas area is
    positive here; dimensions were validated upstream.
    """
    if not items:
        return 0.0
    sizes = np.array([(r.width, r.height) for r in items], dtype=np.float64)
    total_area = float(np.sum(sizes[:, 0] * sizes[:, 1]))
    return round(total_area / (svg_width * svg_height), _RATIO_DECIMALS)
