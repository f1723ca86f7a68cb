"""Reads SVG files from storage as UTF-8 text."""

from __future__ import annotations

from pathlib import Path


def read_svg_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")
