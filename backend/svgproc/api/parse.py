"""POST /api/parse* — run the rectangle parser on submitted SVG."""

from __future__ import annotations

import logging
from pathlib import PurePath

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from svgproc.config import Settings
from svgproc.dependencies import get_parser_limits, get_settings
from svgproc.models.parse_result import ParseResult
from svgproc.models.requests import ParseRequest
from svgproc.svg.limits import ParserLimits
from svgproc.svg.parser import parse_svg

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/parse")

# Generic content types accepted when the filename says .svg
_GENERIC_MIME_TYPES = {"text/plain", "application/octet-stream"}


def _check_upload_type(content_type: str, filename: str | None, settings: Settings) -> None:
    mime = content_type.split(";")[0].strip().lower()
    ext = PurePath(filename).suffix.lower() if filename else ""

    if mime in settings.upload_allowed_mime_types:
        return
    if mime in _GENERIC_MIME_TYPES and ext in settings.upload_allowed_extensions:
        return
    raise HTTPException(
        status_code=400,
        detail=f"Invalid file type. Allowed: {', '.join(settings.upload_allowed_extensions)}",
    )


@router.post("", response_model=ParseResult)
def parse(
    req: ParseRequest,
    limits: ParserLimits = Depends(get_parser_limits),
) -> ParseResult:
    return parse_svg(req.svg, limits)


@router.post("/upload", response_model=ParseResult)
async def parse_upload(
    request: Request,
    settings: Settings = Depends(get_settings),
    limits: ParserLimits = Depends(get_parser_limits),
) -> ParseResult:
    """Parse a raw SVG request body. Filename, if any, comes from X-Filename."""
    filename = request.headers.get("x-filename")
    _check_upload_type(request.headers.get("content-type", ""), filename, settings)

    body = await request.body()
    if len(body) > settings.upload_max_file_size:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds maximum upload size of {settings.upload_max_file_size} bytes",
        )
    try:
        svg_text = body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="SVG file must be UTF-8 encoded") from None

    logger.debug("Upload received: %s (%d bytes)", filename or "<unnamed>", len(body))
    # Off the event loop, so a slow decode does not stall other requests
    return await run_in_threadpool(parse_svg, svg_text, limits)
