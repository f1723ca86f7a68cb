"""FastAPI app factory."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from svgproc.config import settings
from svgproc.models.responses import ApiError
from svgproc.svg.errors import ParseError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgproc_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
    if exc.is_client_error:
        logger.warning("Parse rejected: %s [%s] %s", request.url.path, exc.kind.value, exc.message)
        message = exc.message
    else:
        logger.error("Parse failed: %s [%s] %s", request.url.path, exc.kind.value, exc.message)
        message = "An unexpected error occurred" if settings.is_production else exc.message

    body = ApiError(
        error="SVGParseError",
        message=message,
        status_code=exc.status_code,
        kind=exc.kind.value,
        timestamp=datetime.now(timezone.utc).isoformat(),
        path=request.url.path,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="SVG Processor",
        description="SVG rectangle extraction — dimensions, rectangles, coverage and issues",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ParseError, _parse_error_handler)

    from svgproc.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
