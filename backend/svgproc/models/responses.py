"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ApiError(BaseModel):
    error: str
    message: str
    status_code: int
    kind: str | None = None
    timestamp: str
    path: str
