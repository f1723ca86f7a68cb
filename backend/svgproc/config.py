"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgproc_env: str = "development"
    svgproc_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Upload endpoint
    upload_max_file_size: int = 5 * 1024 * 1024
    upload_allowed_mime_types: list[str] = ["image/svg+xml"]
    upload_allowed_extensions: list[str] = [".svg"]

    # Parser limits
    parser_max_file_size_bytes: int = 5 * 1024 * 1024
    parser_max_rectangles: int = 10_000
    parser_max_dimension: float = 100_000
    parser_timeout_ms: int = 5_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_production(self) -> bool:
        return self.svgproc_env == "production"


settings = Settings()
