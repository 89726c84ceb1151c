from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())


def _normalize_prefix(raw: str) -> str:
    prefix = "/" + raw.strip().strip("/")
    return "" if prefix == "/" else prefix


@dataclass(frozen=True)
class Settings:
    # API surface
    api_prefix: str
    api_title: str
    api_description: str
    api_version: str

    # Server
    host: str
    port: int

    # Logging
    log_level: str
    log_file: str | None
    log_requests: bool


def get_settings() -> Settings:
    api_prefix = _normalize_prefix(os.getenv("API_PREFIX", "/api"))
    api_title = os.getenv("API_TITLE", "JSON Resource API")
    api_description = os.getenv(
        "API_DESCRIPTION",
        "CRUD API over an in-memory collection of arbitrary JSON documents keyed by UUID.",
    )
    api_version = os.getenv("API_VERSION", "1.0")

    host = os.getenv("HOST", "0.0.0.0")
    port = _env_int("PORT", 8000)

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    log_file = os.getenv("LOG_FILE", "").strip() or None
    log_requests = _env_bool("LOG_REQUESTS", True)

    return Settings(
        api_prefix=api_prefix,
        api_title=api_title,
        api_description=api_description,
        api_version=api_version,
        host=host,
        port=port,
        log_level=log_level,
        log_file=log_file,
        log_requests=log_requests,
    )
