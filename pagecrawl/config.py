from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    user_agent: str
    request_timeout_seconds: int
    max_content_size_bytes: int
    log_level: str


def load_config() -> Config:
    # Load from .env if present
    load_dotenv(override=False)

    user_agent = os.getenv("USER_AGENT", "PageCrawl/1.0")
    _rto_raw = os.getenv("REQUEST_TIMEOUT_SECONDS")
    request_timeout_seconds = int(_rto_raw) if _rto_raw is not None else 15
    _mcs_raw = os.getenv("MAX_CONTENT_SIZE_BYTES")
    max_content_size_bytes = int(_mcs_raw) if _mcs_raw is not None else 3 * 1024 * 1024
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if log_level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Config(
        user_agent=user_agent,
        request_timeout_seconds=request_timeout_seconds,
        max_content_size_bytes=max_content_size_bytes,
        log_level=log_level,
    )
