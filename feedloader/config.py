# /feedloader/config.py
from __future__ import annotations

import os

from pydantic import BaseModel


class Settings(BaseModel):
    VERIFY_TLS: bool = os.getenv("VERIFY_TLS", "true").lower() == "true"

    # Transport limits
    TIMEOUT_SECONDS: float = float(os.getenv("TIMEOUT_SECONDS", "10.0"))
    CONCURRENCY: int = int(os.getenv("CONCURRENCY", "100"))  # sockets per session
    PER_HOST_LIMIT: int = int(os.getenv("PER_HOST_LIMIT", "10"))  # sockets per host

    # Response safety
    MAX_BYTES: int = int(os.getenv("MAX_BYTES", "5242880"))  # 5 MB

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
