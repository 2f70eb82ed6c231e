"""Runtime settings, read from the environment (and a ``.env`` file if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "inventory"
    mongodb_timeout_ms: int = 5000
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


def load_settings() -> Settings:
    load_dotenv()
    defaults = Settings()
    return Settings(
        mongodb_uri=os.getenv("MONGODB_URI", defaults.mongodb_uri),
        mongodb_database=os.getenv("MONGODB_DATABASE", defaults.mongodb_database),
        mongodb_timeout_ms=int(os.getenv("MONGODB_TIMEOUT_MS", defaults.mongodb_timeout_ms)),
        api_prefix=os.getenv("IMS_API_PREFIX", defaults.api_prefix).rstrip("/"),
        host=os.getenv("HOST", defaults.host),
        port=int(os.getenv("PORT", defaults.port)),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
    )
