"""Chat relay settings, loaded from the environment (and a .env file if present)."""

import logging
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

logger = logging.getLogger(__name__)

ENDPOINT_ENV_KEY = "AZURE_FOUNDRY_ENDPOINT"
DEFAULT_API_VERSION = "2024-10-21"
DEFAULT_REQUEST_TIMEOUT = 30.0


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number, using %s", name, raw, default)
        return default


class Settings(BaseModel):
    foundry_endpoint: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            foundry_endpoint=os.getenv(ENDPOINT_ENV_KEY),
            api_version=os.getenv("AZURE_FOUNDRY_API_VERSION", DEFAULT_API_VERSION),
            request_timeout=_env_float("CHAT_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings.from_env()
