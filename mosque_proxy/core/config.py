"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    google_api_key: str
    port: int = 3000
    default_radius: int = 10000
    default_photo_max_width: int = 400
    cors_origins: Tuple[str, ...] = ("*",)


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    google_api_key = os.getenv("GOOGLE_MAPS_API_KEY") or os.getenv("GOOGLE_API_KEY", "")
    port = int(os.getenv("PORT", "3000"))
    default_radius = int(os.getenv("NEARBY_DEFAULT_RADIUS", "10000"))
    default_photo_max_width = int(os.getenv("PHOTO_DEFAULT_MAX_WIDTH", "400"))
    cors_origins = _parse_origins(os.getenv("CORS_ORIGINS", "*"))

    if not google_api_key:
        logger.warning("GOOGLE_MAPS_API_KEY is not configured; Google Places requests will fail.")

    return Settings(
        google_api_key=google_api_key,
        port=port,
        default_radius=default_radius,
        default_photo_max_width=default_photo_max_width,
        cors_origins=cors_origins,
    )
