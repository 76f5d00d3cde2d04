"""
linesniff configuration

Settings loaded from environment variables (and a local .env file).
The detection engine itself reads none of these.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- CLI ---
    DEFAULT_LANGUAGE: str = os.getenv("LINESNIFF_DEFAULT_LANGUAGE", "javascript")

    # --- Simulated processing delay (seconds) ---
    DELAY_MIN: float = float(os.getenv("LINESNIFF_DELAY_MIN", "1.0"))
    DELAY_MAX: float = float(os.getenv("LINESNIFF_DELAY_MAX", "3.0"))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("LINESNIFF_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = os.getenv("LINESNIFF_LOG_FORMAT", "text")  # "json" or "text"


settings = Settings()
