"""Settings for the framework integration layer."""
from __future__ import annotations

import os
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv


class Settings:
    """Runtime configuration loaded from environment variables.

    Only the FastAPI/Starlette helpers read these; ``forwarded()`` itself
    takes no configuration.
    """

    # Middleware
    FORWARDED_ENABLED: bool
    FORWARDED_STATE_ATTR: str
    FORWARDED_LOG_RESOLUTION: bool

    # get_client_ip()
    FORWARDED_UNKNOWN_IP: str

    def __init__(self) -> None:
        # Load .env once (supports parent directories)
        load_dotenv(find_dotenv(usecwd=True), override=False)
        self.FORWARDED_ENABLED = self._get_bool("FORWARDED_ENABLED", "true")
        self.FORWARDED_STATE_ATTR = os.getenv("FORWARDED_STATE_ATTR", "forwarded").strip() or "forwarded"
        self.FORWARDED_LOG_RESOLUTION = self._get_bool("FORWARDED_LOG_RESOLUTION", "false")
        self.FORWARDED_UNKNOWN_IP = os.getenv("FORWARDED_UNKNOWN_IP", "")

    @staticmethod
    def _get_bool(name: str, default: str) -> bool:
        return os.getenv(name, default).strip().lower() == "true"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
