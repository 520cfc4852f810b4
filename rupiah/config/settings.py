"""Application settings module.

Centralized configuration for the HTTP service and CLI, read from environment
variables with defaults. The codec in ``rupiah.currency`` never reads these;
callers pass options explicitly.
"""
from __future__ import annotations

from functools import lru_cache
import os

from pydantic import BaseModel

from ..currency.types import RoundUnit


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"

    # Mount point of the currency and system routers
    API_PREFIX: str = "/api/v1"

    # Defaults applied when a request leaves the field out
    DEFAULT_ROUND_UNIT: RoundUnit = RoundUnit.RIBU
    WORDS_UPPERCASE: bool = False

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from environment with type coercion and defaults."""
        def _get_bool(name: str, default: bool) -> bool:
            raw = os.getenv(name)
            if raw is None:
                return default
            return raw.lower() in {"1", "true", "yes", "on"}

        def _get_round_unit(name: str, default: RoundUnit) -> RoundUnit:
            raw = os.getenv(name)
            if raw is None:
                return default
            try:
                return RoundUnit(raw.strip().lower())
            except ValueError:
                return default

        prefix = os.getenv("API_PREFIX", "/api/v1").rstrip("/")
        return cls(
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
            API_PREFIX=prefix,
            DEFAULT_ROUND_UNIT=_get_round_unit("DEFAULT_ROUND_UNIT", RoundUnit.RIBU),
            WORDS_UPPERCASE=_get_bool("WORDS_UPPERCASE", False),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (singleton pattern)."""
    return Settings.load()


__all__ = ["Settings", "get_settings"]
