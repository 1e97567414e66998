"""
Place Value Showdown - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings

_SECRET_KEYS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "DEBUG",
    "LOG_LEVEL",
    "HIGH_SCORES_TABLE",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets file outside Streamlit Cloud
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Supabase (optional; without it completed matches are not persisted)
    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    high_scores_table: str = "high_scores"

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Match pacing (seconds)
    intro_delay_seconds: float = 3.0
    kickoff_delay_seconds: float = 1.5
    deal_delay_seconds: float = 1.5
    ai_min_delay_seconds: float = 2.0
    ai_max_delay_seconds: float = 5.0
    completion_delay_seconds: float = 3.0

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @model_validator(mode="after")
    def _check_ai_delays(self) -> "Settings":
        if self.ai_max_delay_seconds < self.ai_min_delay_seconds:
            raise ValueError("AI_MAX_DELAY_SECONDS must be >= AI_MIN_DELAY_SECONDS.")
        return self

    @property
    def persistence_enabled(self) -> bool:
        """True when Supabase credentials are configured."""
        return bool(self.supabase_url and self.supabase_anon_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Set the root log level and format from settings."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
