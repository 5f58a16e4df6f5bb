"""
Dig & Bust - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache

from pydantic_settings import BaseSettings

_SECRET_KEYS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "DEBUG",
    "LOG_LEVEL",
    "DIG_DELAY_MS",
    "LEADERBOARD_LIMIT",
    "BACKGROUND_SUBMIT",
)

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets.toml outside Streamlit Cloud; plain env vars still apply
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Supabase
    supabase_url: str
    supabase_anon_key: str

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Gameplay pacing
    dig_delay_ms: int = 300

    # Leaderboard
    leaderboard_limit: int = 50
    background_submit: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Configure root logging once and return the package logger."""
    logger = logging.getLogger("digbust")
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            format=_LOG_FORMAT,
        )
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
