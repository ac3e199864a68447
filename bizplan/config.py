"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "Business Plan Calculator"
    debug: bool = False

    # ── Storage ──────────────────────────────────────────
    storage_backend: str = "memory"  # "memory" | "local"
    local_storage_path: str = "./storage"

    # ── Projections ──────────────────────────────────────
    cash_flow_months: int = 12
    payback_horizon_years: int = 10
    sensitivity_swing: float = 0.2  # ±20% flex per key variable

    # ── Display ──────────────────────────────────────────
    currency_symbol: str = "€"

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
