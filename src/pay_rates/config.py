"""Configuration management for pay-rates."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    log_level: str
    default_tax_rate: str
    default_pay_type: str

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            log_level=os.getenv("PAY_RATES_LOG_LEVEL", "WARNING").upper(),
            default_tax_rate=os.getenv("PAY_RATES_DEFAULT_TAX_RATE", "0"),
            default_pay_type=os.getenv("PAY_RATES_DEFAULT_PAY_TYPE", "hourly"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
