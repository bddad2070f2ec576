"""Application settings for the conduct ledger service."""

from datetime import date
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration values."""

    model_config = SettingsConfigDict(
        env_prefix="CONDUCT_",
        env_file=".env",
        case_sensitive=False,
    )

    baseline_score: int = Field(
        default=200,
        description="Score every student starts from and returns to on reset.",
    )
    academic_year_start: date = Field(
        default=date(2025, 9, 8),
        description="First day of school week 1; weeks end on the weekday before it.",
    )
    lunar_break_start: date = Field(default=date(2026, 2, 14))
    lunar_break_end: date = Field(
        default=date(2026, 2, 22),
        description="Last day of the lunar new year break (inclusive).",
    )
    holidays: list[date] = Field(
        default_factory=lambda: [
            date(2025, 9, 2),
            date(2026, 1, 1),
            date(2026, 4, 27),
            date(2026, 4, 30),
            date(2026, 5, 1),
        ],
        description="Public holidays outside the lunar break.",
    )
    reject_unresolvable_owner: bool = Field(
        default=False,
        description="Reject events whose student id matches no known student.",
    )
    advisory_chat_events: int = Field(default=15, ge=0)
    advisory_insight_events: int = Field(default=30, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
