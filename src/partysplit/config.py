from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    currency: str = Field("¥", alias="CURRENCY")
    default_expense_description: str = Field("Untitled expense", alias="DEFAULT_EXPENSE_DESCRIPTION")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    insights_unconfigured_message: str = Field(
        "Configure a text generator to get spending insights.",
        alias="INSIGHTS_UNCONFIGURED_MESSAGE",
    )
    insights_failure_message: str = Field(
        "Could not fetch spending insights.",
        alias="INSIGHTS_FAILURE_MESSAGE",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
