from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="GERR_LOG_LEVEL")
    fake_api_rand_max: int = Field(
        default=3, ge=0, validation_alias="GERR_FAKE_API_RAND_MAX"
    )
    default_exit_code: int = Field(
        default=-1, validation_alias="GERR_DEFAULT_EXIT_CODE"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        if v == "":
            return "INFO"
        return v.upper()

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )
