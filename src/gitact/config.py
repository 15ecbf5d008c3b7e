"""Typed settings loaded from the environment and ``.env``."""

import logging
from typing import Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitact.errors import ConfigError


class Settings(BaseSettings):
    """Runtime configuration for gitact."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    github_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "GH_TOKEN"),
        repr=False,
    )
    api_base_url: str = Field(
        default="https://api.github.com", alias="GITACT_API_BASE_URL"
    )
    request_timeout_seconds: float = Field(default=10.0, alias="GITACT_TIMEOUT_SECONDS")
    max_repo_pages: int = Field(default=10, alias="GITACT_MAX_REPO_PAGES")
    notification_seconds: float = Field(default=3.0, alias="GITACT_NOTIFICATION_SECONDS")
    rate_limit_warning_threshold: int = Field(
        default=10, alias="GITACT_RATE_LIMIT_THRESHOLD"
    )
    log_file: Optional[str] = Field(default=None, alias="GITACT_LOG_FILE")
    log_level: str = Field(default="WARNING", alias="GITACT_LOG_LEVEL")

    @field_validator("github_token", "log_file", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("request_timeout_seconds", "notification_seconds")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be positive")
        return value

    @field_validator("max_repo_pages")
    @classmethod
    def _at_least_one_page(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value


def load_settings() -> Settings:
    """Build settings, turning validation failures into ``ConfigError``."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc
