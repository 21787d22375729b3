"""
Application configuration for chat incident triage.

Settings are read once at startup from the environment (and an optional .env
file) into an immutable Config that is passed explicitly to the classifier
client. Nothing in the triage pipeline reads ambient environment state.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Config(BaseSettings):
    """
    Global configuration with environment overrides.

    Backend credentials keep the variable names used by OpenAI tooling
    (OPENAI_API_KEY, OPENAI_BASE_URL, OPENAI_CHAT_MODEL); triage-specific
    settings use the TRIAGE_ prefix. TELEGRAM_BOT_TOKEN is not used by the
    triage pipeline itself; it is carried for the gateway adapter that
    delivers messages to TriageHandler.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRIAGE_",
        env_file=".env",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    openai_api_key: Optional[str] = Field(None, validation_alias="OPENAI_API_KEY")
    openai_base_url: Optional[str] = Field(None, validation_alias="OPENAI_BASE_URL")
    openai_chat_model: str = Field("gpt-4o-mini", validation_alias="OPENAI_CHAT_MODEL")
    telegram_bot_token: Optional[str] = Field(
        None,
        validation_alias="TELEGRAM_BOT_TOKEN",
        description="Messaging gateway credential, read by an external gateway adapter",
    )

    request_timeout_seconds: float = Field(30.0, gt=0.0, description="Per-call backend timeout")
    prompt_path: Optional[Path] = Field(None, description="Override for the triage policy text")

    log_level: str = Field("INFO", description="Default logging level")
    logs_dir: Path = Field(Path("logs"), description="Directory for log files")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {sorted(_LOG_LEVELS)}")
        return level


def load_config(**overrides: object) -> Config:
    """
    Build the startup configuration.

    Invalid values surface as ConfigurationError so startup can fail fast.
    """
    try:
        return Config(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid configuration: {exc}") from exc
