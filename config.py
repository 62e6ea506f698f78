# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Environment-driven settings for the portline web app."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

APP_VERSION = "v1.0.0"
SUPPORTED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Raised when the process environment cannot produce valid settings."""


class AppSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    api_key: str = Field(min_length=1)
    secret_key: str = "dev-secret"
    snapshot_path: str = "containers.yaml"
    default_orientation: Literal["horizontal", "vertical"] = "horizontal"
    log_level: str = "INFO"
    log_file: str | None = None

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("API_KEY must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in SUPPORTED_LOG_LEVELS:
            raise ValueError(
                f"unsupported log level: {value!r}; allowed: {sorted(SUPPORTED_LOG_LEVELS)}"
            )
        return level


ENV_FIELDS = {
    "API_KEY": "api_key",
    "SECRET_KEY": "secret_key",
    "PORTLINE_SNAPSHOT": "snapshot_path",
    "PORTLINE_ORIENTATION": "default_orientation",
    "PORTLINE_LOG_LEVEL": "log_level",
    "PORTLINE_LOG_FILE": "log_file",
}


def load_settings(environ: Mapping[str, str] | None = None) -> AppSettings:
    env = os.environ if environ is None else environ
    if not env.get("API_KEY", "").strip():
        raise ConfigError(
            "API_KEY environment variable is required. Please set it in the environment."
        )
    data = {field: env[name] for name, field in ENV_FIELDS.items() if env.get(name)}
    try:
        return AppSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid settings: {exc.errors()[0]['msg']}") from exc
