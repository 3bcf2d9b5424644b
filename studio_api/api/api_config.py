# This file defines runtime settings for the studio API in one place.
# Base path, CORS origins, table name, and startup seeding can be changed through the environment.
# The loader applies local-development defaults and rejects unsafe SQL identifiers.

from __future__ import annotations

import os
import re
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Studio API"
    api_base_path: str = "/api"
    host: str = "0.0.0.0"
    port: int = 8080
    environment: str = "local"
    database_url: str
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    studio_table_name: str = "studios"
    seed_sample_data: bool = True
    app_version: str = "0.1.0"

    @field_validator("api_base_path")
    @classmethod
    def validate_api_base_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("api_base_path must start with '/'.")
        return value.rstrip("/")

    @field_validator("studio_table_name")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        if not _IDENTIFIER_RE.match(value):
            raise ValueError(f"Unsafe SQL identifier: {value!r}")
        return value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("port must be between 1 and 65535.")
        return value

    @property
    def allow_any_origin(self) -> bool:
        return "*" in self.allowed_origins


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Studio API"),
        "api_base_path": os.getenv("API_BASE_PATH", "/api"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 8080),
        "environment": os.getenv("ENV", "local"),
        "database_url": os.getenv("DATABASE_URL", ""),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", ["*"]),
        "studio_table_name": os.getenv("API_STUDIO_TABLE_NAME", "studios"),
        "seed_sample_data": _env_bool("API_SEED_SAMPLE_DATA", True),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }
    if not config_values["database_url"]:
        raise RuntimeError("DATABASE_URL is required for API startup.")

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
