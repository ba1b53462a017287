"""
Application settings

Managed with pydantic-settings; every field can be overridden through the
environment (case-insensitive) or a .env file.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sandbox_gateway.domain.value_objects.execution_limits import (
    MAX_MEMORY_LIMIT_KB,
    MAX_TIME_LIMIT_SECONDS,
)


class Settings(BaseSettings):
    """Gateway settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============== Application ==============
    app_name: str = Field(default="Sandbox Code Gateway")
    app_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    # ============== Server ==============
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # ============== Piston backend ==============
    piston_url: str = Field(default="http://localhost:2000")
    # None leaves the backend connection without a transport timeout
    piston_timeout: Optional[float] = Field(default=None, gt=0)

    # ============== Execution defaults ==============
    default_time_limit_seconds: float = Field(default=MAX_TIME_LIMIT_SECONDS)
    default_memory_limit_kb: int = Field(default=MAX_MEMORY_LIMIT_KB)

    # ============== Logging ==============
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")  # json, text

    # ============== Security ==============
    cors_origins: list[str] = Field(default=["http://localhost:5173"])

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "text"}
        if v not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = {"development", "staging", "production"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Settings singleton

    Loaded once per process; lru_cache keeps it read-only in practice.
    """
    return Settings()
