"""
Application-wide configuration.

Fields that belong to the process rather than to one component: environment
name, log level and the .env file every settings section reads.

Dependencies: pydantic_settings
System role: Root of the Settings aggregate
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BaseSettings(PydanticBaseSettings):
    """Process-level settings shared by the whole application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="chat-with-notes", description="Service name used in logs")
    environment: str = Field(default="development", description="Deployment environment name")
    log_level: LogLevel = Field(default="INFO", description="Root logger level")
