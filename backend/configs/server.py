"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: uvicorn and upload limits for the API boundary
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=5000, description="Bind port")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )
    max_upload_bytes: int = Field(
        default=25 * 1024 * 1024,
        gt=0,
        description="Maximum accepted upload size in bytes",
    )
