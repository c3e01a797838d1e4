"""
LLM provider configuration settings.

Google Generative AI models used for embeddings and answer generation.

Dependencies: pydantic, pydantic_settings
System role: Provider configuration for the boundary layer
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Embedding and chat model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Google API key (GOOGLE_API_KEY)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google embedding model ID",
    )
    embedding_dimension: int = Field(
        default=1536,
        gt=0,
        description="Embedding vector dimension requested from the provider",
    )
    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Google chat model ID used to answer questions",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Model temperature (0.0 for deterministic)",
    )
