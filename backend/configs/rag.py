"""
RAG core configuration settings.

Segmentation, retrieval and ingestion concurrency parameters.

Dependencies: pydantic, pydantic_settings
System role: Tuning knobs for the ingestion and query paths
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RagSettings(BaseSettings):
    """Segmenter, ranker and pipeline configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_chunk_size: int = Field(
        default=1000,
        gt=0,
        description="Maximum chunk length in characters",
    )
    hard_split_oversized: bool = Field(
        default=False,
        description="Cut single sentences longer than max_chunk_size at character boundaries",
    )
    top_k: int = Field(
        default=3,
        ge=0,
        description="Number of chunks used as context for an answer",
    )
    context_delimiter: str = Field(
        default="\n---\n",
        description="Separator placed between retrieved chunks in the context",
    )
    embedding_concurrency: int = Field(
        default=8,
        gt=0,
        description="Maximum concurrent embedding calls during ingestion",
    )
