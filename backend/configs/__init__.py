"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from backend.configs.llm import LLMSettings
from backend.configs.rag import RagSettings
from backend.configs.server import ServerSettings
from backend.configs.settings import Settings, get_settings

__all__ = ["LLMSettings", "RagSettings", "ServerSettings", "Settings", "get_settings"]
