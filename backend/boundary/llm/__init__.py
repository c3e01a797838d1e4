"""
LLM provider boundary layer.

- GeminiEmbedder: text embeddings via Google Generative AI
- GeminiAnswerGenerator: grounded answers via Google Generative AI chat models

Dependencies: langchain_google_genai, langchain_core
System role: Concrete Embedder and AnswerGenerator implementations
"""

from backend.boundary.llm.gemini_embedder import GeminiEmbedder
from backend.boundary.llm.gemini_generator import GeminiAnswerGenerator

__all__ = ["GeminiEmbedder", "GeminiAnswerGenerator"]
