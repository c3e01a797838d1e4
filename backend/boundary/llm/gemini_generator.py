"""
Google Generative AI answer generator.

Runs the notes Q&A prompt through a Gemini chat model and returns plain text.

Dependencies: langchain_google_genai, langchain_core
System role: Answer generation provider for the query path
"""

import logging

from langchain_core.output_parsers import StrOutputParser
from langchain_google_genai import ChatGoogleGenerativeAI

from backend.boundary.llm.prompts import NOTES_QA_PROMPT
from backend.configs.llm import LLMSettings
from backend.core.exceptions import GenerationUnavailableError

logger = logging.getLogger(__name__)


class GeminiAnswerGenerator:
    """Answer questions from retrieved context with a Gemini chat model."""

    def __init__(
        self,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.0,
        api_key: str | None = None,
    ) -> None:
        """
        Initialize generator.

        Args:
            model: Google chat model ID
            temperature: Model temperature (0.0 for deterministic)
            api_key: Google API key (falls back to GOOGLE_API_KEY if None)
        """
        kwargs = {"google_api_key": api_key} if api_key else {}
        self._model_id = model
        self._model = ChatGoogleGenerativeAI(model=model, temperature=temperature, **kwargs)
        self._chain = NOTES_QA_PROMPT | self._model | StrOutputParser()

    @classmethod
    def from_settings(cls, settings: LLMSettings) -> "GeminiAnswerGenerator":
        return cls(
            model=settings.chat_model,
            temperature=settings.temperature,
            api_key=settings.api_key,
        )

    async def generate(self, context: str, question: str) -> str:
        """
        Generate an answer grounded in context.

        Args:
            context: Retrieved chunks joined into one string
            question: User's question

        Returns:
            str: Model answer

        Raises:
            GenerationUnavailableError: When the provider call fails
        """
        logger.info(
            f"{__name__}:generate - START context_len={len(context)}, question_len={len(question)}"
        )
        try:
            answer = await self._chain.ainvoke({"context": context, "question": question})
        except Exception as e:
            logger.error(f"{__name__}:generate - Provider call failed: {type(e).__name__}: {e}")
            raise GenerationUnavailableError(
                f"Failed to generate answer: {e}",
                provider=self._model_id,
            ) from e

        logger.info(f"{__name__}:generate - END answer_len={len(answer)}")
        return answer
