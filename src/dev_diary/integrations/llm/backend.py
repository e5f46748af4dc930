"""Generative text backend built on LangChain chat models."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI
from langsmith import trace

from .exceptions import GenerativeBackendError

logger = logging.getLogger(__name__)


class GenerativeBackend(ABC):
    """Abstract interface for a text completion service."""

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        """Return the model's text response.

        Raises:
            GenerativeBackendError: On transport, quota or response errors.
        """
        pass

    def count_tokens(self, text: str) -> int:
        """Estimate the token count of ``text``."""
        # Roughly four characters per token for English and code
        return len(text) // 4 + 1


class LangChainBackend(GenerativeBackend):
    """Backend that sends prompts through a LangChain chat model."""

    def __init__(
        self,
        model: BaseChatModel | None = None,
        *,
        model_name: str = "gpt-4o-mini",
        api_key: str | None = None,
        langsmith_project: str | None = None,
    ) -> None:
        if model is None:
            model = ChatOpenAI(model=model_name, api_key=api_key)  # type: ignore[arg-type]
        self.model = model
        self.langsmith_project = langsmith_project
        self._prompt = ChatPromptTemplate.from_messages(
            [
                ("system", "{system}"),
                ("human", "{text}"),
            ]
        )

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        model = self.model.bind(temperature=temperature, max_tokens=max_output_tokens)
        chain = self._prompt | model

        logger.info(
            "Requesting completion: %s",
            user_prompt[:200] + "..." if len(user_prompt) > 200 else user_prompt,
        )
        try:
            with trace("diary-completion", project_name=self.langsmith_project, run_type="llm"):
                response = await chain.ainvoke({"system": system_prompt, "text": user_prompt})
        except Exception as e:
            raise GenerativeBackendError(f"Completion request failed: {e}") from e

        content = getattr(response, "content", str(response))
        if not isinstance(content, str):
            raise GenerativeBackendError("Completion returned non-text content")
        return content

    def count_tokens(self, text: str) -> int:
        try:
            return self.model.get_num_tokens(text)
        except Exception as e:
            logger.debug(f"Tokenizer unavailable, estimating token count: {e}")
            return super().count_tokens(text)
