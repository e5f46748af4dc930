from contextlib import nullcontext
from unittest.mock import MagicMock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from dev_diary.integrations.llm import (
    GenerativeBackend,
    GenerativeBackendError,
    LangChainBackend,
)


class FailingChatModel(FakeListChatModel):
    def _call(self, *args, **kwargs):
        raise RuntimeError("quota exceeded")


@pytest.fixture(autouse=True)
def no_tracing(monkeypatch):
    monkeypatch.setattr(
        "dev_diary.integrations.llm.backend.trace",
        lambda *args, **kwargs: nullcontext(),
    )


async def test_complete_returns_model_text():
    model = FakeListChatModel(responses=["# Diary\n\nDone."])
    backend = LangChainBackend(model=model)

    result = await backend.complete("system", "user", 0.5, 100)

    assert result == "# Diary\n\nDone."


async def test_complete_wraps_model_errors():
    backend = LangChainBackend(model=FailingChatModel(responses=[]))

    with pytest.raises(GenerativeBackendError, match="quota exceeded"):
        await backend.complete("system", "user", 0.5, 100)


def test_count_tokens_falls_back_to_estimate():
    model = MagicMock()
    model.get_num_tokens.side_effect = ImportError("no tokenizer")
    backend = LangChainBackend(model=model)
    assert backend.count_tokens("x" * 40) == 11


def test_count_tokens_uses_model_tokenizer():
    model = MagicMock()
    model.get_num_tokens.return_value = 7
    assert LangChainBackend(model=model).count_tokens("anything") == 7


def test_default_estimate():
    class EchoBackend(GenerativeBackend):
        async def complete(self, system_prompt, user_prompt, temperature, max_output_tokens):
            return user_prompt

    assert EchoBackend().count_tokens("") == 1
    assert EchoBackend().count_tokens("abcdefgh") == 3
