"""
Shared pytest configuration and fixtures for the test suite.

This module provides common fixtures, test markers, and configuration
for all test categories (unit, integration).
"""

from datetime import UTC, datetime

import pytest

from dev_diary.clipboard import reset_clipboard_watchers
from dev_diary.integrations.llm import GenerativeBackend
from dev_diary.models import (
    ActivityData,
    Commit,
    Diary,
    GitActivity,
    SnippetRecord,
)

# Environment variables that would leak a developer's real configuration
CONFIG_ENV_VARS = [
    "OPENAI_API_KEY",
    "NOTION_API_KEY",
    "NOTION_DATABASE_ID",
    "GITHUB_TOKEN",
    "TELEGRAM_TOKEN",
    "TELEGRAM_CHAT_ID",
    "PIECES_BASE_URL",
    "PIECES_API_KEY",
    "REPOSITORY_PATH",
    "LLM_MAX_INPUT_TOKENS",
]


@pytest.fixture(scope="function", autouse=True)
def clean_environment(monkeypatch):
    """Run every test without credentials from the surrounding shell."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="function", autouse=True)
def fresh_clipboard_watchers():
    """Give every test its own process-wide clipboard watchers."""
    reset_clipboard_watchers()
    yield
    reset_clipboard_watchers()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, isolated)"
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (slower, external deps)",
    )
    config.addinivalue_line(
        "markers", "clipboard: marks tests of clipboard capture"
    )
    config.addinivalue_line(
        "markers", "telegram: marks tests that interact with Telegram"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "clipboard" in str(item.fspath):
            item.add_marker(pytest.mark.clipboard)
        if "telegram" in str(item.fspath):
            item.add_marker(pytest.mark.telegram)


class ScriptedBackend(GenerativeBackend):
    """Generative backend that replays scripted responses.

    Each entry is returned in turn; an exception entry is raised instead.
    """

    def __init__(self, responses, tokens_per_call: int | None = None):
        self.responses = list(responses)
        self.calls: list[dict] = []
        self.tokens_per_call = tokens_per_call

    async def complete(self, system_prompt, user_prompt, temperature, max_output_tokens):
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "temperature": temperature,
                "max_output_tokens": max_output_tokens,
            }
        )
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def count_tokens(self, text: str) -> int:
        if self.tokens_per_call is not None:
            return self.tokens_per_call
        return super().count_tokens(text)


@pytest.fixture
def scripted_backend():
    """Factory for ScriptedBackend instances."""
    return ScriptedBackend


@pytest.fixture
def sample_diary_markdown():
    return """# Dev Diary - Parser Refactor

Refactored the tokenizer and fixed the flaky cache tests. #python #testing

## Code Highlights

```python
def tokenize(text):
    return text.split()
```

## Next Steps

Ship the parser behind a flag.
"""


@pytest.fixture
def sample_diary(sample_diary_markdown):
    return Diary(
        title="Dev Diary - Parser Refactor",
        markdown=sample_diary_markdown,
        html="<h1>Dev Diary - Parser Refactor</h1>",
    )


@pytest.fixture
def sample_activity():
    """Activity data with a couple of snippets and commits."""
    now = datetime.now(UTC)
    return ActivityData(
        snippets=[
            SnippetRecord(code="def tokenize(text):\n    return text.split()", language="Python"),
            SnippetRecord(code="SELECT * FROM users", language="SQL", tags=["db"]),
        ],
        notes=["Pairing session on the parser"],
        decisions=["Keep the cache in memory"],
        git_activity=GitActivity(
            commits=[Commit(message="Refactor tokenizer", timestamp=now)],
            branches=["main", "feature/parser"],
        ),
    )
