"""Unit tests for Pydantic settings."""

from pathlib import Path
from unittest.mock import patch

from dev_diary.settings import Settings


def test_defaults():
    with patch.dict("os.environ", {}, clear=True):
        settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.temporal_host == "localhost:7233"
    assert settings.temporal_task_queue == "dev-diary"
    assert settings.llm_model == "gpt-4o-mini"
    assert settings.llm_max_input_tokens is None
    assert settings.llm_budget_ratio == 0.7
    assert settings.github_gist_filename == "dev-diary.md"
    assert settings.repository_path is None


def test_env_overrides():
    with patch.dict(
        "os.environ",
        {
            "NOTION_API_KEY": "secret",
            "NOTION_DATABASE_ID": "db",
            "LLM_MAX_INPUT_TOKENS": "8000",
            "TELEGRAM_CHAT_ID": "42",
            "TEMPORAL_TASK_QUEUE": "diary-queue",
        },
        clear=True,
    ):
        settings = Settings(_env_file=None)
    assert settings.notion_api_key == "secret"
    assert settings.notion_database_id == "db"
    assert settings.llm_max_input_tokens == 8000
    assert settings.telegram_chat_id == "42"
    assert settings.temporal_task_queue == "diary-queue"


def test_repository_path_expands_home():
    with patch.dict(
        "os.environ", {"REPOSITORY_PATH": "~/code/project", "HOME": "/home/dev"}, clear=True
    ):
        settings = Settings(_env_file=None)
    assert settings.repository_path == Path("/home/dev/code/project")


def test_empty_repository_path_is_none():
    with patch.dict("os.environ", {"REPOSITORY_PATH": ""}, clear=True):
        settings = Settings(_env_file=None)
    assert settings.repository_path is None
