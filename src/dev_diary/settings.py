"""Central application settings using Pydantic."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Core application
    log_level: str = Field("INFO", env="LOG_LEVEL")
    port: int = Field(8000, env="PORT")

    # Generative backend
    openai_api_key: str | None = Field(None, env="OPENAI_API_KEY")
    llm_model: str = Field("gpt-4o-mini", env="LLM_MODEL")
    llm_temperature: float = Field(0.7, env="LLM_TEMPERATURE")
    llm_max_output_tokens: int = Field(4000, env="LLM_MAX_OUTPUT_TOKENS")
    llm_max_input_tokens: int | None = Field(None, env="LLM_MAX_INPUT_TOKENS")
    llm_budget_ratio: float = Field(0.7, env="LLM_BUDGET_RATIO")

    # Notion
    notion_api_key: str | None = Field(None, env="NOTION_API_KEY")
    notion_database_id: str | None = Field(None, env="NOTION_DATABASE_ID")

    # GitHub
    github_token: str | None = Field(None, env="GITHUB_TOKEN")
    github_gist_filename: str = Field("dev-diary.md", env="GITHUB_GIST_FILENAME")

    # Telegram
    telegram_token: str | None = Field(None, env="TELEGRAM_TOKEN")
    telegram_chat_id: str | None = Field(None, env="TELEGRAM_CHAT_ID")

    # Pieces snippet store
    pieces_base_url: str | None = Field(None, env="PIECES_BASE_URL")
    pieces_api_key: str | None = Field(None, env="PIECES_API_KEY")

    # Local git repository
    repository_path: Path | None = Field(None, env="REPOSITORY_PATH")

    # Temporal
    temporal_host: str = Field("localhost:7233", env="TEMPORAL_HOST")
    temporal_task_queue: str = Field("dev-diary", env="TEMPORAL_TASK_QUEUE")
    temporal_namespace: str = Field("default", env="TEMPORAL_NAMESPACE")

    # Observability
    langsmith_project: str | None = Field(None, env="LANGSMITH_PROJECT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("repository_path", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        if v is None or v == "":
            return None
        return Path(v).expanduser()


def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings()
