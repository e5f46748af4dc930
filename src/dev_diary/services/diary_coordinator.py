"""
Composition root for the diary cycle.

``DiaryCoordinator`` wires the activity collector, the diary generator and
the publish coordinator together and exposes the four operations used by
the HTTP API and the Temporal activities.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from dev_diary.integrations.git import GitRepository
from dev_diary.integrations.github import GistClient
from dev_diary.integrations.llm import GenerativeBackend, LangChainBackend
from dev_diary.integrations.markdown import MarkdownRenderer
from dev_diary.integrations.notion import NotionClient
from dev_diary.integrations.pieces import PiecesClient
from dev_diary.integrations.telegram import TelegramClient
from dev_diary.models.activity import ActivityData
from dev_diary.models.diary import Diary, DiaryRun, PublishResult
from dev_diary.settings import Settings, get_settings

from .activity_collector import ActivityCollector
from .destinations import (
    GistDestination,
    NotionDestination,
    PublishDestination,
    TelegramDestination,
)
from .diary_generator import DiaryGenerator
from .publish_coordinator import PublishCoordinator

logger = logging.getLogger(__name__)


@dataclass
class DiaryCoordinatorConfig:
    """Credentials and options for every collaborator of the diary cycle."""

    openai_api_key: str | None = None
    llm_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.7
    llm_max_output_tokens: int = 4000
    llm_max_input_tokens: int | None = None
    llm_budget_ratio: float = 0.7
    langsmith_project: str | None = None
    notion_api_key: str | None = None
    notion_database_id: str | None = None
    github_token: str | None = None
    github_gist_filename: str = "dev-diary.md"
    telegram_token: str | None = None
    telegram_chat_id: str | None = None
    pieces_base_url: str | None = None
    pieces_api_key: str | None = None
    repository_path: Path | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "DiaryCoordinatorConfig":
        return cls(
            openai_api_key=settings.openai_api_key,
            llm_model=settings.llm_model,
            llm_temperature=settings.llm_temperature,
            llm_max_output_tokens=settings.llm_max_output_tokens,
            llm_max_input_tokens=settings.llm_max_input_tokens,
            llm_budget_ratio=settings.llm_budget_ratio,
            langsmith_project=settings.langsmith_project,
            notion_api_key=settings.notion_api_key,
            notion_database_id=settings.notion_database_id,
            github_token=settings.github_token,
            github_gist_filename=settings.github_gist_filename,
            telegram_token=settings.telegram_token,
            telegram_chat_id=settings.telegram_chat_id,
            pieces_base_url=settings.pieces_base_url,
            pieces_api_key=settings.pieces_api_key,
            repository_path=settings.repository_path,
        )

    @property
    def notion_configured(self) -> bool:
        return bool(self.notion_api_key and self.notion_database_id)

    @property
    def github_configured(self) -> bool:
        return bool(self.github_token)

    @property
    def telegram_configured(self) -> bool:
        return bool(self.telegram_token and self.telegram_chat_id)

    @property
    def pieces_configured(self) -> bool:
        return bool(self.pieces_base_url)

    def build_destinations(self) -> list[PublishDestination]:
        """Destinations whose credentials are all present."""
        destinations: list[PublishDestination] = []
        if self.notion_configured:
            destinations.append(
                NotionDestination(
                    NotionClient(self.notion_api_key, self.notion_database_id)  # type: ignore[arg-type]
                )
            )
        if self.github_configured:
            destinations.append(
                GistDestination(
                    GistClient(self.github_token, self.github_gist_filename)  # type: ignore[arg-type]
                )
            )
        if self.telegram_configured:
            destinations.append(
                TelegramDestination(
                    TelegramClient(self.telegram_token, self.telegram_chat_id)  # type: ignore[arg-type]
                )
            )
        return destinations

    @property
    def llm_configured(self) -> bool:
        return bool(self.openai_api_key)

    def build_backend(self) -> GenerativeBackend | None:
        """The default chat backend, or None without an OpenAI key."""
        if not self.llm_configured:
            return None
        return LangChainBackend(
            model_name=self.llm_model,
            api_key=self.openai_api_key,
            langsmith_project=self.langsmith_project,
        )


class DiaryCoordinator:
    """Runs the collect, generate and publish steps of the diary cycle."""

    def __init__(
        self,
        collector: ActivityCollector,
        generator: DiaryGenerator,
        publisher: PublishCoordinator,
    ) -> None:
        self.collector = collector
        self.generator = generator
        self.publisher = publisher

    @classmethod
    def from_config(
        cls,
        config: DiaryCoordinatorConfig,
        backend: GenerativeBackend | None = None,
    ) -> "DiaryCoordinator":
        """Build a coordinator with a collaborator for every configured service."""
        collector = ActivityCollector(
            snippet_store=PiecesClient(config.pieces_base_url, config.pieces_api_key)
            if config.pieces_configured
            else None,
            repository=GitRepository(config.repository_path)
            if config.repository_path
            else None,
        )
        if backend is None:
            backend = config.build_backend()
        generator = DiaryGenerator(
            backend,
            MarkdownRenderer(),
            max_input_tokens=config.llm_max_input_tokens,
            budget_ratio=config.llm_budget_ratio,
            temperature=config.llm_temperature,
            max_output_tokens=config.llm_max_output_tokens,
        )
        publisher = PublishCoordinator(config.build_destinations())
        logger.info(
            "Diary coordinator ready with destinations: %s",
            ", ".join(publisher.destination_names) or "none",
        )
        return cls(collector, generator, publisher)

    async def collect_activities(self) -> ActivityData:
        return await self.collector.collect()

    async def generate_diary(self, activity: ActivityData | None = None) -> Diary:
        """Generate a diary from ``activity``, collecting fresh activity if omitted."""
        if activity is None:
            activity = await self.collect_activities()
        return await self.generator.generate(activity)

    async def publish_diary(self, diary: Diary) -> PublishResult:
        return await self.publisher.publish(diary)

    def build_diary(self, markdown: str, title: str | None = None) -> Diary:
        """Turn caller-written markdown into a diary ready to publish."""
        diary = self.generator.build_diary(markdown)
        if title:
            diary = diary.model_copy(update={"title": title})
        return diary

    async def create_and_publish_diary(self) -> DiaryRun:
        activity = await self.collect_activities()
        diary = await self.generate_diary(activity)
        publish_result = await self.publish_diary(diary)
        logger.info(publish_result.summary_text())
        return DiaryRun(diary=diary, publish_result=publish_result)


def create_diary_coordinator(settings: Settings | None = None) -> DiaryCoordinator:
    """Build a coordinator from application settings."""
    config = DiaryCoordinatorConfig.from_settings(settings or get_settings())
    return DiaryCoordinator.from_config(config)
