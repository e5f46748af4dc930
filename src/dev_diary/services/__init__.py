"""Diary services: collection, generation, publishing and their composition."""

from .activity_collector import ActivityCollector
from .destinations import (
    GistDestination,
    NotionDestination,
    PublishDestination,
    TelegramDestination,
    extract_tags,
    summarize,
)
from .diary_coordinator import (
    DiaryCoordinator,
    DiaryCoordinatorConfig,
    create_diary_coordinator,
)
from .diary_generator import DiaryGenerator, extract_title, truncate_activity
from .exceptions import DiaryError, DiaryGenerationError, InvalidDiaryError, PublishError
from .prompts import diary_template
from .publish_coordinator import PublishCoordinator

__all__ = [
    "ActivityCollector",
    "DiaryCoordinator",
    "DiaryCoordinatorConfig",
    "DiaryError",
    "DiaryGenerationError",
    "DiaryGenerator",
    "GistDestination",
    "InvalidDiaryError",
    "NotionDestination",
    "PublishCoordinator",
    "PublishDestination",
    "PublishError",
    "TelegramDestination",
    "create_diary_coordinator",
    "diary_template",
    "extract_tags",
    "extract_title",
    "summarize",
    "truncate_activity",
]
