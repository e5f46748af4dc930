"""
Shared data models for Dev Diary.

This module re-exports the models passed between the collector, generator,
publisher, the HTTP API and Temporal activities.
"""

from .activity import ActivityData, Commit, GitActivity, PullRequest, TaskEntry
from .base import BaseDiaryModel
from .diary import (
    Diary,
    DiaryLink,
    DiaryRun,
    GistPublication,
    NotionPublication,
    PublishResult,
)
from .snippet import UNKNOWN_LANGUAGE, Snippet, SnippetRecord

__all__ = [
    "BaseDiaryModel",
    # Snippets
    "Snippet",
    "SnippetRecord",
    "UNKNOWN_LANGUAGE",
    # Activity
    "ActivityData",
    "Commit",
    "GitActivity",
    "PullRequest",
    "TaskEntry",
    # Diary
    "Diary",
    "DiaryLink",
    "DiaryRun",
    "GistPublication",
    "NotionPublication",
    "PublishResult",
]
