"""Publish destinations for generated diaries."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Any

from dev_diary.integrations.github import GistClient, GistClientError
from dev_diary.integrations.notion import NotionClient, NotionClientError
from dev_diary.integrations.telegram import TelegramClient
from dev_diary.models.diary import (
    GITHUB,
    NOTION,
    TELEGRAM,
    Diary,
    DiaryLink,
    GistPublication,
    NotionPublication,
)

from .exceptions import PublishError

logger = logging.getLogger(__name__)

HASHTAG_PATTERN = re.compile(r"(?<!\S)#([A-Za-z0-9_-]+)")
SUMMARY_MAX_LENGTH = 200
SUMMARY_FALLBACK = "Developer diary created"


def extract_tags(markdown: str) -> list[str]:
    """Hashtags in ``markdown`` in order of first appearance.

    Headings are not tags: ``# Title`` has a space after the hash.
    """
    tags: list[str] = []
    for tag in HASHTAG_PATTERN.findall(markdown):
        if tag not in tags:
            tags.append(tag)
    return tags


def summarize(markdown: str) -> str:
    """Second paragraph of the diary, shortened for a chat message."""
    paragraphs = markdown.split("\n\n")
    if len(paragraphs) < 2 or not paragraphs[1].strip():
        return SUMMARY_FALLBACK
    summary = paragraphs[1].strip()
    if len(summary) > SUMMARY_MAX_LENGTH:
        summary = summary[:SUMMARY_MAX_LENGTH] + "..."
    return summary


class PublishDestination(ABC):
    """A service that can receive a published diary.

    Subclasses raise PublishError when the diary could not be delivered.
    """

    name: str
    # Destinations that announce links must run after the ones that store the diary
    depends_on_links: bool = False
    failure_value: Any = None

    @abstractmethod
    async def publish(self, diary: Diary, links: list[DiaryLink]) -> Any:
        """Deliver ``diary`` and return the value recorded in PublishResult."""
        pass


class NotionDestination(PublishDestination):
    name = NOTION

    def __init__(self, client: NotionClient) -> None:
        self.client = client

    async def publish(self, diary: Diary, links: list[DiaryLink]) -> NotionPublication:
        try:
            url = await self.client.create_entry(
                diary.title, diary.markdown, extract_tags(diary.markdown)
            )
        except NotionClientError as e:
            raise PublishError(str(e)) from e
        return NotionPublication(url=url)


class GistDestination(PublishDestination):
    name = GITHUB

    def __init__(self, client: GistClient, is_public: bool = False) -> None:
        self.client = client
        self.is_public = is_public

    async def publish(self, diary: Diary, links: list[DiaryLink]) -> GistPublication:
        try:
            gist = await self.client.create_document(
                diary.title, diary.markdown, is_public=self.is_public
            )
        except GistClientError as e:
            raise PublishError(str(e)) from e
        return GistPublication(url=gist.url, id=gist.id)


class TelegramDestination(PublishDestination):
    name = TELEGRAM
    depends_on_links = True
    failure_value = False

    def __init__(self, client: TelegramClient) -> None:
        self.client = client

    async def publish(self, diary: Diary, links: list[DiaryLink]) -> bool:
        sent = await self.client.send_summary(diary.title, summarize(diary.markdown), links)
        if not sent:
            raise PublishError("Telegram did not accept the summary message")
        return True
