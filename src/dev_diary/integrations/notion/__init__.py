"""Notion document database integration."""

from .exceptions import NotionClientError
from .models import NotionEntry
from .notion_client import NotionClient, split_text

__all__ = ["NotionClient", "NotionClientError", "NotionEntry", "split_text"]
