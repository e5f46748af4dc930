"""Notion database client for diary entries."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

import httpx

from .exceptions import NotionClientError
from .models import NotionEntry

logger = logging.getLogger(__name__)

# Notion rejects rich text items longer than this
MAX_TEXT_LENGTH = 2000
# Notion accepts at most this many children per request
MAX_BLOCKS = 100


def _paragraph(content: str, bold: bool = False) -> dict[str, Any]:
    text: dict[str, Any] = {"type": "text", "text": {"content": content}}
    if bold:
        text["annotations"] = {"bold": True}
    return {"object": "block", "type": "paragraph", "paragraph": {"rich_text": [text]}}


def split_text(text: str, size: int = MAX_TEXT_LENGTH) -> list[str]:
    """Split ``text`` into chunks Notion accepts, preferring line breaks."""
    chunks: list[str] = []
    remaining = text
    while len(remaining) > size:
        cut = remaining.rfind("\n", 0, size)
        if cut <= 0:
            cut = size
        chunks.append(remaining[:cut])
        remaining = remaining[cut:].lstrip("\n")
    if remaining:
        chunks.append(remaining)
    return chunks


class NotionClient:
    """Minimal client for the Notion pages and databases API."""

    BASE_URL = "https://api.notion.com/v1"
    NOTION_VERSION = "2022-06-28"

    def __init__(self, api_key: str, database_id: str) -> None:
        if not api_key or not database_id:
            raise ValueError("Notion API key and database id are required")
        self.database_id = database_id
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Notion-Version": self.NOTION_VERSION,
            "Content-Type": "application/json",
        }

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.post(
                    f"{self.BASE_URL}{path}", json=payload, headers=self.headers
                )
                resp.raise_for_status()
                return resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise NotionClientError(f"Notion request to {path} failed: {e}") from e

    async def create_entry(self, title: str, body: str, tags: list[str]) -> str:
        """Create a diary page and return its URL."""
        children = [_paragraph("Developer Diary Entry", bold=True)]
        children.extend(_paragraph(chunk) for chunk in split_text(body))
        if len(children) > MAX_BLOCKS:
            logger.warning(
                f"Diary body needs {len(children)} blocks; truncating to {MAX_BLOCKS}"
            )
            children = children[:MAX_BLOCKS]

        payload = {
            "parent": {"database_id": self.database_id},
            "properties": {
                "title": {"title": [{"text": {"content": title}}]},
                "Tags": {"multi_select": [{"name": tag} for tag in tags]},
                "Date": {"date": {"start": datetime.now(UTC).isoformat()}},
            },
            "children": children,
        }
        data = await self._post("/pages", payload)
        url = data.get("url")
        if not url:
            raise NotionClientError("Notion response did not include a page URL")
        logger.info(f"Created Notion diary entry: {url}")
        return url

    async def get_recent_entries(self, limit: int = 5) -> list[NotionEntry]:
        """Most recent diary entries, newest first."""
        data = await self._post(
            f"/databases/{self.database_id}/query",
            {
                "sorts": [{"property": "Date", "direction": "descending"}],
                "page_size": limit,
            },
        )
        return [NotionEntry.from_page(page) for page in data.get("results", [])]
