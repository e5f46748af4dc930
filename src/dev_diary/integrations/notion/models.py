"""Models for Notion pages."""

from datetime import UTC, datetime
from typing import Any

from dev_diary.models.base import BaseDiaryModel


class NotionEntry(BaseDiaryModel):
    """Summary of a diary page in the Notion database."""

    id: str
    title: str
    url: str
    date: str

    @classmethod
    def from_page(cls, page: dict[str, Any]) -> "NotionEntry":
        properties = page.get("properties", {})
        title_prop = (
            properties.get("title") or properties.get("Name") or properties.get("Title") or {}
        )
        title_items = title_prop.get("title") or []
        title = title_items[0].get("plain_text", "Untitled") if title_items else "Untitled"
        date_prop = (properties.get("Date") or {}).get("date") or {}
        return cls(
            id=page.get("id", ""),
            title=title,
            url=page.get("url", ""),
            date=date_prop.get("start") or datetime.now(UTC).isoformat(),
        )
