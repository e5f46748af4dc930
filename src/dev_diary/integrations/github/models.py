"""Models for GitHub gists."""

from typing import Any

from dev_diary.models.base import BaseDiaryModel


class GistSummary(BaseDiaryModel):
    id: str
    url: str
    description: str = "No description"
    created_at: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "GistSummary":
        return cls(
            id=data["id"],
            url=data["html_url"],
            description=data.get("description") or "No description",
            created_at=data.get("created_at"),
        )


class GistContent(BaseDiaryModel):
    filename: str
    content: str
