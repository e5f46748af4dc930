"""Code snippet models."""

from datetime import UTC, datetime
from typing import Any

from pydantic import Field, field_validator

from .base import BaseDiaryModel

UNKNOWN_LANGUAGE = "Unknown"


class SnippetRecord(BaseDiaryModel):
    """Snippet as it appears in an activity cycle."""

    code: str = Field(description="Source code text")
    language: str = Field(UNKNOWN_LANGUAGE, description="Detected language label")
    tags: list[str] = Field(default_factory=list, description="Lowercased tags")
    project: str = Field("Unknown", description="Project the snippet belongs to")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="Capture time"
    )

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> list[str]:
        if v is None:
            return []
        seen: list[str] = []
        for tag in v:
            label = str(tag).strip().lower()
            if label and label not in seen:
                seen.append(label)
        return seen


class Snippet(SnippetRecord):
    """
    A captured snippet with its classification metadata.

    Snippets are immutable once created except for ``enriched``, which may
    only move from ``False`` to ``True``.
    """

    id: str = Field(description="Unique snippet identifier")
    source: str = Field(description="Where the snippet was captured")
    enriched: bool = Field(False, description="Whether context was added")

    @field_validator("code")
    @classmethod
    def code_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("snippet code must not be empty")
        return v

    def __setattr__(self, name: str, value: Any) -> None:
        if name != "enriched":
            raise AttributeError(f"Snippet field '{name}' is read-only")
        if self.enriched and not value:
            raise ValueError("An enriched snippet cannot be reverted")
        super().__setattr__(name, value)

    def mark_enriched(self) -> None:
        """Flag the snippet as enriched."""
        self.enriched = True

    def to_record(self) -> SnippetRecord:
        return SnippetRecord(
            code=self.code,
            language=self.language,
            tags=self.tags,
            project=self.project,
            timestamp=self.timestamp,
        )
