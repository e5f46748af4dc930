"""Models for Pieces OS snippet assets."""

from collections import Counter
from datetime import UTC, datetime

from pydantic import Field

from dev_diary.models.base import BaseDiaryModel
from dev_diary.models.snippet import SnippetRecord


class PiecesTag(BaseDiaryModel):
    text: str | None = None


class PiecesFormat(BaseDiaryModel):
    syntax_highlight: str | None = None


class PiecesMetadataItem(BaseDiaryModel):
    key: str
    value: str


class PiecesMetadata(BaseDiaryModel):
    custom: list[PiecesMetadataItem] = Field(default_factory=list)


class PiecesTimestamp(BaseDiaryModel):
    milliseconds: int = 0


class PiecesAsset(BaseDiaryModel):
    """A snippet stored in Pieces."""

    id: str | None = None
    name: str | None = None
    original: str | None = None
    format: PiecesFormat | None = None
    tags: list[PiecesTag] = Field(default_factory=list)
    metadata: PiecesMetadata | None = None
    created: PiecesTimestamp | None = None
    updated: PiecesTimestamp | None = None

    @property
    def language(self) -> str:
        if self.format and self.format.syntax_highlight:
            return self.format.syntax_highlight
        return "text"

    @property
    def project(self) -> str:
        if self.metadata:
            for item in self.metadata.custom:
                if item.key == "project":
                    return item.value
        return "Unknown"

    @property
    def created_ms(self) -> int:
        return self.created.milliseconds if self.created else 0

    @property
    def updated_ms(self) -> int:
        return self.updated.milliseconds if self.updated else 0

    def to_record(self) -> SnippetRecord:
        timestamp = (
            datetime.fromtimestamp(self.created_ms / 1000, tz=UTC)
            if self.created_ms
            else datetime.now(UTC)
        )
        return SnippetRecord(
            code=self.original or "",
            language=self.language,
            tags=[tag.text for tag in self.tags if tag.text],
            project=self.project,
            timestamp=timestamp,
        )


class SnippetAnalysis(BaseDiaryModel):
    """Aggregate view of a set of snippets."""

    languages: dict[str, int] = Field(default_factory=dict)
    projects: dict[str, int] = Field(default_factory=dict)
    top_tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_assets(cls, assets: list[PiecesAsset], top: int = 10) -> "SnippetAnalysis":
        languages = Counter(asset.language for asset in assets)
        projects = Counter(asset.project for asset in assets)
        tags = Counter(tag.text for asset in assets for tag in asset.tags if tag.text)
        return cls(
            languages=dict(languages),
            projects=dict(projects),
            top_tags=[tag for tag, _ in tags.most_common(top)],
        )
