"""Diary and publishing result models."""

from pydantic import ConfigDict, Field

from .base import BaseDiaryModel

NOTION = "notion"
GITHUB = "github"
TELEGRAM = "telegram"

DESTINATION_LABELS = {
    NOTION: "Notion",
    GITHUB: "GitHub Gist",
    TELEGRAM: "Telegram",
}


class Diary(BaseDiaryModel):
    """A generated diary. ``html`` is always rendered from ``markdown``."""

    model_config = ConfigDict(frozen=True)

    title: str
    markdown: str
    html: str


class NotionPublication(BaseDiaryModel):
    url: str


class GistPublication(BaseDiaryModel):
    url: str
    id: str


class DiaryLink(BaseDiaryModel):
    title: str
    url: str


class PublishResult(BaseDiaryModel):
    """
    Outcome of publishing one diary.

    A destination field is ``None`` when the destination was not configured
    or failed; failures are additionally listed in ``errors``.
    """

    notion: NotionPublication | None = None
    github: GistPublication | None = None
    telegram: bool | None = None
    errors: dict[str, str] = Field(default_factory=dict)

    def links(self) -> list[DiaryLink]:
        """Links to destinations that already hold the diary."""
        links = []
        if self.notion:
            links.append(DiaryLink(title="View in Notion", url=self.notion.url))
        if self.github:
            links.append(DiaryLink(title="View GitHub Gist", url=self.github.url))
        return links

    @property
    def succeeded(self) -> list[str]:
        names = []
        if self.notion:
            names.append(NOTION)
        if self.github:
            names.append(GITHUB)
        if self.telegram:
            names.append(TELEGRAM)
        return names

    @property
    def attempted(self) -> list[str]:
        names = [
            name
            for name in (NOTION, GITHUB, TELEGRAM)
            if name in self.errors or getattr(self, name) is not None
        ]
        return names

    def summary_text(self) -> str:
        """Human readable summary such as ``Published to 2 of 3 destinations``."""
        attempted = self.attempted
        if not attempted:
            return "No destinations configured"
        succeeded = self.succeeded
        lines = [f"Published to {len(succeeded)} of {len(attempted)} destinations"]
        for name in succeeded:
            lines.append(f"  ok: {DESTINATION_LABELS[name]}")
        for name, message in self.errors.items():
            lines.append(f"  failed: {DESTINATION_LABELS.get(name, name)}: {message}")
        return "\n".join(lines)


class DiaryRun(BaseDiaryModel):
    """Result of a full collect, generate and publish cycle."""

    diary: Diary
    publish_result: PublishResult
