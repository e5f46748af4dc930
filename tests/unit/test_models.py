"""Unit tests for shared data models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from dev_diary.models import (
    ActivityData,
    Diary,
    GistPublication,
    NotionPublication,
    PublishResult,
    Snippet,
    SnippetRecord,
)


class TestSnippet:
    def make(self, **kwargs):
        data = {"id": "s1", "code": "print('hi')", "source": "test"}
        data.update(kwargs)
        return Snippet(**data)

    def test_defaults(self):
        snippet = self.make()
        assert snippet.language == "Unknown"
        assert snippet.project == "Unknown"
        assert snippet.tags == []
        assert snippet.enriched is False
        assert snippet.timestamp.tzinfo is not None

    def test_tags_lowercased_and_unique(self):
        snippet = self.make(tags=["Python", "python", " API "])
        assert snippet.tags == ["python", "api"]

    def test_empty_code_rejected(self):
        with pytest.raises(ValidationError):
            self.make(code="")

    def test_fields_are_read_only(self):
        snippet = self.make()
        with pytest.raises(AttributeError):
            snippet.code = "changed"

    def test_mark_enriched(self):
        snippet = self.make()
        snippet.mark_enriched()
        assert snippet.enriched is True

    def test_enriched_cannot_be_reverted(self):
        snippet = self.make()
        snippet.mark_enriched()
        with pytest.raises(ValueError):
            snippet.enriched = False

    def test_to_record(self):
        snippet = self.make(language="Python", tags=["x"])
        record = snippet.to_record()
        assert type(record) is SnippetRecord
        assert record.code == snippet.code
        assert record.language == "Python"
        assert record.tags == ["x"]


class TestActivityData:
    def test_empty_by_default(self):
        activity = ActivityData()
        assert activity.is_empty
        assert activity.git_activity.commits == []

    def test_not_empty_with_notes(self):
        assert not ActivityData(notes=["note"]).is_empty

    def test_json_round_trip(self, sample_activity):
        restored = ActivityData.model_validate_json(sample_activity.model_dump_json())
        assert restored == sample_activity


class TestDiary:
    def test_frozen(self):
        diary = Diary(title="t", markdown="# t", html="<h1>t</h1>")
        with pytest.raises(ValidationError):
            diary.title = "other"


class TestPublishResult:
    def test_empty_result(self):
        result = PublishResult()
        assert result.links() == []
        assert result.succeeded == []
        assert result.summary_text() == "No destinations configured"

    def test_links_from_stored_destinations(self):
        result = PublishResult(
            notion=NotionPublication(url="https://notion.so/page"),
            github=GistPublication(url="https://gist.github.com/abc", id="abc"),
        )
        assert [(link.title, link.url) for link in result.links()] == [
            ("View in Notion", "https://notion.so/page"),
            ("View GitHub Gist", "https://gist.github.com/abc"),
        ]

    def test_summary_counts_failures(self):
        result = PublishResult(
            github=GistPublication(url="https://gist.github.com/abc", id="abc"),
            telegram=False,
            errors={"notion": "timeout", "telegram": "refused"},
        )
        assert result.succeeded == ["github"]
        assert result.attempted == ["notion", "github", "telegram"]
        summary = result.summary_text()
        assert summary.startswith("Published to 1 of 3 destinations")
        assert "failed: Notion: timeout" in summary


def test_commit_timestamp_serializes():
    from dev_diary.models import Commit

    commit = Commit(message="init", timestamp=datetime(2024, 1, 1, tzinfo=UTC))
    assert Commit.model_validate_json(commit.model_dump_json()) == commit
