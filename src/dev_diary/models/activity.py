"""Activity data gathered for one diary generation cycle."""

from datetime import datetime

from pydantic import Field

from .base import BaseDiaryModel
from .snippet import SnippetRecord


class TaskEntry(BaseDiaryModel):
    title: str
    completed: bool = False


class Commit(BaseDiaryModel):
    message: str
    timestamp: datetime


class PullRequest(BaseDiaryModel):
    title: str
    status: str


class GitActivity(BaseDiaryModel):
    """Version control activity for the day."""

    commits: list[Commit] = Field(default_factory=list)
    branches: list[str] = Field(default_factory=list)
    pull_requests: list[PullRequest] = Field(default_factory=list)


class ActivityData(BaseDiaryModel):
    """
    Aggregate of everything a developer did during one cycle.

    Built fresh by the collector each cycle and never persisted.
    """

    snippets: list[SnippetRecord] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
    decisions: list[str] = Field(default_factory=list)
    tasks: list[TaskEntry] = Field(default_factory=list)
    git_activity: GitActivity = Field(default_factory=GitActivity)

    @property
    def is_empty(self) -> bool:
        return not (
            self.snippets
            or self.notes
            or self.decisions
            or self.tasks
            or self.git_activity.commits
            or self.git_activity.branches
            or self.git_activity.pull_requests
        )
