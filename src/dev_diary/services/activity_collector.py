"""Gathers snippets and git activity into one ActivityData structure."""

from __future__ import annotations

import logging
from datetime import date

from dev_diary.integrations.git import GitRepository
from dev_diary.integrations.pieces import PiecesClient
from dev_diary.models.activity import ActivityData, GitActivity

logger = logging.getLogger(__name__)


class ActivityCollector:
    """Collects today's developer activity from the configured sources.

    Each source is optional. A failing source leaves its section empty and
    never prevents the other sources from being read.
    """

    def __init__(
        self,
        snippet_store: PiecesClient | None = None,
        repository: GitRepository | None = None,
    ) -> None:
        self.snippet_store = snippet_store
        self.repository = repository

    async def collect(self) -> ActivityData:
        activity = ActivityData()

        if self.snippet_store is not None:
            try:
                activity.snippets = await self.snippet_store.get_today_snippets()
            except Exception as e:
                logger.error(f"Error collecting snippets: {e}")

        if self.repository is not None:
            activity.git_activity = await self._collect_git(self.repository)

        logger.info(
            "Collected %d snippets and %d commits",
            len(activity.snippets),
            len(activity.git_activity.commits),
        )
        return activity

    async def _collect_git(self, repository: GitRepository) -> GitActivity:
        git_activity = GitActivity()
        try:
            git_activity.commits = await repository.log(date.today())
        except Exception as e:
            logger.error(f"Error collecting commits from {repository.path}: {e}")
        try:
            git_activity.branches = await repository.list_branches()
        except Exception as e:
            logger.error(f"Error listing branches of {repository.path}: {e}")
        return git_activity
