from datetime import UTC, date, datetime
from unittest.mock import AsyncMock

from dev_diary.integrations.git import GitCommandError
from dev_diary.models import Commit, SnippetRecord
from dev_diary.services import ActivityCollector


def make_store(snippets=None, error=None):
    store = AsyncMock()
    if error:
        store.get_today_snippets.side_effect = error
    else:
        store.get_today_snippets.return_value = snippets or []
    return store


def make_repository(commits=None, branches=None, log_error=None, branch_error=None):
    repository = AsyncMock()
    repository.path = "/repo"
    if log_error:
        repository.log.side_effect = log_error
    else:
        repository.log.return_value = commits or []
    if branch_error:
        repository.list_branches.side_effect = branch_error
    else:
        repository.list_branches.return_value = branches or []
    return repository


async def test_collects_all_sections():
    snippet = SnippetRecord(code="x = 1", language="Python")
    commit = Commit(message="init", timestamp=datetime.now(UTC))
    repository = make_repository(commits=[commit], branches=["main"])
    collector = ActivityCollector(make_store([snippet]), repository)

    activity = await collector.collect()

    assert activity.snippets == [snippet]
    assert activity.git_activity.commits == [commit]
    assert activity.git_activity.branches == ["main"]
    repository.log.assert_awaited_once_with(date.today())


async def test_nothing_configured():
    activity = await ActivityCollector().collect()
    assert activity.is_empty


async def test_snippet_failure_does_not_skip_git():
    repository = make_repository(branches=["main"])
    collector = ActivityCollector(make_store(error=RuntimeError("down")), repository)

    activity = await collector.collect()

    assert activity.snippets == []
    assert activity.git_activity.branches == ["main"]


async def test_log_failure_keeps_branches():
    repository = make_repository(
        branches=["main", "dev"], log_error=GitCommandError("not a repository")
    )
    collector = ActivityCollector(repository=repository)

    activity = await collector.collect()

    assert activity.git_activity.commits == []
    assert activity.git_activity.branches == ["main", "dev"]


async def test_branch_failure_keeps_commits():
    commit = Commit(message="fix", timestamp=datetime.now(UTC))
    repository = make_repository(commits=[commit], branch_error=GitCommandError("boom"))
    snippet = SnippetRecord(code="x = 1")
    collector = ActivityCollector(make_store([snippet]), repository)

    activity = await collector.collect()

    assert activity.snippets == [snippet]
    assert activity.git_activity.commits == [commit]
    assert activity.git_activity.branches == []
