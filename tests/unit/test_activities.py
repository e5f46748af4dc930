"""Tests for Temporal activities."""

from unittest.mock import AsyncMock, patch

import pytest
from temporalio.testing import ActivityEnvironment

from dev_diary.activities import (
    GenerateDiaryInput,
    PublishDiaryInput,
    collect_activities,
    generate_diary,
    publish_diary,
)
from dev_diary.models import GistPublication, PublishResult
from dev_diary.services import DiaryCoordinator, DiaryGenerationError


@pytest.fixture
def coordinator():
    return AsyncMock(spec=DiaryCoordinator)


@pytest.fixture
def env():
    return ActivityEnvironment()


async def test_collect_activities(env, coordinator, sample_activity):
    coordinator.collect_activities.return_value = sample_activity
    with patch(
        "dev_diary.activities.diary_activities.create_diary_coordinator",
        return_value=coordinator,
    ):
        result = await env.run(collect_activities)
    assert result == sample_activity


async def test_generate_diary(env, coordinator, sample_activity, sample_diary):
    coordinator.generate_diary.return_value = sample_diary
    with patch(
        "dev_diary.activities.diary_activities.create_diary_coordinator",
        return_value=coordinator,
    ):
        result = await env.run(generate_diary, GenerateDiaryInput(activity_data=sample_activity))
    assert result == sample_diary
    coordinator.generate_diary.assert_awaited_once_with(sample_activity)


async def test_generate_diary_failure_propagates(env, coordinator, sample_activity):
    coordinator.generate_diary.side_effect = DiaryGenerationError("backend down")
    with patch(
        "dev_diary.activities.diary_activities.create_diary_coordinator",
        return_value=coordinator,
    ):
        with pytest.raises(DiaryGenerationError):
            await env.run(generate_diary, GenerateDiaryInput(activity_data=sample_activity))


async def test_publish_diary(env, coordinator, sample_diary):
    expected = PublishResult(
        github=GistPublication(url="https://gist.github.com/abc", id="abc")
    )
    coordinator.publish_diary.return_value = expected
    with patch(
        "dev_diary.activities.diary_activities.create_diary_coordinator",
        return_value=coordinator,
    ):
        result = await env.run(publish_diary, PublishDiaryInput(diary=sample_diary))
    assert result == expected
    coordinator.publish_diary.assert_awaited_once_with(sample_diary)
