"""
Diary activities for Temporal workflows.

Each activity builds its own coordinator from application settings so
workers stay stateless between runs.
"""

from dataclasses import dataclass

from temporalio import activity

from dev_diary.models.activity import ActivityData
from dev_diary.models.diary import Diary, PublishResult
from dev_diary.services import create_diary_coordinator

logger = activity.logger


@dataclass
class GenerateDiaryInput:
    activity_data: ActivityData


@dataclass
class PublishDiaryInput:
    diary: Diary


@activity.defn
async def collect_activities() -> ActivityData:
    """Collect today's snippets and git activity."""
    coordinator = create_diary_coordinator()
    data = await coordinator.collect_activities()
    logger.info(f"Collected {len(data.snippets)} snippets")
    return data


@activity.defn
async def generate_diary(input: GenerateDiaryInput) -> Diary:
    """
    Generate a diary from collected activity.

    Raises:
        DiaryGenerationError: If the generative backend produced nothing.
    """
    coordinator = create_diary_coordinator()
    diary = await coordinator.generate_diary(input.activity_data)
    logger.info(f"Generated diary '{diary.title}'")
    return diary


@activity.defn
async def publish_diary(input: PublishDiaryInput) -> PublishResult:
    """Publish a diary to every configured destination."""
    coordinator = create_diary_coordinator()
    result = await coordinator.publish_diary(input.diary)
    logger.info(result.summary_text())
    return result
