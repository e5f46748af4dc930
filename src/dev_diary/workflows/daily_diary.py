from datetime import timedelta

from temporalio import workflow
from temporalio.common import RetryPolicy

NO_RETRY = RetryPolicy(maximum_attempts=1)

with workflow.unsafe.imports_passed_through():
    from dev_diary.activities.diary_activities import (
        GenerateDiaryInput,
        PublishDiaryInput,
        collect_activities,
        generate_diary,
        publish_diary,
    )
    from dev_diary.models.diary import DiaryRun


@workflow.defn
class DailyDiary:
    @workflow.run
    async def run(self) -> DiaryRun:
        activity_data = await workflow.execute_activity(
            collect_activities,
            start_to_close_timeout=timedelta(seconds=60),
            retry_policy=NO_RETRY,
        )

        diary = await workflow.execute_activity(
            generate_diary,
            GenerateDiaryInput(activity_data=activity_data),
            start_to_close_timeout=timedelta(seconds=180),
            retry_policy=RetryPolicy(maximum_attempts=2),
        )

        publish_result = await workflow.execute_activity(
            publish_diary,
            PublishDiaryInput(diary=diary),
            start_to_close_timeout=timedelta(seconds=60),
            retry_policy=NO_RETRY,
        )

        return DiaryRun(diary=diary, publish_result=publish_result)
