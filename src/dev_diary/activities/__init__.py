"""Activities package for Dev Diary."""

from .diary_activities import (
    GenerateDiaryInput,
    PublishDiaryInput,
    collect_activities,
    generate_diary,
    publish_diary,
)

__all__ = [
    "GenerateDiaryInput",
    "PublishDiaryInput",
    "collect_activities",
    "generate_diary",
    "publish_diary",
]
