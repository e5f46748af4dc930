"""Publishes a diary to every configured destination."""

from __future__ import annotations

import asyncio
import logging

from dev_diary.models.diary import Diary, PublishResult

from .destinations import PublishDestination
from .exceptions import InvalidDiaryError

logger = logging.getLogger(__name__)


class PublishCoordinator:
    """
    Fans a diary out to its destinations and collects a partial-success result.

    Destinations that only store the diary run concurrently. Destinations
    that announce links to it run afterwards, so they see every link
    produced earlier in the same call. A failing destination never stops
    the others; its field stays at its failure value and its error message
    is recorded in ``PublishResult.errors``.
    """

    def __init__(self, destinations: list[PublishDestination] | None = None) -> None:
        self.destinations = list(destinations or [])

    @property
    def destination_names(self) -> list[str]:
        return [destination.name for destination in self.destinations]

    async def publish(self, diary: Diary) -> PublishResult:
        if not isinstance(diary, Diary):
            raise InvalidDiaryError(
                f"Expected a Diary to publish, got {type(diary).__name__}"
            )

        result = PublishResult()
        if not self.destinations:
            logger.info("No publish destinations configured")
            return result

        storing = [d for d in self.destinations if not d.depends_on_links]
        announcing = [d for d in self.destinations if d.depends_on_links]

        await asyncio.gather(
            *(self._attempt(destination, diary, result) for destination in storing)
        )
        for destination in announcing:
            await self._attempt(destination, diary, result)

        logger.info(
            f"Published '{diary.title}' to {len(result.succeeded)} "
            f"of {len(self.destinations)} destinations"
        )
        return result

    async def _attempt(
        self, destination: PublishDestination, diary: Diary, result: PublishResult
    ) -> None:
        try:
            value = await destination.publish(diary, result.links())
        except Exception as e:
            logger.error(f"Error publishing to {destination.name}: {e}")
            setattr(result, destination.name, destination.failure_value)
            result.errors[destination.name] = str(e) or type(e).__name__
            return
        setattr(result, destination.name, value)
