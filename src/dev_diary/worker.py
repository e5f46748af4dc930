#!/usr/bin/env python3
"""
Temporal worker for Dev Diary.

Registers the diary activities and the DailyDiary workflow.
"""

import asyncio
import logging

from temporalio.client import Client
from temporalio.contrib.pydantic import pydantic_data_converter
from temporalio.worker import Worker

from dev_diary.activities.diary_activities import (
    collect_activities,
    generate_diary,
    publish_diary,
)
from dev_diary.workflows.daily_diary import DailyDiary

from .settings import get_settings

logger = logging.getLogger(__name__)

ACTIVITIES = [collect_activities, generate_diary, publish_diary]
WORKFLOWS = [DailyDiary]


async def run_worker() -> None:
    """Start the Temporal worker."""
    try:
        settings = get_settings()
        logging.basicConfig(
            level=getattr(logging, settings.log_level),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        temporal_host = settings.temporal_host
        logger.info(f"Connecting to Temporal server at {temporal_host}")
        client = await Client.connect(
            temporal_host,
            namespace=settings.temporal_namespace,
            data_converter=pydantic_data_converter,
        )
        logger.info("Connected to Temporal server")

        task_queue = settings.temporal_task_queue
        worker = Worker(
            client,
            task_queue=task_queue,
            activities=ACTIVITIES,
            workflows=WORKFLOWS,
        )

        logger.info(f"Starting Temporal worker on task queue: {task_queue}")
        await worker.run()

    except KeyboardInterrupt:
        logger.info("Worker stopped by user")
    except Exception as e:
        logger.error(f"Worker failed: {e}")
        raise


def main():
    """Main entry point for the worker."""
    logger.info("Starting Dev Diary Temporal Worker")
    asyncio.run(run_worker())


if __name__ == "__main__":
    main()
