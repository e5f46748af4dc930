#!/usr/bin/env python3
"""
Script to trigger the daily diary workflow.
"""

import asyncio
import logging
import os
from datetime import date

import dotenv
from temporalio.client import Client
from temporalio.contrib.pydantic import pydantic_data_converter

from dev_diary.workflows.daily_diary import DailyDiary

# Load environment variables
dotenv.load_dotenv()

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO")),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def trigger_daily_diary():
    """Start the daily diary workflow and wait for its result."""
    try:
        temporal_host = os.getenv("TEMPORAL_HOST", "localhost:7233")
        logger.info(f"Connecting to Temporal server at {temporal_host}")
        client = await Client.connect(
            temporal_host,
            namespace=os.getenv("TEMPORAL_NAMESPACE", "default"),
            data_converter=pydantic_data_converter,
        )

        task_queue = os.getenv("TEMPORAL_TASK_QUEUE", "dev-diary")
        logger.info(f"Starting DailyDiary workflow on task queue: {task_queue}")

        handle = await client.start_workflow(
            DailyDiary.run,
            id=f"daily-diary-{date.today().isoformat()}",
            task_queue=task_queue,
        )
        logger.info(f"Workflow started with ID: {handle.id}")

        run = await handle.result()
        logger.info(f"Diary '{run.diary.title}' finished")
        logger.info(run.publish_result.summary_text())

    except Exception as e:
        logger.error(f"Failed to trigger daily diary: {e}")
        raise


def main():
    """Main entry point."""
    logger.info("Triggering Daily Diary Workflow")
    asyncio.run(trigger_daily_diary())


if __name__ == "__main__":
    main()
