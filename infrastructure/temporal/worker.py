"""Temporal worker process.

Hosts the log index cleanup and the scheduled screenshot cleanup.

Start with: python -m infrastructure.temporal.worker
"""

from __future__ import annotations

import asyncio

import structlog
from temporalio.client import Client
from temporalio.exceptions import WorkflowAlreadyStartedError
from temporalio.worker import Worker

from application.ports.log_indexer import LogSearchIndex
from application.use_cases.screenshot_use_cases import CleanScreenshotsUseCase
from infrastructure.config import settings
from infrastructure.di.container import create_container
from infrastructure.logging import setup_logging
from infrastructure.temporal.activities.log_index_activities import (
    create_clean_log_index_activity,
)
from infrastructure.temporal.activities.screenshot_activities import (
    create_clean_screenshots_activity,
)
from infrastructure.temporal.workflows.clean_log_index_workflow import CleanLogIndexWorkflow
from infrastructure.temporal.workflows.clean_screenshots_workflow import (
    CleanScreenshotsWorkflow,
)

CLEAN_SCREENSHOTS_WORKFLOW_ID = "clean-screenshots-job"

logger = structlog.get_logger()


async def schedule_clean_screenshots(client: Client) -> None:
    """Start the cron driven clean screenshots workflow unless it already runs."""
    try:
        await client.start_workflow(
            CleanScreenshotsWorkflow.run,
            id=CLEAN_SCREENSHOTS_WORKFLOW_ID,
            task_queue=settings.temporal_task_queue,
            cron_schedule=settings.clean_screenshots_cron,
        )
        logger.info("clean_screenshots_scheduled", cron=settings.clean_screenshots_cron)
    except WorkflowAlreadyStartedError:
        logger.info("clean_screenshots_already_scheduled")


async def run() -> None:
    """Run the Temporal worker."""
    setup_logging("worker")
    logger.info("temporal_worker_starting", address=settings.temporal_address)

    container = create_container()

    clean_log_index_activity = create_clean_log_index_activity(
        search_index=container[LogSearchIndex],
    )
    clean_screenshots_activity = create_clean_screenshots_activity(
        use_case=container[CleanScreenshotsUseCase],
    )

    client = await Client.connect(settings.temporal_address)
    await schedule_clean_screenshots(client)

    worker = Worker(
        client,
        task_queue=settings.temporal_task_queue,
        workflows=[CleanLogIndexWorkflow, CleanScreenshotsWorkflow],
        activities=[clean_log_index_activity, clean_screenshots_activity],
        max_concurrent_activities=settings.temporal_max_concurrent_activities,
    )

    logger.info("temporal_worker_started", task_queue=settings.temporal_task_queue)

    try:
        await worker.run()
    except KeyboardInterrupt:
        logger.info("temporal_worker_interrupted")
    except Exception:
        logger.exception("temporal_worker_error")
        raise
    finally:
        logger.info("temporal_worker_stopped")


if __name__ == "__main__":
    asyncio.run(run())
