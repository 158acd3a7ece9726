"""Temporal implementation of the LogIndexer port.

Index cleanup runs as a workflow so that the delete request returns as soon as
the cleanup has been accepted, and failed cleanups are retried by Temporal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

import structlog
from temporalio.client import Client

from application.ports.log_indexer import LogIndexer
from infrastructure.config import settings

if TYPE_CHECKING:
    from collections.abc import Collection

logger = structlog.get_logger()


class TemporalLogIndexer(LogIndexer):
    """Starts ``CleanLogIndexWorkflow`` runs without waiting for their result."""

    def __init__(
        self,
        client: Client | None = None,
        temporal_address: str | None = None,
        task_queue: str | None = None,
    ) -> None:
        self.temporal_address = temporal_address or settings.temporal_address
        self.task_queue = task_queue or settings.temporal_task_queue
        self._client = client

    async def _get_client(self) -> Client:
        if self._client is None:
            logger.info("connecting_to_temporal", address=self.temporal_address)
            self._client = await Client.connect(self.temporal_address)
            logger.info("temporal_client_connected")
        return self._client

    async def clean_index(self, project_id: int, log_ids: Collection[int]) -> None:
        """Start a workflow removing ``log_ids`` from the project's log index.

        Args:
            project_id: Project whose index holds the logs
            log_ids: Log ids to remove; nothing is started when empty

        """
        if not log_ids:
            logger.debug("clean_index_skipped_no_logs", project_id=project_id)
            return

        client = await self._get_client()
        workflow_id = f"clean-log-index-{project_id}-{uuid4()}"
        try:
            await client.start_workflow(
                "CleanLogIndexWorkflow",
                args=[project_id, sorted(log_ids)],
                id=workflow_id,
                task_queue=self.task_queue,
            )
            logger.info(
                "clean_log_index_workflow_started",
                workflow_id=workflow_id,
                project_id=project_id,
                log_count=len(log_ids),
            )
        except Exception as e:
            logger.exception(
                "clean_log_index_workflow_start_failed",
                project_id=project_id,
                error=str(e),
            )
            raise
