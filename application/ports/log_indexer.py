"""Ports for the log search index."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Collection


class LogIndexer(Protocol):
    """Port for scheduling log index maintenance.

    Implementations are expected to hand the work off asynchronously and
    return as soon as the cleanup has been accepted.
    """

    async def clean_index(self, project_id: int, log_ids: Collection[int]) -> None:
        """Request removal of the given logs from the project's search index.

        Args:
            project_id: Project whose index holds the logs
            log_ids: Ids of the logs to remove. Empty collections are a no-op.

        """
        ...


class LogSearchIndex(Protocol):
    """Port for the search index that stores analyzed logs."""

    async def delete_logs(self, project_id: int, log_ids: Collection[int]) -> int:
        """Delete the logs from the index and return how many ids were submitted.

        Should be idempotent - no error for logs that are not indexed.
        """
        ...
