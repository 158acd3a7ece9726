from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from qdrant_client import AsyncQdrantClient, models

from application.ports.log_indexer import LogSearchIndex

if TYPE_CHECKING:
    from collections.abc import Collection

logger = structlog.get_logger()


class QdrantLogSearchIndex(LogSearchIndex):
    """Adapter removing analyzed logs from a Qdrant collection.

    Every indexed log is a point carrying ``project_id`` and ``log_id`` in its
    payload, so deletion is a payload filter rather than a point id list.
    """

    def __init__(
        self,
        url: str = "http://localhost:6333",
        api_key: str | None = None,
        collection_name: str = "log_index",
        client: AsyncQdrantClient | None = None,
    ) -> None:
        self.url = url
        self.api_key = api_key
        self.collection_name = collection_name

        # Lazy initialization
        self._client = client

    async def _get_client(self) -> AsyncQdrantClient:
        """Get or create async Qdrant client."""
        if self._client is None:
            self._client = AsyncQdrantClient(
                url=self.url,
                api_key=self.api_key,
                timeout=30,
            )
            logger.info("qdrant_client_created", url=self.url)
        return self._client

    async def delete_logs(self, project_id: int, log_ids: Collection[int]) -> int:
        """Delete the project's indexed logs whose ids are listed.

        Args:
            project_id: The project the logs belong to
            log_ids: The log ids to remove

        Returns:
            Number of log ids submitted for deletion

        """
        if not log_ids:
            return 0
        client = await self._get_client()

        if not await client.collection_exists(self.collection_name):
            logger.info("log_index_collection_missing", collection=self.collection_name)
            return 0

        await client.delete(
            collection_name=self.collection_name,
            points_selector=models.FilterSelector(
                filter=models.Filter(
                    must=[
                        models.FieldCondition(
                            key="project_id",
                            match=models.MatchValue(value=project_id),
                        ),
                        models.FieldCondition(
                            key="log_id",
                            match=models.MatchAny(any=list(log_ids)),
                        ),
                    ],
                ),
            ),
        )
        logger.info("log_index_cleaned", project_id=project_id, log_count=len(log_ids))
        return len(log_ids)
