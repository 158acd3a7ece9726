from collections.abc import Awaitable, Callable

import structlog
from temporalio import activity

from application.ports.log_indexer import LogSearchIndex

logger = structlog.get_logger()


def create_clean_log_index_activity(
    search_index: LogSearchIndex,
) -> Callable[[int, list[int]], Awaitable[dict]]:
    """Factory that injects the search index into the Temporal activity closure."""

    @activity.defn(name="clean_log_index")
    async def clean_log_index_activity(project_id: int, log_ids: list[int]) -> dict:
        logger.info("clean_log_index_activity_start", project_id=project_id, log_count=len(log_ids))
        try:
            deleted = await search_index.delete_logs(project_id, log_ids)
        except Exception as e:
            logger.error(
                "clean_log_index_activity_exception",
                project_id=project_id,
                error=str(e),
                exc_info=True,
            )
            raise  # Re-raise for Temporal retry logic

        return {"status": "success", "project_id": project_id, "submitted": deleted}

    return clean_log_index_activity
