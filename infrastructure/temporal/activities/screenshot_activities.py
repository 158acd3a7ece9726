from collections.abc import Awaitable, Callable

import structlog
from temporalio import activity

from application.use_cases.screenshot_use_cases import CleanScreenshotsUseCase

logger = structlog.get_logger()


def create_clean_screenshots_activity(
    use_case: CleanScreenshotsUseCase,
) -> Callable[[], Awaitable[dict]]:
    """Factory that injects the use case into the Temporal activity closure."""

    @activity.defn(name="clean_screenshots")
    async def clean_screenshots_activity() -> dict:
        summary = await use_case.execute()
        failed = [p.project_id for p in summary.projects if p.error]
        if failed:
            logger.warning("clean_screenshots_partial_failure", failed_projects=failed)
        return {
            "status": "partial" if failed else "success",
            "projects": len(summary.projects),
            "attachments_deleted": summary.attachments_deleted,
            "thumbnails_deleted": summary.thumbnails_deleted,
            "failed_projects": failed,
        }

    return clean_screenshots_activity
