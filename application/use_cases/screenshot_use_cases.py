from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import structlog

from application.dtos.screenshot_dtos import CleanScreenshotsSummary, ProjectScreenshotsCleanup
from domain.aggregates.project import KEEP_SCREENSHOTS_ATTRIBUTE
from domain.value_objects.keep_screenshots_delay import KeepScreenshotsDelay

if TYPE_CHECKING:
    from application.ports.blob_store import BlobStore
    from application.ports.repositories.log_repository import LogRepository
    from application.ports.repositories.project_repository import ProjectRepository
    from domain.aggregates.project import Project

logger = structlog.get_logger()


class CleanScreenshotsUseCase:
    """Remove stored screenshots older than each project's retention period.

    Runs as a scheduled job. A failure in one project is logged and the job
    moves on to the next project.
    """

    def __init__(
        self,
        project_repository: ProjectRepository,
        log_repository: LogRepository,
        blob_store: BlobStore,
        page_size: int = 50,
    ) -> None:
        self.project_repository = project_repository
        self.log_repository = log_repository
        self.blob_store = blob_store
        self.page_size = page_size

    async def execute(self, now: datetime | None = None) -> CleanScreenshotsSummary:
        now = now or datetime.now(UTC)
        summary = CleanScreenshotsSummary()
        logger.info("clean_screenshots_started")

        skip = 0
        while True:
            projects = await self.project_repository.find_with_attribute(
                KEEP_SCREENSHOTS_ATTRIBUTE,
                skip=skip,
                limit=self.page_size,
            )
            for project in projects:
                summary.projects.append(await self._clean_project(project, now))
            if len(projects) < self.page_size:
                break
            skip += self.page_size

        logger.info(
            "clean_screenshots_finished",
            projects=len(summary.projects),
            attachments_deleted=summary.attachments_deleted,
            thumbnails_deleted=summary.thumbnails_deleted,
        )
        return summary

    async def _clean_project(self, project: Project, now: datetime) -> ProjectScreenshotsCleanup:
        result = ProjectScreenshotsCleanup(project_id=project.project_id)
        try:
            logger.info("clean_project_screenshots_started", project_id=project.project_id)
            delay = KeepScreenshotsDelay.find_by_name(project.keep_screenshots)
            if delay is None:
                logger.warning(
                    "unknown_keep_screenshots_delay",
                    project_id=project.project_id,
                    value=project.keep_screenshots,
                )
            elif delay.days > 0:
                await self._remove_attachments(project.project_id, now - delay.period, result)
        except Exception as e:
            logger.error(
                "clean_project_screenshots_failed",
                project_id=project.project_id,
                error=str(e),
                exc_info=True,
            )
            result.error = str(e)

        logger.info(
            "clean_project_screenshots_finished",
            project_id=project.project_id,
            attachments_deleted=result.attachments_deleted,
            thumbnails_deleted=result.thumbnails_deleted,
        )
        return result

    async def _remove_attachments(
        self,
        project_id: int,
        before: datetime,
        result: ProjectScreenshotsCleanup,
    ) -> None:
        attachments = await self.log_repository.find_attachments_before(project_id, before)
        cleared: list[int] = []
        for attachment in attachments:
            if self._delete_blob(attachment.file_id):
                result.attachments_deleted += 1
            if attachment.thumbnail_id and self._delete_blob(attachment.thumbnail_id):
                result.thumbnails_deleted += 1
            cleared.append(attachment.log_id)
        if cleared:
            await self.log_repository.clear_attachments(cleared)

    def _delete_blob(self, key: str) -> bool:
        if not self.blob_store.exists(key):
            logger.debug("screenshot_already_removed", key=key)
            return False
        self.blob_store.delete(key)
        return True
