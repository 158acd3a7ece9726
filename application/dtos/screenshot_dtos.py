from pydantic import BaseModel, Field


class ProjectScreenshotsCleanup(BaseModel):
    """Outcome of cleaning outdated screenshots of a single project."""

    project_id: int
    attachments_deleted: int = 0
    thumbnails_deleted: int = 0
    error: str | None = None


class CleanScreenshotsSummary(BaseModel):
    """Outcome of a whole clean screenshots run."""

    projects: list[ProjectScreenshotsCleanup] = Field(default_factory=list)

    @property
    def attachments_deleted(self) -> int:
        return sum(p.attachments_deleted for p in self.projects)

    @property
    def thumbnails_deleted(self) -> int:
        return sum(p.thumbnails_deleted for p in self.projects)
