from pydantic import BaseModel, Field

KEEP_SCREENSHOTS_ATTRIBUTE = "job.keepScreenshots"


class Project(BaseModel):
    """A project and its configuration attributes."""

    project_id: int
    name: str
    attributes: dict[str, str] = Field(default_factory=dict)

    @property
    def keep_screenshots(self) -> str | None:
        for key, value in self.attributes.items():
            if key.lower() == KEEP_SCREENSHOTS_ATTRIBUTE.lower():
                return value
        return None
