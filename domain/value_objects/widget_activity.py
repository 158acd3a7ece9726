from pydantic import BaseModel, Field


class WidgetActivity(BaseModel):
    """Snapshot of the audited widget fields, captured before and after an update."""

    widget_id: int
    project_id: int
    name: str
    description: str | None = None
    shared: bool = False
    items_count: int = 0
    content_fields: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}
