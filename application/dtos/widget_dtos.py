from typing import Any

from pydantic import BaseModel, Field

from domain.value_objects.widget_activity import WidgetActivity


class UpdateWidgetRequest(BaseModel):
    """Request DTO for updating a widget. Unset fields are left unchanged."""

    name: str | None = Field(None, description="New widget name")
    description: str | None = Field(None, description="New widget description")
    widget_type: str | None = Field(None, description="New widget type")
    items_count: int | None = Field(None, ge=1, le=600, description="Number of items rendered")
    content_fields: list[str] | None = Field(None, description="Content fields to render")
    widget_options: dict[str, Any] | None = Field(None, description="Widget specific options")
    filter_ids: list[int] | None = Field(None, description="User filters the widget is built on")
    shared: bool | None = Field(None, description="Whether the widget is shared with the project")


class WidgetUpdatedEvent(BaseModel):
    """Activity event describing a widget update."""

    before: WidgetActivity
    after: WidgetActivity
    widget_options_before: str
    widget_options_after: str
    user_id: int
