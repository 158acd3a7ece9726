from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from domain.value_objects.widget_activity import WidgetActivity


class Widget(BaseModel):
    """A dashboard widget rendering data selected by one or more user filters."""

    widget_id: int
    project_id: int
    owner: str
    """Username of the widget creator."""

    name: str
    description: str | None = None
    widget_type: str
    items_count: int = 20
    content_fields: list[str] = Field(default_factory=list)
    widget_options: dict[str, Any] = Field(default_factory=dict)
    filter_ids: list[int] = Field(default_factory=list)
    shared: bool = False

    model_config = {"validate_assignment": True}

    def to_activity(self) -> WidgetActivity:
        return WidgetActivity(
            widget_id=self.widget_id,
            project_id=self.project_id,
            name=self.name,
            description=self.description,
            shared=self.shared,
            items_count=self.items_count,
            content_fields=list(self.content_fields),
        )
