from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from domain.value_objects.status import Status
from domain.value_objects.test_item_type import TestItemType

PATH_SEPARATOR = "."


class TestItem(BaseModel):
    """A node of the test item tree reported under a launch.

    ``path`` is a materialized path of item ids from the root down to (and
    including) this item, e.g. ``"1.10.42"``. Descendants of an item are all
    items whose path starts with this item's path.
    """

    __test__ = False

    item_id: int
    launch_id: int
    name: str = ""
    type: TestItemType = TestItemType.STEP
    parent_id: int | None = None
    path: str
    status: Status = Status.IN_PROGRESS
    has_children: bool = False
    retry_of: int | None = None
    attributes: dict[str, str] = Field(default_factory=dict)

    model_config = {"validate_assignment": True}

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v or any(not segment.isdigit() for segment in v.split(PATH_SEPARATOR)):
            msg = f"Invalid test item path: '{v}'"
            raise ValueError(msg)
        return v

    @property
    def level(self) -> int:
        """Depth of the item in its tree; root items are level 0."""
        return self.path.count(PATH_SEPARATOR)

    @property
    def is_retry(self) -> bool:
        return self.retry_of is not None

    @property
    def is_finished(self) -> bool:
        return self.status != Status.IN_PROGRESS
