from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field

from domain.value_objects.launch_mode import LaunchMode
from domain.value_objects.status import Status


class Launch(BaseModel):
    """A single execution of a test run, owned by a user inside a project."""

    launch_id: int | None = None
    """Storage identifier. ``None`` until the launch is persisted."""

    uuid: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    description: str | None = None
    project_id: int
    user_id: int
    status: Status = Status.IN_PROGRESS
    mode: LaunchMode = LaunchMode.DEFAULT
    number: int = 1
    start_time: datetime = Field(default_factory=lambda: datetime.now(UTC))
    end_time: datetime | None = None
    attributes: dict[str, str] = Field(default_factory=dict)
    has_retries: bool = False

    model_config = {"validate_assignment": True}

    @classmethod
    def start(  # noqa: PLR0913
        cls,
        name: str,
        project_id: int,
        user_id: int,
        number: int,
        *,
        description: str | None = None,
        mode: LaunchMode = LaunchMode.DEFAULT,
        start_time: datetime | None = None,
        attributes: dict[str, str] | None = None,
        uuid: str | None = None,
    ) -> Launch:
        """Create a new launch in progress (Factory Method)."""
        if not name or not name.strip():
            msg = "name must be provided"
            raise ValueError(msg)
        if number < 1:
            msg = "number must be positive"
            raise ValueError(msg)
        launch = cls(
            name=name.strip(),
            description=description,
            project_id=project_id,
            user_id=user_id,
            status=Status.IN_PROGRESS,
            mode=mode,
            number=number,
            start_time=start_time or datetime.now(UTC),
            attributes=attributes or {},
        )
        if uuid:
            launch.uuid = uuid
        return launch

    @property
    def is_finished(self) -> bool:
        return self.status != Status.IN_PROGRESS
