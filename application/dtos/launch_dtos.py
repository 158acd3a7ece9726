from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from domain.value_objects.launch_mode import LaunchMode


class StartLaunchRequest(BaseModel):
    """Request DTO for starting a new launch."""

    name: str = Field(..., description="Launch name; launches sharing a name are numbered")
    description: str | None = Field(None, description="Free text description")
    start_time: datetime | None = Field(None, description="Start time, defaults to now")
    mode: LaunchMode = Field(LaunchMode.DEFAULT, description="Launch visibility mode")
    attributes: dict[str, str] = Field(default_factory=dict, description="Launch attributes")
    uuid: str | None = Field(None, description="Client supplied launch UUID")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            msg = "Launch name cannot be blank or empty"
            raise ValueError(msg)
        return v


class StartLaunchResponse(BaseModel):
    """Response DTO for a started launch."""

    id: int = Field(..., description="Storage identifier of the launch")
    uuid: str = Field(..., description="UUID of the launch")
    number: int = Field(..., description="Sequence number of the launch within its name")
