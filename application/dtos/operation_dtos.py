from pydantic import BaseModel, Field


class OperationCompletion(BaseModel):
    """Confirmation returned by mutating operations."""

    message: str = Field(..., description="Human readable outcome of the operation")
