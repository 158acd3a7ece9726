from datetime import datetime

from pydantic import BaseModel


class Attachment(BaseModel):
    """Binary file attached to a log entry, stored outside the database."""

    log_id: int
    """Identifier of the log entry that references the file."""

    project_id: int

    file_id: str
    """Blob store key of the original file."""

    thumbnail_id: str | None = None
    """Blob store key of the generated thumbnail, if any."""

    content_type: str | None = None

    created_at: datetime

    model_config = {"frozen": True}
