from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection
    from datetime import datetime

    from domain.value_objects.attachment import Attachment


class LogRepository(ABC):
    """Interface for log repository."""

    @abstractmethod
    async def find_ids_by_test_item_id(self, item_id: int) -> list[int]:
        """Return the ids of logs reported under a single test item."""

    @abstractmethod
    async def find_ids_by_test_item_ids(self, item_ids: Collection[int]) -> list[int]:
        """Return the ids of logs reported under any of the test items."""

    @abstractmethod
    async def find_attachments_before(
        self,
        project_id: int,
        before: datetime,
    ) -> list[Attachment]:
        """Return attachments of the project created strictly before ``before``."""

    @abstractmethod
    async def clear_attachments(self, log_ids: Collection[int]) -> None:
        """Drop attachment references from the given logs, keeping the logs."""
