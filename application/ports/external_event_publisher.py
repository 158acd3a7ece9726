from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from application.dtos.widget_dtos import WidgetUpdatedEvent
    from domain.aggregates.launch import Launch


class ExternalEventPublisher(ABC):
    """Port for publishing domain events to external event streaming services like Kafka."""

    @abstractmethod
    async def notify_test_item_attachments_deleted(self, item_id: int) -> None:
        """Notify that the attachments of a deleted test item should be purged.

        Args:
            item_id: ID of the deleted test item

        """

    @abstractmethod
    async def notify_widget_updated(self, event: WidgetUpdatedEvent) -> None:
        """Notify that a widget has been updated.

        Args:
            event: Before/after snapshots of the widget and the acting user

        """

    @abstractmethod
    async def notify_launch_started(self, launch: Launch) -> None:
        """Notify that a new launch has been started.

        Args:
            launch: The persisted launch

        """
