from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from application.ports.external_event_publisher import ExternalEventPublisher

if TYPE_CHECKING:
    from application.dtos.widget_dtos import WidgetUpdatedEvent
    from domain.aggregates.launch import Launch
    from infrastructure.kafka.kafka_publisher import KafkaPublisher

logger = structlog.get_logger()


class KafkaExternalEventPublisher(ExternalEventPublisher):
    """Notification service that publishes events to Kafka."""

    def __init__(self, publisher: KafkaPublisher) -> None:
        self.publisher = publisher

    async def notify_test_item_attachments_deleted(self, item_id: int) -> None:
        event = {
            "event_type": "TestItemAttachmentsDeleted",
            "data": {"item_id": item_id},
        }
        await self.publisher.publish(
            subject="TestItemAttachmentsDeleted",
            event=event,
            key=str(item_id),
        )
        logger.info("kafka notified_test_item_attachments_deleted", item_id=item_id)

    async def notify_widget_updated(self, event: WidgetUpdatedEvent) -> None:
        payload = {
            "event_type": "WidgetUpdated",
            "data": event.model_dump(mode="json"),
        }
        await self.publisher.publish(
            subject="WidgetUpdated",
            event=payload,
            key=str(event.after.widget_id),
        )
        logger.info("kafka notified_widget_updated", widget_id=event.after.widget_id)

    async def notify_launch_started(self, launch: Launch) -> None:
        event = {
            "event_type": "LaunchStarted",
            "data": launch.model_dump(mode="json"),
        }
        await self.publisher.publish(subject="LaunchStarted", event=event, key=launch.uuid)
        logger.info("kafka notified_launch_started", launch_id=launch.launch_id)
