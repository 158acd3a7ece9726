from __future__ import annotations

from lagom import Container
from motor.motor_asyncio import AsyncIOMotorClient

from application.ports.blob_store import BlobStore
from application.ports.external_event_publisher import ExternalEventPublisher
from application.ports.log_indexer import LogIndexer, LogSearchIndex
from application.ports.repositories.launch_repository import LaunchRepository
from application.ports.repositories.log_repository import LogRepository
from application.ports.repositories.project_repository import ProjectRepository
from application.ports.repositories.test_item_repository import TestItemRepository
from application.ports.repositories.widget_repository import (
    UserFilterRepository,
    WidgetRepository,
)
from application.ports.widget_acl import WidgetAclHandler
from application.use_cases.launch_use_cases import StartLaunchUseCase
from application.use_cases.screenshot_use_cases import CleanScreenshotsUseCase
from application.use_cases.test_item_use_cases import (
    DeleteTestItemsUseCase,
    DeleteTestItemUseCase,
)
from application.use_cases.widget_use_cases import UpdateWidgetUseCase
from infrastructure.blob_stores.fsspec_blob_store import FsspecBlobStore
from infrastructure.config import settings
from infrastructure.kafka.kafka_external_event_streamer import KafkaExternalEventPublisher
from infrastructure.kafka.kafka_publisher import KafkaPublisher
from infrastructure.mongo_repositories.launch_repository import MongoLaunchRepository
from infrastructure.mongo_repositories.log_repository import MongoLogRepository
from infrastructure.mongo_repositories.project_repository import MongoProjectRepository
from infrastructure.mongo_repositories.test_item_repository import MongoTestItemRepository
from infrastructure.mongo_repositories.widget_repository import MongoWidgetRepository
from infrastructure.search_index.qdrant_log_index import QdrantLogSearchIndex
from infrastructure.temporal.log_indexer import TemporalLogIndexer


def create_container() -> Container:
    container = Container()

    # MongoDB client shared by every repository
    container[AsyncIOMotorClient] = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)

    # Register Repositories
    container[TestItemRepository] = lambda c: MongoTestItemRepository(
        client=c[AsyncIOMotorClient],
        settings=settings,
    )
    container[LaunchRepository] = lambda c: MongoLaunchRepository(
        client=c[AsyncIOMotorClient],
        settings=settings,
    )
    container[LogRepository] = lambda c: MongoLogRepository(
        client=c[AsyncIOMotorClient],
        settings=settings,
    )
    container[ProjectRepository] = lambda c: MongoProjectRepository(
        client=c[AsyncIOMotorClient],
        settings=settings,
    )

    # Widgets, their filters and ACL entries live side by side
    widget_repository = MongoWidgetRepository(
        client=container[AsyncIOMotorClient],
        settings=settings,
    )
    container[WidgetRepository] = widget_repository
    container[UserFilterRepository] = widget_repository
    container[WidgetAclHandler] = widget_repository

    # Blob storage (fsspec)
    container[BlobStore] = FsspecBlobStore(
        base_url=settings.blob_base_url,
        storage_options=settings.blob_storage_options,
    )

    # Log search index and the Temporal backed cleanup dispatcher
    container[LogSearchIndex] = QdrantLogSearchIndex(
        url=settings.qdrant_url,
        api_key=settings.qdrant_api_key,
        collection_name=settings.qdrant_log_collection_name,
    )
    container[LogIndexer] = TemporalLogIndexer()

    # Infrastructure - Notifications
    if settings.enable_external_event_streaming:
        container[KafkaPublisher] = KafkaPublisher()
        container[ExternalEventPublisher] = lambda c: KafkaExternalEventPublisher(
            publisher=c[KafkaPublisher],
        )
    else:
        container[ExternalEventPublisher] = lambda _: None  # type: ignore[return-value]

    # Register Use Cases
    container[DeleteTestItemUseCase] = lambda c: DeleteTestItemUseCase(
        test_item_repository=c[TestItemRepository],
        launch_repository=c[LaunchRepository],
        log_repository=c[LogRepository],
        log_indexer=c[LogIndexer],
        external_event_publisher=c[ExternalEventPublisher],
    )
    container[DeleteTestItemsUseCase] = lambda c: DeleteTestItemsUseCase(
        test_item_repository=c[TestItemRepository],
        launch_repository=c[LaunchRepository],
        log_repository=c[LogRepository],
        log_indexer=c[LogIndexer],
        external_event_publisher=c[ExternalEventPublisher],
    )
    container[StartLaunchUseCase] = lambda c: StartLaunchUseCase(
        launch_repository=c[LaunchRepository],
        external_event_publisher=c[ExternalEventPublisher],
    )
    container[UpdateWidgetUseCase] = lambda c: UpdateWidgetUseCase(
        widget_repository=c[WidgetRepository],
        user_filter_repository=c[UserFilterRepository],
        widget_acl_handler=c[WidgetAclHandler],
        external_event_publisher=c[ExternalEventPublisher],
    )
    container[CleanScreenshotsUseCase] = lambda c: CleanScreenshotsUseCase(
        project_repository=c[ProjectRepository],
        log_repository=c[LogRepository],
        blob_store=c[BlobStore],
        page_size=settings.clean_screenshots_page_size,
    )

    return container
