from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="ReportPortal Core", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )

    # Kafka
    enable_external_event_streaming: bool = Field(
        default=True,
        validation_alias="ENABLE_EXTERNAL_EVENT_STREAMING",
    )
    kafka_bootstrap_servers: str = Field(
        default="localhost:19092",
        validation_alias="KAFKA_BOOTSTRAP_SERVERS",
    )
    kafka_topic: str = Field(default="reportportal_events", validation_alias="KAFKA_TOPIC")

    # MongoDB
    mongo_uri: str = Field(
        default="mongodb://localhost:27017/?replicaSet=rs0",
        validation_alias="MONGO_URI",
    )
    mongo_db: str = Field(default="reportportal", validation_alias="MONGO_DB")
    mongo_test_items_collection: str = Field(
        default="test_items",
        validation_alias="MONGO_TEST_ITEMS_COLLECTION",
    )
    mongo_launches_collection: str = Field(
        default="launches",
        validation_alias="MONGO_LAUNCHES_COLLECTION",
    )
    mongo_logs_collection: str = Field(default="logs", validation_alias="MONGO_LOGS_COLLECTION")
    mongo_projects_collection: str = Field(
        default="projects",
        validation_alias="MONGO_PROJECTS_COLLECTION",
    )
    mongo_widgets_collection: str = Field(
        default="widgets",
        validation_alias="MONGO_WIDGETS_COLLECTION",
    )
    mongo_filters_collection: str = Field(
        default="filters",
        validation_alias="MONGO_FILTERS_COLLECTION",
    )
    mongo_acl_collection: str = Field(default="acl_entries", validation_alias="MONGO_ACL_COLLECTION")
    mongo_counters_collection: str = Field(
        default="counters",
        validation_alias="MONGO_COUNTERS_COLLECTION",
    )

    # Blob Storage
    blob_base_url: str = Field(
        default="file://" + str(Path(__file__).resolve().parents[1] / "blobs"),
        validation_alias="BLOB_BASE_URL",
    )
    blob_storage_options: dict = {}

    # Temporal
    temporal_address: str = Field(
        default="localhost:7233",
        validation_alias="TEMPORAL_ADDRESS",
    )
    temporal_task_queue: str = Field(
        default="reportportal_jobs",
        validation_alias="TEMPORAL_TASK_QUEUE",
    )
    temporal_max_concurrent_activities: int = Field(
        default=10,
        validation_alias="TEMPORAL_MAX_CONCURRENT_ACTIVITIES",
    )

    # Jobs
    clean_screenshots_cron: str = Field(
        default="0 3 * * *",
        validation_alias="CLEAN_SCREENSHOTS_CRON",
        description="Cron expression the clean screenshots workflow is scheduled with.",
    )
    clean_screenshots_page_size: int = Field(
        default=50,
        validation_alias="CLEAN_SCREENSHOTS_PAGE_SIZE",
    )

    # Qdrant (log search index)
    qdrant_url: str = Field(
        default="http://localhost:6333",
        validation_alias="QDRANT_URL",
    )
    qdrant_api_key: str | None = Field(
        default=None,
        validation_alias="QDRANT_API_KEY",
    )
    qdrant_log_collection_name: str = Field(
        default="log_index",
        validation_alias="QDRANT_LOG_COLLECTION_NAME",
    )


# Global settings instance
settings = Settings()
