"""Domain layer exports."""

from domain.aggregates import Launch, Project, TestItem, UserFilter, Widget
from domain.exceptions import (
    AccessDeniedError,
    AggregateNotFoundError,
    DomainError,
    ForbiddenOperationError,
    ItemNotFinishedError,
    LaunchNotFinishedError,
    RetriesHandlerError,
    ValidationError,
)
from domain.value_objects import (
    Actor,
    Attachment,
    KeepScreenshotsDelay,
    LaunchMode,
    ProjectDetails,
    ProjectRole,
    Status,
    TestItemType,
    UserRole,
    WidgetActivity,
)

__all__ = [
    "AccessDeniedError",
    "Actor",
    "AggregateNotFoundError",
    "Attachment",
    "DomainError",
    "ForbiddenOperationError",
    "ItemNotFinishedError",
    "KeepScreenshotsDelay",
    "Launch",
    "LaunchMode",
    "LaunchNotFinishedError",
    "Project",
    "ProjectDetails",
    "ProjectRole",
    "RetriesHandlerError",
    "Status",
    "TestItem",
    "TestItemType",
    "UserFilter",
    "UserRole",
    "ValidationError",
    "Widget",
    "WidgetActivity",
]
