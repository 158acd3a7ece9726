from __future__ import annotations

import json
from typing import TYPE_CHECKING

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.operation_dtos import OperationCompletion
from application.dtos.widget_dtos import UpdateWidgetRequest, WidgetUpdatedEvent
from domain.exceptions import (
    AccessDeniedError,
    AggregateNotFoundError,
    DomainError,
    ForbiddenOperationError,
    ValidationError,
)
from domain.value_objects.user_role import ProjectRole

if TYPE_CHECKING:
    from application.ports.external_event_publisher import ExternalEventPublisher
    from application.ports.repositories.widget_repository import (
        UserFilterRepository,
        WidgetRepository,
    )
    from application.ports.widget_acl import WidgetAclHandler
    from domain.aggregates.widget import Widget
    from domain.value_objects.actor import Actor, ProjectDetails

logger = structlog.get_logger()


def _serialize_options(widget: Widget) -> str:
    try:
        return json.dumps(widget.widget_options, sort_keys=True)
    except (TypeError, ValueError) as e:
        msg = f"Error during parsing new widget options of widget with id = {widget.widget_id}"
        raise ValidationError(msg) from e


class UpdateWidgetUseCase:
    """Update a dashboard widget and audit the change."""

    def __init__(
        self,
        widget_repository: WidgetRepository,
        user_filter_repository: UserFilterRepository,
        widget_acl_handler: WidgetAclHandler,
        external_event_publisher: ExternalEventPublisher | None = None,
    ) -> None:
        self.widget_repository = widget_repository
        self.user_filter_repository = user_filter_repository
        self.widget_acl_handler = widget_acl_handler
        self.external_event_publisher = external_event_publisher

    async def execute(
        self,
        widget_id: int,
        request: UpdateWidgetRequest,
        project: ProjectDetails,
        actor: Actor,
    ) -> Result[OperationCompletion, AppError]:
        try:
            widget = await self._get_administrated(widget_id, project, actor)
            before = widget.to_activity()
            options_before = _serialize_options(widget)

            if request.filter_ids is not None:
                filters = await self.user_filter_repository.find_permitted(
                    request.filter_ids,
                    project.project_id,
                    actor.username,
                )
                widget.filter_ids = [f.filter_id for f in filters]

            changes = request.model_dump(exclude_unset=True, exclude={"filter_ids"})
            for field, value in changes.items():
                if value is not None:
                    setattr(widget, field, value)

            await self.widget_repository.save(widget)
            logger.info("widget_updated", widget_id=widget_id, fields=sorted(changes))

            if before.shared != widget.shared:
                await self.widget_acl_handler.update_acl(
                    widget,
                    project.project_id,
                    shared=widget.shared,
                )

            if self.external_event_publisher:
                event = WidgetUpdatedEvent(
                    before=before,
                    after=widget.to_activity(),
                    widget_options_before=options_before,
                    widget_options_after=_serialize_options(widget),
                    user_id=actor.user_id,
                )
                try:
                    await self.external_event_publisher.notify_widget_updated(event)
                except Exception as e:  # noqa: BLE001
                    logger.warning("widget_updated_event_failed", widget_id=widget_id, error=str(e))

            return Success(
                OperationCompletion(
                    message=f"Widget with ID = '{widget.widget_id}' successfully updated.",
                ),
            )
        except DomainError as e:
            logger.warning("update_widget_rejected", widget_id=widget_id, error=str(e))
            return Failure(AppError.from_domain_error(e))
        except ValueError as e:
            return Failure(AppError("validation", f"Validation error: {e!s}"))

    async def _get_administrated(
        self,
        widget_id: int,
        project: ProjectDetails,
        actor: Actor,
    ) -> Widget:
        widget = await self.widget_repository.find_by_id(widget_id)
        if widget is None:
            msg = f"Widget '{widget_id}' not found"
            raise AggregateNotFoundError(msg)
        if actor.is_administrator:
            return widget
        if widget.project_id != project.project_id:
            msg = f"Widget '{widget_id}' is not under specified project '{project.project_id}'"
            raise ForbiddenOperationError(msg)
        if widget.owner != actor.username and project.project_role.lower_than(
            ProjectRole.PROJECT_MANAGER,
        ):
            msg = f"You do not have permissions to modify widget '{widget_id}'"
            raise AccessDeniedError(msg)
        return widget
