from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.launch_dtos import StartLaunchRequest, StartLaunchResponse
from domain.aggregates.launch import Launch
from domain.exceptions import DomainError, ForbiddenOperationError
from domain.value_objects.launch_mode import LaunchMode
from domain.value_objects.user_role import ProjectRole

if TYPE_CHECKING:
    from application.ports.external_event_publisher import ExternalEventPublisher
    from application.ports.repositories.launch_repository import LaunchRepository
    from domain.value_objects.actor import Actor, ProjectDetails

logger = structlog.get_logger()


class StartLaunchUseCase:
    """Start a new launch in the requested project."""

    def __init__(
        self,
        launch_repository: LaunchRepository,
        external_event_publisher: ExternalEventPublisher | None = None,
    ) -> None:
        self.launch_repository = launch_repository
        self.external_event_publisher = external_event_publisher

    async def execute(
        self,
        request: StartLaunchRequest,
        project: ProjectDetails,
        actor: Actor,
    ) -> Result[StartLaunchResponse, AppError]:
        try:
            if (
                not actor.is_administrator
                and project.project_role == ProjectRole.CUSTOMER
                and request.mode != LaunchMode.DEFAULT
            ):
                msg = f"Customers can only start launches in '{LaunchMode.DEFAULT.value}' mode"
                raise ForbiddenOperationError(msg)

            number = await self.launch_repository.next_number(project.project_id, request.name)
            launch = Launch.start(
                name=request.name,
                project_id=project.project_id,
                user_id=actor.user_id,
                number=number,
                description=request.description,
                mode=request.mode,
                start_time=request.start_time,
                attributes=request.attributes,
                uuid=request.uuid,
            )
            launch = await self.launch_repository.create(launch)
            logger.info(
                "launch_started",
                launch_id=launch.launch_id,
                uuid=launch.uuid,
                number=launch.number,
                project_id=project.project_id,
            )

            if self.external_event_publisher:
                try:
                    await self.external_event_publisher.notify_launch_started(launch)
                except Exception as e:  # noqa: BLE001
                    logger.warning(
                        "launch_started_event_failed",
                        launch_id=launch.launch_id,
                        error=str(e),
                    )

            return Success(
                StartLaunchResponse(id=launch.launch_id, uuid=launch.uuid, number=launch.number),
            )
        except DomainError as e:
            return Failure(AppError.from_domain_error(e))
        except ValueError as e:
            return Failure(AppError("validation", f"Validation error: {e!s}"))
