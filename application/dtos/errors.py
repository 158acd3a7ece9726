from domain.exceptions import (
    AccessDeniedError,
    AggregateNotFoundError,
    DomainError,
    ForbiddenOperationError,
    InfrastructureError,
    ItemNotFinishedError,
    LaunchNotFinishedError,
    RetriesHandlerError,
    ValidationError,
)


class AppError:
    """Represents different categories of application errors."""

    def __init__(self, category: str, message: str) -> None:
        self.category = category  # see DOMAIN_ERROR_CATEGORIES for the known values
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"AppError(category={self.category!r}, message={self.message!r})"

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "AppError":
        for error_type, category in DOMAIN_ERROR_CATEGORIES.items():
            if isinstance(error, error_type):
                return cls(category, str(error))
        return cls("internal_error", str(error))


DOMAIN_ERROR_CATEGORIES: dict[type[DomainError], str] = {
    AggregateNotFoundError: "not_found",
    ForbiddenOperationError: "forbidden_operation",
    AccessDeniedError: "access_denied",
    RetriesHandlerError: "retries_handler_error",
    ItemNotFinishedError: "item_not_finished",
    LaunchNotFinishedError: "launch_not_finished",
    ValidationError: "validation",
    InfrastructureError: "infrastructure",
}
