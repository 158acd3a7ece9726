"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when input validation fails."""


class AggregateNotFoundError(DomainError):
    """Raised when an aggregate is not found in the repository."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (DB, network, etc.)."""


class ForbiddenOperationError(DomainError):
    """Raised when an operation targets a resource outside the actor's project."""


class AccessDeniedError(DomainError):
    """Raised when the actor lacks the role or ownership required."""


class RetriesHandlerError(DomainError):
    """Raised when a retry item is targeted directly."""


class ItemNotFinishedError(DomainError):
    """Raised when a test item is still in progress."""


class LaunchNotFinishedError(DomainError):
    """Raised when a launch is still in progress."""
