from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """Global (instance-wide) role of a user."""

    ADMINISTRATOR = "ADMINISTRATOR"
    USER = "USER"


class ProjectRole(str, Enum):
    """Role of a user inside a single project.

    Declaration order is significant: roles are ranked from the least to the
    most privileged.
    """

    OPERATOR = "OPERATOR"
    CUSTOMER = "CUSTOMER"
    MEMBER = "MEMBER"
    PROJECT_MANAGER = "PROJECT_MANAGER"

    @property
    def rank(self) -> int:
        return list(ProjectRole).index(self)

    def lower_than(self, other: ProjectRole) -> bool:
        """Return True if this role is strictly less privileged than ``other``."""
        return self.rank < other.rank
