from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.aggregates.project import Project


class ProjectRepository(ABC):
    """Interface for project repository."""

    @abstractmethod
    async def find_with_attribute(
        self,
        attribute: str,
        skip: int = 0,
        limit: int = 100,
    ) -> list[Project]:
        """Return one page of projects that define ``attribute``, ordered by id."""
