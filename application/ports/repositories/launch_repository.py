from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection

    from domain.aggregates.launch import Launch


class LaunchRepository(ABC):
    """Interface for launch repository."""

    @abstractmethod
    async def find_by_id(self, launch_id: int) -> Launch | None:
        """Retrieve a launch by its ID, or None if it does not exist."""

    @abstractmethod
    async def find_all_by_id(self, launch_ids: Collection[int]) -> list[Launch]:
        """Retrieve every existing launch among ``launch_ids``."""

    @abstractmethod
    async def has_retries(self, launch_id: int) -> bool:
        """Return True if any test item of the launch is a retry."""

    @abstractmethod
    async def next_number(self, project_id: int, name: str) -> int:
        """Return the number the next launch called ``name`` in the project gets."""

    @abstractmethod
    async def create(self, launch: Launch) -> Launch:
        """Persist a new launch and return it with its storage id assigned."""

    @abstractmethod
    async def save(self, launch: Launch) -> None:
        """Persist changes made to an existing launch."""
