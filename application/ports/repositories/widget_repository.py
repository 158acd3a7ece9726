from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection

    from domain.aggregates.user_filter import UserFilter
    from domain.aggregates.widget import Widget


class WidgetRepository(ABC):
    """Interface for widget repository."""

    @abstractmethod
    async def find_by_id(self, widget_id: int) -> Widget | None:
        """Retrieve a widget by its ID, or None if it does not exist."""

    @abstractmethod
    async def save(self, widget: Widget) -> None:
        """Persist changes made to a widget."""


class UserFilterRepository(ABC):
    """Interface for user filter repository."""

    @abstractmethod
    async def find_permitted(
        self,
        filter_ids: Collection[int],
        project_id: int,
        username: str,
    ) -> list[UserFilter]:
        """Return the listed filters of the project that ``username`` may use.

        A filter is permitted when it is owned by the user or shared.
        """
