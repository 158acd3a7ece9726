from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from domain.aggregates.widget import Widget


class WidgetAclHandler(Protocol):
    """Port maintaining who besides the owner may read a widget."""

    async def update_acl(self, widget: Widget, project_id: int, *, shared: bool) -> None:
        """Grant (shared) or revoke (not shared) read access for project members."""
        ...
