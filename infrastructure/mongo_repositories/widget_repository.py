from __future__ import annotations

from typing import TYPE_CHECKING

from pymongo.errors import PyMongoError

from application.ports.repositories.widget_repository import (
    UserFilterRepository,
    WidgetRepository,
)
from domain.aggregates.user_filter import UserFilter
from domain.aggregates.widget import Widget
from domain.exceptions import InfrastructureError
from infrastructure.mongo_repositories.documents import from_document, in_ids, to_document

if TYPE_CHECKING:
    from collections.abc import Collection

    from motor.motor_asyncio import AsyncIOMotorClient

    from infrastructure.config import Settings


class MongoWidgetRepository(WidgetRepository, UserFilterRepository):
    def __init__(self, client: AsyncIOMotorClient, settings: Settings) -> None:
        self.client = client
        self.db = self.client[settings.mongo_db]
        self.widgets = self.db[settings.mongo_widgets_collection]
        self.filters = self.db[settings.mongo_filters_collection]
        self.acl_entries = self.db[settings.mongo_acl_collection]

    async def find_by_id(self, widget_id: int) -> Widget | None:
        try:
            doc = await self.widgets.find_one({"_id": widget_id})
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e
        return from_document(Widget, doc, "widget_id") if doc else None

    async def save(self, widget: Widget) -> None:
        try:
            await self.widgets.replace_one(
                {"_id": widget.widget_id},
                to_document(widget, "widget_id"),
                upsert=True,
            )
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e

    async def find_permitted(
        self,
        filter_ids: Collection[int],
        project_id: int,
        username: str,
    ) -> list[UserFilter]:
        if not filter_ids:
            return []
        query = {
            "_id": in_ids(filter_ids),
            "project_id": project_id,
            "$or": [{"owner": username}, {"shared": True}],
        }
        try:
            cursor = self.filters.find(query).sort("_id")
            return [from_document(UserFilter, doc, "filter_id") async for doc in cursor]
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e

    async def update_acl(self, widget: Widget, project_id: int, *, shared: bool) -> None:
        """Record whether members of ``project_id`` may read the widget."""
        try:
            await self.acl_entries.update_one(
                {"object_type": "widget", "object_id": widget.widget_id},
                {
                    "$set": {
                        "owner": widget.owner,
                        "project_id": project_id,
                        "shared_with_project": shared,
                    },
                },
                upsert=True,
            )
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e
