from __future__ import annotations

from typing import TYPE_CHECKING

from pymongo.errors import PyMongoError

from application.ports.repositories.log_repository import LogRepository
from domain.exceptions import InfrastructureError
from domain.value_objects.attachment import Attachment
from infrastructure.mongo_repositories.documents import in_ids

if TYPE_CHECKING:
    from collections.abc import Collection
    from datetime import datetime

    from motor.motor_asyncio import AsyncIOMotorClient

    from infrastructure.config import Settings


class MongoLogRepository(LogRepository):
    """Logs stored with their test item id and an optional embedded attachment."""

    def __init__(self, client: AsyncIOMotorClient, settings: Settings) -> None:
        self.client = client
        self.db = self.client[settings.mongo_db]
        self.logs = self.db[settings.mongo_logs_collection]

    async def find_ids_by_test_item_id(self, item_id: int) -> list[int]:
        return await self._find_ids({"item_id": item_id})

    async def find_ids_by_test_item_ids(self, item_ids: Collection[int]) -> list[int]:
        if not item_ids:
            return []
        return await self._find_ids({"item_id": in_ids(item_ids)})

    async def find_attachments_before(self, project_id: int, before: datetime) -> list[Attachment]:
        query = {
            "project_id": project_id,
            "attachment": {"$ne": None},
            "attachment.created_at": {"$lt": before},
        }
        try:
            cursor = self.logs.find(query, projection={"_id": 1, "attachment": 1})
            return [
                Attachment(log_id=doc["_id"], project_id=project_id, **doc["attachment"])
                async for doc in cursor
            ]
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e

    async def clear_attachments(self, log_ids: Collection[int]) -> None:
        if not log_ids:
            return
        try:
            await self.logs.update_many({"_id": in_ids(log_ids)}, {"$set": {"attachment": None}})
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e

    async def _find_ids(self, query: dict) -> list[int]:
        try:
            cursor = self.logs.find(query, projection={"_id": 1})
            return [doc["_id"] async for doc in cursor]
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e
