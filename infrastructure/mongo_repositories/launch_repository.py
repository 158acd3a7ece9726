from __future__ import annotations

from typing import TYPE_CHECKING

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from application.ports.repositories.launch_repository import LaunchRepository
from domain.aggregates.launch import Launch
from domain.exceptions import InfrastructureError
from infrastructure.mongo_repositories.documents import from_document, in_ids, to_document

if TYPE_CHECKING:
    from collections.abc import Collection

    from motor.motor_asyncio import AsyncIOMotorClient

    from infrastructure.config import Settings


class MongoLaunchRepository(LaunchRepository):
    def __init__(self, client: AsyncIOMotorClient, settings: Settings) -> None:
        self.client = client
        self.db = self.client[settings.mongo_db]
        self.launches = self.db[settings.mongo_launches_collection]
        self.items = self.db[settings.mongo_test_items_collection]
        self.counters = self.db[settings.mongo_counters_collection]

    async def find_by_id(self, launch_id: int) -> Launch | None:
        try:
            doc = await self.launches.find_one({"_id": launch_id})
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e
        return from_document(Launch, doc, "launch_id") if doc else None

    async def find_all_by_id(self, launch_ids: Collection[int]) -> list[Launch]:
        if not launch_ids:
            return []
        try:
            cursor = self.launches.find({"_id": in_ids(launch_ids)})
            return [from_document(Launch, doc, "launch_id") async for doc in cursor]
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e

    async def has_retries(self, launch_id: int) -> bool:
        query = {"launch_id": launch_id, "retry_of": {"$ne": None}}
        try:
            return await self.items.find_one(query, projection={"_id": 1}) is not None
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e

    async def next_number(self, project_id: int, name: str) -> int:
        return await self._increment(f"launch_number:{project_id}:{name}")

    async def create(self, launch: Launch) -> Launch:
        launch.launch_id = await self._increment("launch_id")
        try:
            await self.launches.insert_one(to_document(launch, "launch_id"))
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e
        return launch

    async def save(self, launch: Launch) -> None:
        try:
            await self.launches.replace_one(
                {"_id": launch.launch_id},
                to_document(launch, "launch_id"),
                upsert=True,
            )
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e

    async def _increment(self, counter: str) -> int:
        try:
            doc = await self.counters.find_one_and_update(
                {"_id": counter},
                {"$inc": {"seq": 1}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e
        return doc["seq"]
