from __future__ import annotations

from typing import TYPE_CHECKING

from pymongo.errors import PyMongoError

from application.ports.repositories.project_repository import ProjectRepository
from domain.aggregates.project import Project
from domain.exceptions import InfrastructureError
from infrastructure.mongo_repositories.documents import from_document

if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorClient

    from infrastructure.config import Settings


def _has_attribute(attribute: str) -> dict:
    # attribute names contain dots, so they cannot be addressed as a field path
    field = {"$getField": {"field": attribute, "input": "$attributes"}}
    return {"$expr": {"$ne": [{"$type": field}, "missing"]}}


class MongoProjectRepository(ProjectRepository):
    def __init__(self, client: AsyncIOMotorClient, settings: Settings) -> None:
        self.client = client
        self.db = self.client[settings.mongo_db]
        self.projects = self.db[settings.mongo_projects_collection]

    async def find_with_attribute(
        self,
        attribute: str,
        skip: int = 0,
        limit: int = 100,
    ) -> list[Project]:
        try:
            cursor = (
                self.projects.find(_has_attribute(attribute))
                .sort("_id")
                .skip(skip)
                .limit(limit)
            )
            return [from_document(Project, doc, "project_id") async for doc in cursor]
        except PyMongoError as e:
            raise InfrastructureError(str(e)) from e
