"""Mapping between aggregates and MongoDB documents.

Integer aggregate ids are stored as the document ``_id``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Collection

M = TypeVar("M", bound=BaseModel)


def to_document(model: BaseModel, id_field: str) -> dict[str, Any]:
    doc = model.model_dump(mode="python")
    doc["_id"] = doc.pop(id_field)
    return doc


def from_document(model_type: type[M], doc: dict[str, Any], id_field: str) -> M:
    doc = dict(doc)
    doc[id_field] = doc.pop("_id")
    return model_type.model_validate(doc)


def descendants_filter(path: str) -> dict[str, Any]:
    """Match the item at ``path`` and every item below it."""
    return {"$or": [{"path": path}, {"path": {"$regex": f"^{re.escape(path)}\\."}}]}


def in_ids(ids: Collection[int]) -> dict[str, Any]:
    return {"$in": list(ids)}
