"""Helpers converting between BSON documents and JSON-friendly values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from bson import ObjectId


@dataclass
class InsertResult:
    acknowledged: bool
    inserted_id: str

    @classmethod
    def from_pymongo(cls, result: Any) -> "InsertResult":
        return cls(
            acknowledged=bool(result.acknowledged),
            inserted_id=str(result.inserted_id),
        )


@dataclass
class UpdateResult:
    acknowledged: bool
    matched_count: int
    modified_count: int

    @classmethod
    def from_pymongo(cls, result: Any) -> "UpdateResult":
        return cls(
            acknowledged=bool(result.acknowledged),
            matched_count=int(result.matched_count),
            modified_count=int(result.modified_count),
        )


@dataclass
class DeleteResult:
    acknowledged: bool
    deleted_count: int

    @classmethod
    def from_pymongo(cls, result: Any) -> "DeleteResult":
        return cls(
            acknowledged=bool(result.acknowledged),
            deleted_count=int(result.deleted_count),
        )


def to_object_id(identifier: str) -> ObjectId:
    """Parse a route identifier.

    Malformed tokens raise :class:`bson.errors.InvalidId`, which is left for the
    caller (or the framework) to handle.
    """

    return ObjectId(identifier)


def coerce_reference(value: Any) -> Any:
    """Store valid identifier strings as ObjectIds so lookups can join on ``_id``."""

    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, Mapping):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def serialize_document(document: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Render a stored document with string identifiers, or ``None``."""

    if document is None:
        return None
    return serialize_value(document)


def serialize_documents(documents: List[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_value(document) for document in documents]


__all__ = [
    "DeleteResult",
    "InsertResult",
    "UpdateResult",
    "coerce_reference",
    "serialize_document",
    "serialize_documents",
    "serialize_value",
    "to_object_id",
]
