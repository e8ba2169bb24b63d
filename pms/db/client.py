"""
MongoDB client for the PMS collections.
Wraps one long-lived ``MongoClient`` and exposes a method per collection operation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..config import CONFIG
from ..logger import log, log_error
from .documents import (
    DeleteResult,
    InsertResult,
    UpdateResult,
    serialize_document,
    serialize_documents,
    to_object_id,
)

USERS_COLLECTION = "user"
ASSETS_COLLECTION = "assets"
TASKS_COLLECTION = "tasks"

TASK_ASSET_FIELD = "asset"


class MongoDatabaseClient:
    """Database client for MongoDB operations."""

    def __init__(self, database: Database, *, client: Optional[MongoClient] = None):
        self.database = database
        self.client = client
        self.users = database[USERS_COLLECTION]
        self.assets = database[ASSETS_COLLECTION]
        self.tasks = database[TASKS_COLLECTION]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def ping(self) -> None:
        """Round-trip to the server; raises ``PyMongoError`` when unreachable."""
        self.database.command("ping")

    def ensure_indexes(self) -> bool:
        """Create the unique email index on users.

        Returns ``False`` when the store refuses, e.g. because duplicate
        emails already exist; the pre-insert existence check still applies.
        """
        try:
            self.users.create_index(
                [("email", ASCENDING)],
                name="email_unique",
                unique=True,
                sparse=True,
            )
        except PyMongoError as exc:
            log_error("[db] could not create unique email index:", exc)
            return False
        log("[db] indexes ensured", collection=USERS_COLLECTION)
        return True

    def close(self) -> None:
        if self.client is not None:
            self.client.close()

    # ------------------------------------------------------------------
    # Shared collection helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _find_all(collection) -> List[Dict[str, Any]]:
        return serialize_documents(list(collection.find()))

    @staticmethod
    def _find_by_id(collection, document_id: str) -> Optional[Dict[str, Any]]:
        return serialize_document(collection.find_one({"_id": to_object_id(document_id)}))

    @staticmethod
    def _insert(collection, document: Mapping[str, Any]) -> InsertResult:
        # insert_one mutates its argument with the generated _id
        return InsertResult.from_pymongo(collection.insert_one(dict(document)))

    @staticmethod
    def _update(collection, document_id: str, fields: Mapping[str, Any]) -> UpdateResult:
        result = collection.update_one(
            {"_id": to_object_id(document_id)},
            {"$set": dict(fields)},
        )
        return UpdateResult.from_pymongo(result)

    @staticmethod
    def _delete(collection, document_id: str) -> DeleteResult:
        return DeleteResult.from_pymongo(collection.delete_one({"_id": to_object_id(document_id)}))

    # ------------------------------------------------------------------
    # Assets
    # ------------------------------------------------------------------
    def list_assets(self) -> List[Dict[str, Any]]:
        return self._find_all(self.assets)

    def get_asset(self, asset_id: str) -> Optional[Dict[str, Any]]:
        return self._find_by_id(self.assets, asset_id)

    def create_asset(self, asset: Mapping[str, Any]) -> InsertResult:
        return self._insert(self.assets, asset)

    def update_asset(self, asset_id: str, fields: Mapping[str, Any]) -> UpdateResult:
        return self._update(self.assets, asset_id, fields)

    def delete_asset(self, asset_id: str) -> DeleteResult:
        return self._delete(self.assets, asset_id)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> List[Dict[str, Any]]:
        return self._find_all(self.users)

    def get_user_by_email(self, email: Any) -> Optional[Dict[str, Any]]:
        # $eq keeps operator-shaped bodies such as {"$ne": null} literal
        return serialize_document(self.users.find_one({"email": {"$eq": email}}))

    def create_user(self, user: Mapping[str, Any]) -> InsertResult:
        """Insert a user; raises ``DuplicateKeyError`` when the email index rejects it."""
        return self._insert(self.users, user)

    def update_user(self, user_id: str, fields: Mapping[str, Any]) -> UpdateResult:
        return self._update(self.users, user_id, fields)

    def delete_user(self, user_id: str) -> DeleteResult:
        return self._delete(self.users, user_id)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    def list_tasks_with_assets(self) -> List[Dict[str, Any]]:
        """Return all tasks with the referenced asset embedded under ``asset``."""
        pipeline = [
            {
                "$lookup": {
                    "from": ASSETS_COLLECTION,
                    "localField": "assetId",
                    "foreignField": "_id",
                    "as": TASK_ASSET_FIELD,
                }
            }
        ]
        tasks: List[Dict[str, Any]] = []
        for record in self.tasks.aggregate(pipeline):
            matches = record.get(TASK_ASSET_FIELD) or []
            record[TASK_ASSET_FIELD] = matches[0] if matches else None
            tasks.append(serialize_document(record))
        return tasks

    def get_task(self, task_id: str) -> Optional[Dict[str, Any]]:
        return self._find_by_id(self.tasks, task_id)

    def create_task(self, task: Mapping[str, Any]) -> InsertResult:
        return self._insert(self.tasks, task)

    def update_task(self, task_id: str, fields: Mapping[str, Any]) -> UpdateResult:
        return self._update(self.tasks, task_id, fields)

    def delete_task(self, task_id: str) -> DeleteResult:
        return self._delete(self.tasks, task_id)


# Simple alias for readability
DatabaseClient = MongoDatabaseClient


def connect_database(
    uri: Optional[str] = None,
    db_name: Optional[str] = None,
    *,
    timeout_ms: Optional[int] = None,
) -> MongoDatabaseClient:
    """Open the shared connection and verify the server answers a ping."""

    client: MongoClient = MongoClient(
        uri or CONFIG.mongo_uri,
        serverSelectionTimeoutMS=timeout_ms if timeout_ms is not None else CONFIG.mongo_timeout_ms,
        tz_aware=True,
    )
    database_client = MongoDatabaseClient(client[db_name or CONFIG.mongo_db_name], client=client)
    try:
        database_client.ping()
    except PyMongoError:
        client.close()
        raise
    return database_client


__all__ = [
    "ASSETS_COLLECTION",
    "DatabaseClient",
    "MongoDatabaseClient",
    "TASKS_COLLECTION",
    "TASK_ASSET_FIELD",
    "USERS_COLLECTION",
    "connect_database",
]
