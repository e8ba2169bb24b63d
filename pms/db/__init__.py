"""
Database module for the PMS API.

This module provides:
- The MongoDB client wrapping the users, assets and tasks collections
- Helpers converting identifiers and BSON documents for JSON responses
"""

from .client import DatabaseClient, MongoDatabaseClient, connect_database
from .documents import DeleteResult, InsertResult, UpdateResult

__all__ = [
    "DatabaseClient",
    "MongoDatabaseClient",
    "connect_database",
    "DeleteResult",
    "InsertResult",
    "UpdateResult",
]
