"""User registration with best-effort email uniqueness."""

from __future__ import annotations

from typing import Any, Dict, Union

from pymongo.errors import DuplicateKeyError

from pms.db.client import DatabaseClient
from pms.db.documents import InsertResult
from pms.logger import log

USER_EXISTS_MESSAGE = "User already exists"


def register_user(db: DatabaseClient, payload: Dict[str, Any]) -> Union[InsertResult, Dict[str, str]]:
    """Insert ``payload`` unless a user with the same email is already stored.

    The lookup and the insert are separate round-trips; concurrent requests are
    caught by the unique email index when it exists.
    """

    email = payload.get("email")
    if db.get_user_by_email(email):
        log("[users] rejected duplicate registration", email=email)
        return {"message": USER_EXISTS_MESSAGE}

    try:
        return db.create_user(payload)
    except DuplicateKeyError:
        log("[users] unique index rejected duplicate registration", email=email)
        return {"message": USER_EXISTS_MESSAGE}


__all__ = ["USER_EXISTS_MESSAGE", "register_user"]
