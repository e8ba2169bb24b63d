"""User endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Body, Depends, status

from pms.api.dependencies import get_database
from pms.api.schemas import DeleteResponse, InsertResponse, MessageResponse, UpdateResponse
from pms.db import DatabaseClient
from pms.services.users import register_user

router = APIRouter()


@router.post("/users", response_model=Union[InsertResponse, MessageResponse])
def create_user(
    payload: Dict[str, Any] = Body(...),
    db: DatabaseClient = Depends(get_database),
) -> Union[InsertResponse, MessageResponse]:
    """Register a user; an already-registered email yields a message body, not an error."""

    result = register_user(db, payload)
    if isinstance(result, dict):
        return MessageResponse(**result)
    return InsertResponse.from_result(result)


@router.get("/users", response_model=List[Dict[str, Any]], status_code=status.HTTP_200_OK)
def list_users(db: DatabaseClient = Depends(get_database)) -> List[Dict[str, Any]]:
    return db.list_users()


@router.get("/users/{email}", response_model=Optional[Dict[str, Any]])
def get_user(email: str, db: DatabaseClient = Depends(get_database)) -> Optional[Dict[str, Any]]:
    """Look a user up by email address."""

    return db.get_user_by_email(email)


@router.patch("/users/{user_id}", response_model=UpdateResponse)
def update_user(
    user_id: str,
    payload: Dict[str, Any] = Body(...),
    db: DatabaseClient = Depends(get_database),
) -> UpdateResponse:
    return UpdateResponse.from_result(db.update_user(user_id, payload))


@router.delete("/users/{user_id}", response_model=DeleteResponse)
def delete_user(user_id: str, db: DatabaseClient = Depends(get_database)) -> DeleteResponse:
    return DeleteResponse.from_result(db.delete_user(user_id))
