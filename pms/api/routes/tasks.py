"""Maintenance task endpoints.

Creation stamps ``status``/``createdAt`` and both creation and updates derive
``nextDueDate`` from ``cycle`` and ``lastDoneDate`` (see
:mod:`pms.services.recurrence`).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status

from pms.api.dependencies import get_database
from pms.api.schemas import DeleteResponse, InsertResponse, UpdateResponse
from pms.db import DatabaseClient
from pms.services import tasks as task_service

router = APIRouter()


@router.get("/tasks", response_model=List[Dict[str, Any]], status_code=status.HTTP_200_OK)
def list_tasks(db: DatabaseClient = Depends(get_database)) -> List[Dict[str, Any]]:
    """Return every task with its referenced asset embedded under ``asset``."""

    return task_service.list_tasks(db)


@router.get("/tasks/{task_id}", response_model=Optional[Dict[str, Any]])
def get_task(task_id: str, db: DatabaseClient = Depends(get_database)) -> Optional[Dict[str, Any]]:
    return db.get_task(task_id)


@router.post("/tasks", response_model=InsertResponse)
def create_task(
    payload: Dict[str, Any] = Body(...),
    db: DatabaseClient = Depends(get_database),
) -> InsertResponse:
    return InsertResponse.from_result(task_service.create_task(db, payload))


@router.patch("/tasks/{task_id}", response_model=UpdateResponse)
def update_task(
    task_id: str,
    payload: Dict[str, Any] = Body(...),
    db: DatabaseClient = Depends(get_database),
) -> UpdateResponse:
    return UpdateResponse.from_result(task_service.update_task(db, task_id, payload))


@router.delete("/tasks/{task_id}", response_model=DeleteResponse)
def delete_task(task_id: str, db: DatabaseClient = Depends(get_database)) -> DeleteResponse:
    return DeleteResponse.from_result(db.delete_task(task_id))
