"""Asset collection endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status

from pms.api.dependencies import get_database
from pms.api.schemas import DeleteResponse, InsertResponse, UpdateResponse
from pms.db import DatabaseClient

router = APIRouter()


@router.get("/assets", response_model=List[Dict[str, Any]], status_code=status.HTTP_200_OK)
def list_assets(db: DatabaseClient = Depends(get_database)) -> List[Dict[str, Any]]:
    """Return every stored asset."""

    return db.list_assets()


@router.get("/assets/{asset_id}", response_model=Optional[Dict[str, Any]])
def get_asset(asset_id: str, db: DatabaseClient = Depends(get_database)) -> Optional[Dict[str, Any]]:
    return db.get_asset(asset_id)


@router.post("/assets", response_model=InsertResponse)
def create_asset(
    payload: Dict[str, Any] = Body(...),
    db: DatabaseClient = Depends(get_database),
) -> InsertResponse:
    return InsertResponse.from_result(db.create_asset(payload))


@router.patch("/assets/{asset_id}", response_model=UpdateResponse)
def update_asset(
    asset_id: str,
    payload: Dict[str, Any] = Body(...),
    db: DatabaseClient = Depends(get_database),
) -> UpdateResponse:
    """Merge the supplied fields into the asset."""

    return UpdateResponse.from_result(db.update_asset(asset_id, payload))


@router.delete("/assets/{asset_id}", response_model=DeleteResponse)
def delete_asset(asset_id: str, db: DatabaseClient = Depends(get_database)) -> DeleteResponse:
    return DeleteResponse.from_result(db.delete_asset(asset_id))
