"""FastAPI dependencies shared across the public API."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from ..db import DatabaseClient


def get_database(request: Request) -> DatabaseClient:
    """Return the database client opened during application startup."""

    database = getattr(request.app.state, "database", None)
    if database is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database client is not configured",
        )
    return database
