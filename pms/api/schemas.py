"""Pydantic schemas for the public API."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _WriteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True

    @classmethod
    def from_result(cls, result: Any):
        """Build the response from a ``pms.db.documents`` result dataclass."""
        return cls.model_validate(asdict(result))


class InsertResponse(_WriteResponse):
    inserted_id: str = Field(alias="insertedId")


class UpdateResponse(_WriteResponse):
    matched_count: int = Field(default=0, alias="matchedCount")
    modified_count: int = Field(default=0, alias="modifiedCount")


class DeleteResponse(_WriteResponse):
    deleted_count: int = Field(default=0, alias="deletedCount")


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
