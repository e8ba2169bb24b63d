"""Tests for BSON document helpers."""

from __future__ import annotations

from datetime import datetime

import pytest
from bson import ObjectId
from bson.errors import InvalidId

from pms.db.documents import coerce_reference, serialize_document, to_object_id


def test_serialize_document_stringifies_nested_identifiers() -> None:
    task_id, asset_id = ObjectId(), ObjectId()
    due = datetime(2024, 2, 29)

    rendered = serialize_document(
        {
            "_id": task_id,
            "nextDueDate": due,
            "asset": {"_id": asset_id, "name": "Boiler"},
            "history": [asset_id],
        }
    )

    assert rendered == {
        "_id": str(task_id),
        "nextDueDate": due,
        "asset": {"_id": str(asset_id), "name": "Boiler"},
        "history": [str(asset_id)],
    }


def test_serialize_document_passes_none_through() -> None:
    assert serialize_document(None) is None


def test_to_object_id_rejects_malformed_tokens() -> None:
    with pytest.raises(InvalidId):
        to_object_id("not-an-id")


def test_coerce_reference_only_converts_valid_tokens() -> None:
    token = "65a1f0c2e4b0a1b2c3d4e5f6"

    assert coerce_reference(token) == ObjectId(token)
    assert coerce_reference("pump-3") == "pump-3"
    assert coerce_reference(None) is None
