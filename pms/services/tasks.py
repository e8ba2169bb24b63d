"""Task service applying default fields and due-date scheduling."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from pms.db.client import DatabaseClient
from pms.db.documents import InsertResult, UpdateResult, coerce_reference
from pms.logger import log_warning
from pms.services.recurrence import compute_next_due_date

DEFAULT_TASK_STATUS = "pending"
ASSET_REFERENCE_FIELD = "assetId"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _has_value(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def _apply_schedule(fields: Dict[str, Any]) -> None:
    """Set ``nextDueDate`` on ``fields`` when both scheduling inputs are present."""

    cycle = fields.get("cycle")
    last_done = fields.get("lastDoneDate")
    if not (_has_value(cycle) and _has_value(last_done)):
        return

    next_due = compute_next_due_date(cycle, last_done)
    if next_due is None:
        log_warning("[tasks] next due date not scheduled", cycle=cycle, last_done_date=last_done)
        return
    fields["nextDueDate"] = next_due


def _normalize_reference(fields: Dict[str, Any]) -> None:
    if ASSET_REFERENCE_FIELD in fields:
        fields[ASSET_REFERENCE_FIELD] = coerce_reference(fields[ASSET_REFERENCE_FIELD])


def prepare_new_task(
    payload: Dict[str, Any],
    *,
    now: Optional[Callable[[], datetime]] = None,
) -> Dict[str, Any]:
    """Return the document to insert for a newly created task."""

    document = dict(payload)
    document.pop("_id", None)
    _normalize_reference(document)
    document["status"] = DEFAULT_TASK_STATUS
    document["createdAt"] = (now or _utcnow)()
    _apply_schedule(document)
    return document


def prepare_task_update(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Return the ``$set`` fields for a partial task update."""

    fields = dict(payload)
    fields.pop("_id", None)
    _normalize_reference(fields)
    _apply_schedule(fields)
    return fields


def list_tasks(db: DatabaseClient) -> List[Dict[str, Any]]:
    return db.list_tasks_with_assets()


def create_task(db: DatabaseClient, payload: Dict[str, Any]) -> InsertResult:
    return db.create_task(prepare_new_task(payload))


def update_task(db: DatabaseClient, task_id: str, payload: Dict[str, Any]) -> UpdateResult:
    return db.update_task(task_id, prepare_task_update(payload))


__all__ = [
    "ASSET_REFERENCE_FIELD",
    "DEFAULT_TASK_STATUS",
    "create_task",
    "list_tasks",
    "prepare_new_task",
    "prepare_task_update",
    "update_task",
]
