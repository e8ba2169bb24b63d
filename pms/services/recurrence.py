"""Next-due-date derivation for recurring maintenance tasks."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


class TaskCycle(str, Enum):
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    YEARLY = "Yearly"


# relativedelta clamps to the last valid day of the target month,
# so Jan 31 + 1 month lands on Feb 28/29 instead of rolling into March.
CYCLE_INTERVALS: dict[TaskCycle, relativedelta] = {
    TaskCycle.MONTHLY: relativedelta(months=1),
    TaskCycle.QUARTERLY: relativedelta(months=3),
    TaskCycle.YEARLY: relativedelta(years=1),
}


def parse_cycle(value: Any) -> Optional[TaskCycle]:
    """Return the matching cycle, or ``None`` for absent and unknown tags."""

    if isinstance(value, TaskCycle):
        return value
    if not isinstance(value, str):
        return None
    try:
        return TaskCycle(value)
    except ValueError:
        return None


def parse_done_date(value: Any) -> Optional[datetime]:
    """Coerce ``lastDoneDate`` into a datetime.

    Accepts datetimes, dates (promoted to midnight), ISO-8601 strings and the
    looser formats understood by ``dateutil.parser.parse``.
    Returns ``None`` when the value is empty or cannot be parsed.
    """

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date_parser.isoparse(text)
    except ValueError:
        pass
    # e.g. "2024/01/31" or "Jan 31 2024"
    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError):
        return None


def compute_next_due_date(cycle: Any, last_done_date: Any) -> Optional[datetime]:
    """Advance ``last_done_date`` by one ``cycle`` interval.

    Returns ``None`` when either input is missing, the cycle is not one of
    ``Monthly``/``Quarterly``/``Yearly``, the date cannot be parsed, or the
    result would fall past ``datetime.max``.
    """

    resolved_cycle = parse_cycle(cycle)
    if resolved_cycle is None:
        return None

    done = parse_done_date(last_done_date)
    if done is None:
        return None

    try:
        return done + CYCLE_INTERVALS[resolved_cycle]
    except (ValueError, OverflowError):
        return None


__all__ = [
    "CYCLE_INTERVALS",
    "TaskCycle",
    "compute_next_due_date",
    "parse_cycle",
    "parse_done_date",
]
