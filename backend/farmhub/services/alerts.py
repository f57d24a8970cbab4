"""
Alert predicates shared by the dashboard counters and the per-record badges.

All three take a single record (ORM object or mapping) and a reference day.
"""
import logging
from datetime import date, datetime, timedelta
from typing import Any, Optional, Union

from farmhub.utils.numbers import to_decimal

logger = logging.getLogger(__name__)

ALERT_WINDOW_DAYS = 30

DateLike = Union[date, datetime, str, None]


def _field(record: Any, name: str) -> Any:
    if record is None:
        return None
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def as_date(value: DateLike) -> Optional[date]:
    """Reduce a date, datetime or ISO string to a calendar date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        logger.warning(f"Unparseable date {value!r} ignored")
        return None


def _today(now: DateLike) -> date:
    return as_date(now) or date.today()


def window_end(now: DateLike = None) -> date:
    return _today(now) + timedelta(days=ALERT_WINDOW_DAYS)


def is_low_stock(item: Any) -> bool:
    return to_decimal(_field(item, "quantity")) <= to_decimal(_field(item, "alert_level"))


def is_maintenance_due(tool: Any, now: DateLike = None) -> bool:
    """Next maintenance within the window. Overdue dates count as due."""
    next_date = as_date(_field(tool, "next_maintenance_date"))
    if next_date is None:
        return False
    return next_date <= window_end(now)


def is_upcoming_harvest(crop: Any, now: DateLike = None) -> bool:
    harvest_date = as_date(_field(crop, "expected_harvest_date"))
    if harvest_date is None:
        return False
    today = _today(now)
    return today <= harvest_date <= window_end(today)
