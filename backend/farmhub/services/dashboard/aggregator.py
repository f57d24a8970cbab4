"""
Dashboard aggregation

Runs the independent per-user reads concurrently, reduces each result set to
its metrics and assembles one immutable snapshot.

A failed read never turns into a silent zero: the metrics that depend on it
are None and the source name is listed in ``failed_sources``.
"""
import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from farmhub.core.context import UserContext
from farmhub.services.alerts import (
    DateLike,
    as_date,
    is_low_stock,
    is_maintenance_due,
    is_upcoming_harvest,
)
from farmhub.utils.numbers import ZERO, sum_decimal

from .record_store import RECENT_ACTIVITY_LIMIT, RecordStore

logger = logging.getLogger(__name__)

LAND_PARCELS = "land_parcels"
ACTIVE_CROPS = "active_crops"
INVENTORY = "inventory"
TOOLS = "tools"
EXPENSES = "expenses"
REVENUE = "revenue"
NOTIFICATIONS = "notifications"


@dataclass(frozen=True)
class DashboardSnapshot:
    total_land: Optional[Decimal] = ZERO
    active_crops: Optional[int] = 0
    upcoming_harvests: Optional[int] = 0
    low_stock_items: Optional[int] = 0
    maintenance_due: Optional[int] = 0
    total_expenses: Optional[Decimal] = ZERO
    total_revenue: Optional[Decimal] = ZERO
    profit_loss: Optional[Decimal] = ZERO
    recent_activity: Tuple[Any, ...] = ()
    failed_sources: Tuple[str, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.failed_sources

    @classmethod
    def empty(cls) -> "DashboardSnapshot":
        """Snapshot returned when there is no authenticated user"""
        return cls()


def _value(row: Any, name: str) -> Any:
    if isinstance(row, dict):
        return row.get(name)
    return getattr(row, name, None)


def total_area(parcels: Iterable[Any]) -> Decimal:
    return sum_decimal(_value(p, "area") for p in parcels)


def total_amount(records: Iterable[Any]) -> Decimal:
    return sum_decimal(_value(r, "amount") for r in records)


def count_upcoming_harvests(crops: Iterable[Any], today: date) -> int:
    return sum(1 for crop in crops if is_upcoming_harvest(crop, today))


def count_low_stock(items: Iterable[Any]) -> int:
    return sum(1 for item in items if is_low_stock(item))


def count_maintenance_due(tools: Iterable[Any], today: date) -> int:
    return sum(1 for tool in tools if is_maintenance_due(tool, today))


def newest_first(notifications: Iterable[Any], limit: int = RECENT_ACTIVITY_LIMIT) -> Tuple[Any, ...]:
    # Stable sort: rows without created_at keep the store order at the end
    ordered = sorted(
        notifications,
        key=lambda n: (_value(n, "created_at") is not None, _value(n, "created_at") or datetime.min),
        reverse=True,
    )
    return tuple(ordered[:limit])


async def _fan_out(store: RecordStore, context: UserContext) -> Tuple[Dict[str, List[Any]], List[str]]:
    reads = {
        LAND_PARCELS: store.land_parcel_areas,
        ACTIVE_CROPS: store.active_crops,
        INVENTORY: store.inventory_items,
        TOOLS: store.tools,
        EXPENSES: store.expense_amounts,
        REVENUE: store.revenue_amounts,
        NOTIFICATIONS: store.recent_notifications,
    }
    results = await asyncio.gather(
        *(asyncio.to_thread(read, context.user_id) for read in reads.values()),
        return_exceptions=True,
    )

    fetched: Dict[str, List[Any]] = {}
    failed: List[str] = []
    for name, result in zip(reads, results):
        if isinstance(result, Exception):
            logger.error(
                f"Dashboard read '{name}' failed for user {context.user_id}: {result}",
                exc_info=result,
            )
            failed.append(name)
        elif isinstance(result, BaseException):
            raise result
        else:
            fetched[name] = list(result or [])
    return fetched, failed


async def compute_snapshot(
    context: Optional[UserContext],
    store: RecordStore,
    now: DateLike = None,
) -> DashboardSnapshot:
    """Compute the dashboard snapshot for the user in ``context``.

    Without a user id no query is issued and the empty snapshot is returned.
    """
    if context is None or not context.is_authenticated:
        return DashboardSnapshot.empty()

    today = as_date(now) or date.today()
    fetched, failed = await _fan_out(store, context)

    def metric(source, reducer):
        if source in fetched:
            return reducer(fetched[source])
        return None

    total_expenses = metric(EXPENSES, total_amount)
    total_revenue = metric(REVENUE, total_amount)
    if total_expenses is not None and total_revenue is not None:
        profit_loss = total_revenue - total_expenses
    else:
        profit_loss = None

    if failed:
        logger.warning(f"Dashboard for user {context.user_id} is incomplete: {', '.join(failed)}")

    return DashboardSnapshot(
        total_land=metric(LAND_PARCELS, total_area),
        active_crops=metric(ACTIVE_CROPS, len),
        upcoming_harvests=metric(ACTIVE_CROPS, lambda crops: count_upcoming_harvests(crops, today)),
        low_stock_items=metric(INVENTORY, count_low_stock),
        maintenance_due=metric(TOOLS, lambda tools: count_maintenance_due(tools, today)),
        total_expenses=total_expenses,
        total_revenue=total_revenue,
        profit_loss=profit_loss,
        recent_activity=newest_first(fetched.get(NOTIFICATIONS, [])),
        failed_sources=tuple(failed),
    )
