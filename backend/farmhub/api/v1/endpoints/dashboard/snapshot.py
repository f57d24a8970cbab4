"""
Dashboard snapshot endpoint
"""
from fastapi import APIRouter, Depends

from farmhub.api.auth import get_optional_user_context
from farmhub.core.context import UserContext
from farmhub.core.database import SessionLocal
from farmhub.schemas import DashboardResponse, DashboardStatsResponse, NotificationResponse
from farmhub.services.dashboard import DashboardSnapshot, RecordStore, SqlRecordStore, compute_snapshot

router = APIRouter()


def get_record_store() -> RecordStore:
    """Store used by the dashboard fan-out; every read opens its own session."""
    return SqlRecordStore(SessionLocal)


def _as_float(value):
    return None if value is None else float(value)


def snapshot_to_response(snapshot: DashboardSnapshot) -> DashboardResponse:
    return DashboardResponse(
        stats=DashboardStatsResponse(
            total_land=_as_float(snapshot.total_land),
            active_crops=snapshot.active_crops,
            upcoming_harvests=snapshot.upcoming_harvests,
            low_stock_items=snapshot.low_stock_items,
            maintenance_due=snapshot.maintenance_due,
            total_expenses=_as_float(snapshot.total_expenses),
            total_revenue=_as_float(snapshot.total_revenue),
            profit_loss=_as_float(snapshot.profit_loss),
        ),
        recent_activity=[NotificationResponse.model_validate(n) for n in snapshot.recent_activity],
        complete=snapshot.complete,
        failed_sources=list(snapshot.failed_sources),
    )


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    context: UserContext = Depends(get_optional_user_context),
    store: RecordStore = Depends(get_record_store),
):
    """
    Dashboard metrics for the caller.

    Without an Authorization header every metric is zero. A metric whose
    query failed is null and its source is listed in `failed_sources`.
    """
    snapshot = await compute_snapshot(context, store)
    return snapshot_to_response(snapshot)
