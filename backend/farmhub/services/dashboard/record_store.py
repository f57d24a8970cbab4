"""
Read side of the record store used by the dashboard aggregator.

Every method is a single read scoped to one user, and opens its own session so
the aggregator can run them concurrently in worker threads.
"""
from typing import Any, Callable, List, Protocol
from uuid import UUID

from sqlalchemy.orm import Session

from farmhub.models import (
    ACTIVE_CROP_STATUSES,
    Crop,
    FinancialRecord,
    FinancialRecordType,
    InventoryItem,
    LandParcel,
    Notification,
    ToolEquipment,
)

RECENT_ACTIVITY_LIMIT = 5


class RecordStore(Protocol):
    def land_parcel_areas(self, user_id: UUID) -> List[Any]: ...

    def active_crops(self, user_id: UUID) -> List[Any]: ...

    def inventory_items(self, user_id: UUID) -> List[Any]: ...

    def tools(self, user_id: UUID) -> List[Any]: ...

    def expense_amounts(self, user_id: UUID) -> List[Any]: ...

    def revenue_amounts(self, user_id: UUID) -> List[Any]: ...

    def recent_notifications(self, user_id: UUID, limit: int = RECENT_ACTIVITY_LIMIT) -> List[Any]: ...


class SqlRecordStore:
    """RecordStore backed by SQLAlchemy sessions"""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def land_parcel_areas(self, user_id: UUID) -> List[Any]:
        with self._session_factory() as db:
            return db.query(LandParcel.area).filter(LandParcel.user_id == user_id).all()

    def active_crops(self, user_id: UUID) -> List[Any]:
        with self._session_factory() as db:
            return (
                db.query(Crop)
                .filter(Crop.user_id == user_id, Crop.status.in_(ACTIVE_CROP_STATUSES))
                .all()
            )

    def inventory_items(self, user_id: UUID) -> List[Any]:
        with self._session_factory() as db:
            return db.query(InventoryItem).filter(InventoryItem.user_id == user_id).all()

    def tools(self, user_id: UUID) -> List[Any]:
        with self._session_factory() as db:
            return db.query(ToolEquipment).filter(ToolEquipment.user_id == user_id).all()

    def _amounts(self, user_id: UUID, record_type: FinancialRecordType) -> List[Any]:
        with self._session_factory() as db:
            return (
                db.query(FinancialRecord.amount)
                .filter(
                    FinancialRecord.user_id == user_id,
                    FinancialRecord.type == record_type.value,
                )
                .all()
            )

    def expense_amounts(self, user_id: UUID) -> List[Any]:
        return self._amounts(user_id, FinancialRecordType.EXPENSE)

    def revenue_amounts(self, user_id: UUID) -> List[Any]:
        return self._amounts(user_id, FinancialRecordType.REVENUE)

    def recent_notifications(self, user_id: UUID, limit: int = RECENT_ACTIVITY_LIMIT) -> List[Any]:
        with self._session_factory() as db:
            return (
                db.query(Notification)
                .filter(Notification.user_id == user_id)
                .order_by(Notification.created_at.desc(), Notification.id.desc())
                .limit(limit)
                .all()
            )
