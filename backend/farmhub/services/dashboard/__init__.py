"""Dashboard aggregation service"""
from .aggregator import DashboardSnapshot, compute_snapshot
from .record_store import RECENT_ACTIVITY_LIMIT, RecordStore, SqlRecordStore

__all__ = [
    "DashboardSnapshot",
    "compute_snapshot",
    "RecordStore",
    "SqlRecordStore",
    "RECENT_ACTIVITY_LIMIT",
]
