"""Dashboard Module - Router aggregation"""
from fastapi import APIRouter

from .snapshot import router as snapshot_router
from .report import router as report_router

router = APIRouter(tags=["dashboard"])

router.include_router(snapshot_router, prefix="/dashboard")
router.include_router(report_router, prefix="/dashboard")
