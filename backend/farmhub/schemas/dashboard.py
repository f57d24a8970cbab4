"""Pydantic schemas for the dashboard snapshot"""
from pydantic import BaseModel, Field
from typing import List, Optional

from .notification import NotificationResponse


class DashboardStatsResponse(BaseModel):
    """Dashboard metrics. A null metric means its source query failed."""
    total_land: Optional[float] = Field(None, description="Total land area in acres")
    active_crops: Optional[int] = None
    upcoming_harvests: Optional[int] = Field(None, description="Active crops to harvest in the next 30 days")
    low_stock_items: Optional[int] = None
    maintenance_due: Optional[int] = None
    total_expenses: Optional[float] = None
    total_revenue: Optional[float] = None
    profit_loss: Optional[float] = None


class DashboardResponse(BaseModel):
    stats: DashboardStatsResponse
    recent_activity: List[NotificationResponse] = Field(default_factory=list)
    complete: bool = True
    failed_sources: List[str] = Field(default_factory=list)
