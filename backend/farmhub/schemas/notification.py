"""Pydantic schemas for notifications"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from farmhub.models.notification import NotificationType, NotificationStatus, NotificationPriority


class NotificationBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    type: NotificationType = NotificationType.GENERAL
    priority: NotificationPriority = NotificationPriority.MEDIUM

    model_config = ConfigDict(use_enum_values=True)


class NotificationCreate(NotificationBase):
    pass


class NotificationResponse(NotificationBase):
    id: int
    status: NotificationStatus
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class UnreadCountResponse(BaseModel):
    unread: int = 0
