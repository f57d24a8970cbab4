"""
Notification model - alerts shown on the dashboard and notifications page
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, Uuid
from sqlalchemy.sql import func
import enum

from farmhub.core.database import Base


class NotificationType(str, enum.Enum):
    HARVEST = "harvest"
    MAINTENANCE = "maintenance"
    INVENTORY = "inventory"
    FINANCIAL = "financial"
    GENERAL = "general"


class NotificationStatus(str, enum.Enum):
    UNREAD = "unread"
    READ = "read"


class NotificationPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(20), nullable=False, default=NotificationType.GENERAL.value)
    status = Column(String(20), nullable=False, default=NotificationStatus.UNREAD.value, index=True)
    priority = Column(String(20), nullable=False, default=NotificationPriority.MEDIUM.value)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
