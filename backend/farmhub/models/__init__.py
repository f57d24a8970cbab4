"""
FarmHub models package
"""
from .profile import UserProfile, UserRole
from .land_parcel import LandParcel
from .crop import Crop, CropStatus, ACTIVE_CROP_STATUSES
from .inventory import InventoryItem, InventoryType
from .tool import ToolEquipment, ToolType, ToolCondition
from .financial_record import FinancialRecord, FinancialRecordType
from .notification import (
    Notification,
    NotificationType,
    NotificationStatus,
    NotificationPriority,
)

__all__ = [
    "UserProfile",
    "UserRole",
    "LandParcel",
    "Crop",
    "CropStatus",
    "ACTIVE_CROP_STATUSES",
    "InventoryItem",
    "InventoryType",
    "ToolEquipment",
    "ToolType",
    "ToolCondition",
    "FinancialRecord",
    "FinancialRecordType",
    "Notification",
    "NotificationType",
    "NotificationStatus",
    "NotificationPriority",
]
