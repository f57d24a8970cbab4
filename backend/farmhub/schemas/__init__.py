from .land_parcel import (
    LandParcelCreate,
    LandParcelUpdate,
    LandParcelResponse,
    LandParcelSummary,
)
from .crop import CropCreate, CropUpdate, CropResponse
from .inventory import InventoryItemCreate, InventoryItemUpdate, InventoryItemResponse
from .tool import ToolEquipmentCreate, ToolEquipmentUpdate, ToolEquipmentResponse
from .financial_record import (
    FinancialRecordCreate,
    FinancialRecordUpdate,
    FinancialRecordResponse,
    FinancialSummary,
)
from .notification import NotificationCreate, NotificationResponse, UnreadCountResponse
from .profile import UserProfileUpdate, UserProfileResponse, SignUpRequest, SignUpResponse
from .dashboard import DashboardStatsResponse, DashboardResponse
from .integrations import WeatherResponse, LocationResponse, LocationSearchResponse, ChatRequest, ChatResponse
