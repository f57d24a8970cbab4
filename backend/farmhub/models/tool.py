"""
ToolEquipment model - tools, machinery and vehicles with maintenance dates
"""
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, Text, Uuid
from sqlalchemy.sql import func
import enum

from farmhub.core.database import Base


class ToolType(str, enum.Enum):
    TOOL = "tool"
    MACHINERY = "machinery"
    VEHICLE = "vehicle"
    OTHER = "other"


class ToolCondition(str, enum.Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class ToolEquipment(Base):
    __tablename__ = "tools_equipment"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, nullable=False, index=True)
    name = Column(String(200), nullable=False)
    type = Column(String(20), nullable=False, default=ToolType.TOOL.value)
    purchase_date = Column(Date, nullable=True)
    purchase_cost = Column(Numeric(12, 2), nullable=False, default=0)
    condition = Column(String(20), nullable=False, default=ToolCondition.GOOD.value)
    last_maintenance_date = Column(Date, nullable=True)
    next_maintenance_date = Column(Date, nullable=True, index=True)
    notes = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
