"""
Inventory model - seeds, fertilizers, pesticides and supplies
"""
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, Uuid
from sqlalchemy.sql import func
import enum

from farmhub.core.database import Base


class InventoryType(str, enum.Enum):
    SEED = "seed"
    FERTILIZER = "fertilizer"
    PESTICIDE = "pesticide"
    SUPPLY = "supply"
    OTHER = "other"


class InventoryItem(Base):
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, nullable=False, index=True)
    name = Column(String(200), nullable=False)
    type = Column(String(20), nullable=False, default=InventoryType.OTHER.value)
    category = Column(String(100))
    quantity = Column(Numeric(12, 2), nullable=False, default=0)
    unit = Column(String(20), nullable=False, default="kg")
    supplier = Column(String(200))
    purchase_date = Column(Date, nullable=True)
    expiry_date = Column(Date, nullable=True)
    # Low stock when quantity <= alert_level
    alert_level = Column(Numeric(12, 2), nullable=False, default=0)
    cost_per_unit = Column(Numeric(12, 2), nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
