"""Pydantic schemas for inventory items"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date, datetime

from farmhub.models.inventory import InventoryType

from .common import not_null


class InventoryItemBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    type: InventoryType = InventoryType.OTHER
    category: Optional[str] = Field(None, max_length=100)
    quantity: float = Field(0, ge=0)
    unit: str = Field("kg", max_length=20)
    supplier: Optional[str] = Field(None, max_length=200)
    purchase_date: Optional[date] = None
    expiry_date: Optional[date] = None
    alert_level: float = Field(0, ge=0, description="Low stock threshold")
    cost_per_unit: float = Field(0, ge=0)

    model_config = ConfigDict(use_enum_values=True)


class InventoryItemCreate(InventoryItemBase):
    pass


class InventoryItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    type: Optional[InventoryType] = None
    category: Optional[str] = Field(None, max_length=100)
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=20)
    supplier: Optional[str] = Field(None, max_length=200)
    purchase_date: Optional[date] = None
    expiry_date: Optional[date] = None
    alert_level: Optional[float] = Field(None, ge=0)
    cost_per_unit: Optional[float] = Field(None, ge=0)

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("name", "type", "quantity", "unit", "alert_level", "cost_per_unit")
    @classmethod
    def required_columns_not_null(cls, v):
        return not_null(v)


class InventoryItemResponse(InventoryItemBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    is_low_stock: bool = False

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
