"""Pydantic schemas for tools and equipment"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date, datetime

from farmhub.models.tool import ToolType, ToolCondition

from .common import not_null


class ToolEquipmentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    type: ToolType = ToolType.TOOL
    purchase_date: Optional[date] = None
    purchase_cost: float = Field(0, ge=0)
    condition: ToolCondition = ToolCondition.GOOD
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    notes: Optional[str] = None

    model_config = ConfigDict(use_enum_values=True)


class ToolEquipmentCreate(ToolEquipmentBase):
    pass


class ToolEquipmentUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    type: Optional[ToolType] = None
    purchase_date: Optional[date] = None
    purchase_cost: Optional[float] = Field(None, ge=0)
    condition: Optional[ToolCondition] = None
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    notes: Optional[str] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("name", "type", "purchase_cost", "condition")
    @classmethod
    def required_columns_not_null(cls, v):
        return not_null(v)


class ToolEquipmentResponse(ToolEquipmentBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    maintenance_due: bool = Field(False, description="Next maintenance within 30 days or overdue")

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
