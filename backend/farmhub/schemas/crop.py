"""Pydantic schemas for crops"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date, datetime

from farmhub.models.crop import CropStatus

from .common import not_null


class CropBase(BaseModel):
    land_parcel_id: Optional[int] = Field(None, description="Land parcel the crop is planted on")
    name: str = Field(..., min_length=1, max_length=150)
    variety: Optional[str] = Field(None, max_length=150)
    area_planted: float = Field(0, ge=0, description="Planted area in acres")
    planted_on: Optional[date] = None
    expected_harvest_date: Optional[date] = None
    actual_harvest_date: Optional[date] = None
    status: CropStatus = CropStatus.PLANNED
    yield_expected: float = Field(0, ge=0)
    yield_actual: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None

    model_config = ConfigDict(use_enum_values=True)


class CropCreate(CropBase):
    pass


class CropUpdate(BaseModel):
    land_parcel_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    variety: Optional[str] = Field(None, max_length=150)
    area_planted: Optional[float] = Field(None, ge=0)
    planted_on: Optional[date] = None
    expected_harvest_date: Optional[date] = None
    actual_harvest_date: Optional[date] = None
    status: Optional[CropStatus] = None
    yield_expected: Optional[float] = Field(None, ge=0)
    yield_actual: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("name", "area_planted", "status", "yield_expected")
    @classmethod
    def required_columns_not_null(cls, v):
        return not_null(v)


class CropResponse(CropBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    upcoming_harvest: bool = Field(False, description="Expected harvest within the next 30 days")

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
