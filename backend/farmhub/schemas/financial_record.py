"""Pydantic schemas for financial records"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
import datetime as dt

from farmhub.models.financial_record import FinancialRecordType

from .common import not_null


class FinancialRecordBase(BaseModel):
    type: FinancialRecordType
    category: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    amount: float = Field(..., ge=0)
    date: dt.date
    crop_id: Optional[int] = Field(None, description="Related crop")

    model_config = ConfigDict(use_enum_values=True)


class FinancialRecordCreate(FinancialRecordBase):
    pass


class FinancialRecordUpdate(BaseModel):
    type: Optional[FinancialRecordType] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    amount: Optional[float] = Field(None, ge=0)
    date: Optional[dt.date] = None
    crop_id: Optional[int] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("type", "category", "amount", "date")
    @classmethod
    def required_columns_not_null(cls, v):
        return not_null(v)


class FinancialRecordResponse(FinancialRecordBase):
    id: int
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class FinancialSummary(BaseModel):
    total_expenses: float = 0
    total_revenue: float = 0
    profit_loss: float = Field(0, description="Revenue minus expenses")
    records: int = 0
