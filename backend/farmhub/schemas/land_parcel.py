from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

from .common import not_null


class LandParcelBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    area: float = Field(..., ge=0, description="Area in acres")
    soil_type: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=200)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    notes: Optional[str] = None


class LandParcelCreate(LandParcelBase):
    pass


class LandParcelUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    area: Optional[float] = Field(None, ge=0)
    soil_type: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=200)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    notes: Optional[str] = None

    @field_validator("name", "area")
    @classmethod
    def required_columns_not_null(cls, v):
        return not_null(v)


class LandParcelResponse(LandParcelBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LandParcelSummary(BaseModel):
    parcels: int = 0
    total_area: float = Field(0, description="Total area in acres")
