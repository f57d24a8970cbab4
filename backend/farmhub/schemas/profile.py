"""Pydantic schemas for user profiles and sign-up"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from farmhub.models.profile import UserRole

from .common import not_null


class UserProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=50)
    farm_name: Optional[str] = Field(None, max_length=200)
    location: Optional[str] = Field(None, max_length=200)
    avatar_url: Optional[str] = Field(None, max_length=500)

    @field_validator("full_name")
    @classmethod
    def required_columns_not_null(cls, v):
        return not_null(v)


class UserProfileResponse(BaseModel):
    id: UUID
    full_name: str = ""
    phone: Optional[str] = None
    farm_name: Optional[str] = None
    location: Optional[str] = None
    role: UserRole = UserRole.FARMER
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class SignUpRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1, max_length=200)
    farm_name: Optional[str] = Field(None, max_length=200)
    location: Optional[str] = Field(None, max_length=200)


class SignUpResponse(BaseModel):
    profile: UserProfileResponse
    message: str
