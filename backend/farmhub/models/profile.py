"""
UserProfile model - one row per Supabase Auth user
"""
from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.sql import func
import enum

from farmhub.core.database import Base


class UserRole(str, enum.Enum):
    FARMER = "farmer"
    MANAGER = "manager"
    ADMIN = "admin"


class UserProfile(Base):
    __tablename__ = "user_profiles"

    # Same UUID as the Supabase auth user
    id = Column(Uuid, primary_key=True)
    full_name = Column(String(200), nullable=False, default="")
    phone = Column(String(50), nullable=True)
    farm_name = Column(String(200), nullable=True)
    location = Column(String(200), nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.FARMER.value)
    avatar_url = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
