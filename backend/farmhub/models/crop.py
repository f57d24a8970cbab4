"""
Crop model - plantings, optionally linked to a land parcel
"""
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum

from farmhub.core.database import Base


class CropStatus(str, enum.Enum):
    PLANNED = "planned"
    PLANTED = "planted"
    GROWING = "growing"
    HARVESTED = "harvested"
    FAILED = "failed"


# Crops counted as "active" on the dashboard
ACTIVE_CROP_STATUSES = (CropStatus.PLANTED.value, CropStatus.GROWING.value)


class Crop(Base):
    __tablename__ = "crops"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, nullable=False, index=True)
    land_parcel_id = Column(Integer, ForeignKey("land_parcels.id", ondelete="SET NULL"), nullable=True, index=True)
    name = Column(String(150), nullable=False)
    variety = Column(String(150))
    area_planted = Column(Numeric(10, 2), nullable=False, default=0)
    planted_on = Column(Date, nullable=True)
    expected_harvest_date = Column(Date, nullable=True, index=True)
    actual_harvest_date = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default=CropStatus.PLANNED.value, index=True)
    yield_expected = Column(Numeric(12, 2), nullable=False, default=0)
    yield_actual = Column(Numeric(12, 2), nullable=True)
    notes = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    land_parcel = relationship("LandParcel", back_populates="crops")
    financial_records = relationship("FinancialRecord", back_populates="crop")
