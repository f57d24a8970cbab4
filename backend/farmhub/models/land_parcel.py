from sqlalchemy import Column, Integer, String, Numeric, Float, DateTime, Text, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from farmhub.core.database import Base


class LandParcel(Base):
    __tablename__ = "land_parcels"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, nullable=False, index=True)
    name = Column(String(150), nullable=False)
    area = Column(Numeric(10, 2), nullable=False, default=0)  # acres
    soil_type = Column(String(100))
    location = Column(String(200))
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    notes = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Deleting a parcel detaches its crops (land_parcel_id set to NULL)
    crops = relationship("Crop", back_populates="land_parcel")
