from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum

from farmhub.core.database import Base


class FinancialRecordType(str, enum.Enum):
    EXPENSE = "expense"
    REVENUE = "revenue"


class FinancialRecord(Base):
    __tablename__ = "financial_records"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, nullable=False, index=True)
    type = Column(String(20), nullable=False, index=True)
    category = Column(String(100), nullable=False)
    description = Column(Text)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    crop_id = Column(Integer, ForeignKey("crops.id", ondelete="SET NULL"), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    crop = relationship("Crop", back_populates="financial_records")
