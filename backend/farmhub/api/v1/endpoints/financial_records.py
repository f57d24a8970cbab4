"""Financial records endpoints: expenses, revenue and profit/loss"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from farmhub.api.auth import get_current_auth_user_id
from farmhub.core.database import get_db
from farmhub.models import Crop, FinancialRecord, FinancialRecordType
from farmhub.schemas import (
    FinancialRecordCreate,
    FinancialRecordUpdate,
    FinancialRecordResponse,
    FinancialSummary,
)
from farmhub.services.dashboard.aggregator import total_amount

from .common import get_owned_or_404

router = APIRouter(prefix="/financial-records", tags=["finance"])


def _check_crop(db: Session, crop_id: Optional[int], user_id: UUID) -> None:
    if crop_id is None:
        return
    exists = db.query(Crop.id).filter(Crop.id == crop_id, Crop.user_id == user_id).first()
    if not exists:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Crop not found")


@router.get("/", response_model=List[FinancialRecordResponse])
def list_financial_records(
    record_type: Optional[FinancialRecordType] = Query(None, alias="type"),
    skip: int = 0,
    limit: int = 200,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    q = db.query(FinancialRecord).filter(FinancialRecord.user_id == user_id)
    if record_type:
        q = q.filter(FinancialRecord.type == record_type.value)
    return q.order_by(FinancialRecord.date.desc(), FinancialRecord.id.desc()).offset(skip).limit(limit).all()


@router.get("/summary", response_model=FinancialSummary)
def financial_summary(
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    """Totals computed with the same reductions used by the dashboard"""
    records = (
        db.query(FinancialRecord.type, FinancialRecord.amount)
        .filter(FinancialRecord.user_id == user_id)
        .all()
    )
    expenses = total_amount(r for r in records if r.type == FinancialRecordType.EXPENSE.value)
    revenue = total_amount(r for r in records if r.type == FinancialRecordType.REVENUE.value)
    return FinancialSummary(
        total_expenses=float(expenses),
        total_revenue=float(revenue),
        profit_loss=float(revenue - expenses),
        records=len(records),
    )


@router.get("/{record_id}", response_model=FinancialRecordResponse)
def get_financial_record(
    record_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    return get_owned_or_404(db, FinancialRecord, record_id, user_id, "Financial record not found")


@router.post("/", response_model=FinancialRecordResponse, status_code=status.HTTP_201_CREATED)
def create_financial_record(
    data: FinancialRecordCreate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    _check_crop(db, data.crop_id, user_id)
    obj = FinancialRecord(user_id=user_id, **data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@router.put("/{record_id}", response_model=FinancialRecordResponse)
def update_financial_record(
    record_id: int,
    update: FinancialRecordUpdate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, FinancialRecord, record_id, user_id, "Financial record not found")
    update_data = update.model_dump(exclude_unset=True)
    if "crop_id" in update_data:
        _check_crop(db, update_data["crop_id"], user_id)
    for field, value in update_data.items():
        setattr(obj, field, value)
    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_financial_record(
    record_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, FinancialRecord, record_id, user_id, "Financial record not found")
    db.delete(obj)
    db.commit()
    return None
