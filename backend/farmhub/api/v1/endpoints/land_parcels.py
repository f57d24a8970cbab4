"""Land parcel CRUD endpoints"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import List
from uuid import UUID

from farmhub.api.auth import get_current_auth_user_id
from farmhub.core.database import get_db
from farmhub.models import LandParcel
from farmhub.schemas import (
    LandParcelCreate,
    LandParcelUpdate,
    LandParcelResponse,
    LandParcelSummary,
)
from farmhub.utils.numbers import to_decimal

from .common import get_owned_or_404

router = APIRouter(prefix="/land-parcels", tags=["land"])


@router.get("/", response_model=List[LandParcelResponse])
def list_land_parcels(
    skip: int = 0,
    limit: int = 100,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    return (
        db.query(LandParcel)
        .filter(LandParcel.user_id == user_id)
        .order_by(LandParcel.created_at.desc(), LandParcel.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


@router.get("/summary", response_model=LandParcelSummary)
def land_parcels_summary(
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    """Number of parcels and total area"""
    count, total = (
        db.query(func.count(LandParcel.id), func.coalesce(func.sum(LandParcel.area), 0))
        .filter(LandParcel.user_id == user_id)
        .first()
    )
    return LandParcelSummary(parcels=count or 0, total_area=float(to_decimal(total)))


@router.get("/{parcel_id}", response_model=LandParcelResponse)
def get_land_parcel(
    parcel_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    return get_owned_or_404(db, LandParcel, parcel_id, user_id, "Land parcel not found")


@router.post("/", response_model=LandParcelResponse, status_code=status.HTTP_201_CREATED)
def create_land_parcel(
    data: LandParcelCreate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    db_obj = LandParcel(user_id=user_id, **data.model_dump())
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj


@router.put("/{parcel_id}", response_model=LandParcelResponse)
def update_land_parcel(
    parcel_id: int,
    update: LandParcelUpdate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, LandParcel, parcel_id, user_id, "Land parcel not found")
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(obj, field, value)
    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{parcel_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_land_parcel(
    parcel_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, LandParcel, parcel_id, user_id, "Land parcel not found")
    db.delete(obj)
    db.commit()
    return None
