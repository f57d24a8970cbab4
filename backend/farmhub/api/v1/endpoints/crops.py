"""Crop CRUD endpoints"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
from datetime import date

from farmhub.api.auth import get_current_auth_user_id
from farmhub.core.database import get_db
from farmhub.models import Crop, CropStatus, LandParcel
from farmhub.schemas import CropCreate, CropUpdate, CropResponse
from farmhub.services.alerts import is_upcoming_harvest

from .common import get_owned_or_404

router = APIRouter(prefix="/crops", tags=["crops"])


def _serialize(crop: Crop, today: Optional[date] = None) -> CropResponse:
    response = CropResponse.model_validate(crop)
    response.upcoming_harvest = is_upcoming_harvest(crop, today)
    return response


def _check_parcel(db: Session, land_parcel_id: Optional[int], user_id: UUID) -> None:
    if land_parcel_id is None:
        return
    exists = (
        db.query(LandParcel.id)
        .filter(LandParcel.id == land_parcel_id, LandParcel.user_id == user_id)
        .first()
    )
    if not exists:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Land parcel not found")


@router.get("/", response_model=List[CropResponse])
def list_crops(
    status_filter: Optional[CropStatus] = Query(None, alias="status"),
    land_parcel_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    q = db.query(Crop).filter(Crop.user_id == user_id)
    if status_filter:
        q = q.filter(Crop.status == status_filter.value)
    if land_parcel_id:
        q = q.filter(Crop.land_parcel_id == land_parcel_id)
    crops = q.order_by(Crop.created_at.desc(), Crop.id.desc()).offset(skip).limit(limit).all()
    today = date.today()
    return [_serialize(crop, today) for crop in crops]


@router.get("/{crop_id}", response_model=CropResponse)
def get_crop(
    crop_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    return _serialize(get_owned_or_404(db, Crop, crop_id, user_id, "Crop not found"))


@router.post("/", response_model=CropResponse, status_code=status.HTTP_201_CREATED)
def create_crop(
    data: CropCreate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    _check_parcel(db, data.land_parcel_id, user_id)
    obj = Crop(user_id=user_id, **data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return _serialize(obj)


@router.put("/{crop_id}", response_model=CropResponse)
def update_crop(
    crop_id: int,
    update: CropUpdate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, Crop, crop_id, user_id, "Crop not found")
    update_data = update.model_dump(exclude_unset=True)
    if "land_parcel_id" in update_data:
        _check_parcel(db, update_data["land_parcel_id"], user_id)
    for field, value in update_data.items():
        setattr(obj, field, value)
    db.commit()
    db.refresh(obj)
    return _serialize(obj)


@router.delete("/{crop_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_crop(
    crop_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, Crop, crop_id, user_id, "Crop not found")
    db.delete(obj)
    db.commit()
    return None
