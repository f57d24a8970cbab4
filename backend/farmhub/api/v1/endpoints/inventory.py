"""Inventory CRUD endpoints"""
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from farmhub.api.auth import get_current_auth_user_id
from farmhub.core.database import get_db
from farmhub.models import InventoryItem, InventoryType
from farmhub.schemas import InventoryItemCreate, InventoryItemUpdate, InventoryItemResponse
from farmhub.services.alerts import is_low_stock

from .common import get_owned_or_404

router = APIRouter(prefix="/inventory", tags=["inventory"])


def _serialize(item: InventoryItem) -> InventoryItemResponse:
    response = InventoryItemResponse.model_validate(item)
    response.is_low_stock = is_low_stock(item)
    return response


@router.get("/", response_model=List[InventoryItemResponse])
def list_inventory(
    item_type: Optional[InventoryType] = Query(None, alias="type"),
    low_stock_only: bool = False,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    q = db.query(InventoryItem).filter(InventoryItem.user_id == user_id)
    if item_type:
        q = q.filter(InventoryItem.type == item_type.value)
    items = q.order_by(InventoryItem.created_at.desc(), InventoryItem.id.desc()).all()
    if low_stock_only:
        items = [item for item in items if is_low_stock(item)]
    return [_serialize(item) for item in items]


@router.get("/{item_id}", response_model=InventoryItemResponse)
def get_inventory_item(
    item_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    return _serialize(get_owned_or_404(db, InventoryItem, item_id, user_id, "Inventory item not found"))


@router.post("/", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
def create_inventory_item(
    data: InventoryItemCreate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = InventoryItem(user_id=user_id, **data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return _serialize(obj)


@router.put("/{item_id}", response_model=InventoryItemResponse)
def update_inventory_item(
    item_id: int,
    update: InventoryItemUpdate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, InventoryItem, item_id, user_id, "Inventory item not found")
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(obj, field, value)
    db.commit()
    db.refresh(obj)
    return _serialize(obj)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory_item(
    item_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, InventoryItem, item_id, user_id, "Inventory item not found")
    db.delete(obj)
    db.commit()
    return None
