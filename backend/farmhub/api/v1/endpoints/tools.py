"""Tools and equipment CRUD endpoints"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
from datetime import date

from farmhub.api.auth import get_current_auth_user_id
from farmhub.core.database import get_db
from farmhub.models import ToolEquipment
from farmhub.schemas import ToolEquipmentCreate, ToolEquipmentUpdate, ToolEquipmentResponse
from farmhub.services.alerts import is_maintenance_due

from .common import get_owned_or_404

router = APIRouter(prefix="/tools", tags=["tools"])


def _serialize(tool: ToolEquipment, today: Optional[date] = None) -> ToolEquipmentResponse:
    response = ToolEquipmentResponse.model_validate(tool)
    response.maintenance_due = is_maintenance_due(tool, today)
    return response


@router.get("/", response_model=List[ToolEquipmentResponse])
def list_tools(
    maintenance_due_only: bool = False,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    tools = (
        db.query(ToolEquipment)
        .filter(ToolEquipment.user_id == user_id)
        .order_by(ToolEquipment.created_at.desc(), ToolEquipment.id.desc())
        .all()
    )
    today = date.today()
    if maintenance_due_only:
        tools = [tool for tool in tools if is_maintenance_due(tool, today)]
    return [_serialize(tool, today) for tool in tools]


@router.get("/{tool_id}", response_model=ToolEquipmentResponse)
def get_tool(
    tool_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    return _serialize(get_owned_or_404(db, ToolEquipment, tool_id, user_id, "Tool not found"))


@router.post("/", response_model=ToolEquipmentResponse, status_code=status.HTTP_201_CREATED)
def create_tool(
    data: ToolEquipmentCreate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = ToolEquipment(user_id=user_id, **data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return _serialize(obj)


@router.put("/{tool_id}", response_model=ToolEquipmentResponse)
def update_tool(
    tool_id: int,
    update: ToolEquipmentUpdate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, ToolEquipment, tool_id, user_id, "Tool not found")
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(obj, field, value)
    db.commit()
    db.refresh(obj)
    return _serialize(obj)


@router.delete("/{tool_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tool(
    tool_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, ToolEquipment, tool_id, user_id, "Tool not found")
    db.delete(obj)
    db.commit()
    return None
