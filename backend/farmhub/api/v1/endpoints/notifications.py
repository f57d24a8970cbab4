"""Notification endpoints"""
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from farmhub.api.auth import get_current_auth_user_id
from farmhub.core.database import get_db
from farmhub.models import Notification, NotificationStatus
from farmhub.schemas import NotificationCreate, NotificationResponse, UnreadCountResponse

from .common import get_owned_or_404

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=List[NotificationResponse])
def list_notifications(
    status_filter: Optional[NotificationStatus] = Query(None, alias="status"),
    skip: int = 0,
    limit: int = 100,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    q = db.query(Notification).filter(Notification.user_id == user_id)
    if status_filter:
        q = q.filter(Notification.status == status_filter.value)
    return (
        q.order_by(Notification.created_at.desc(), Notification.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def unread_count(
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    count = (
        db.query(Notification)
        .filter(
            Notification.user_id == user_id,
            Notification.status == NotificationStatus.UNREAD.value,
        )
        .count()
    )
    return UnreadCountResponse(unread=count)


@router.post("/read-all", response_model=UnreadCountResponse)
def mark_all_read(
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    """Mark every unread notification as read; returns the remaining unread count (0)"""
    (
        db.query(Notification)
        .filter(
            Notification.user_id == user_id,
            Notification.status == NotificationStatus.UNREAD.value,
        )
        .update({Notification.status: NotificationStatus.READ.value}, synchronize_session=False)
    )
    db.commit()
    return UnreadCountResponse(unread=0)


@router.get("/{notification_id}", response_model=NotificationResponse)
def get_notification(
    notification_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    return get_owned_or_404(db, Notification, notification_id, user_id, "Notification not found")


@router.post("/", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
def create_notification(
    data: NotificationCreate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = Notification(
        user_id=user_id,
        status=NotificationStatus.UNREAD.value,
        **data.model_dump(),
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_read(
    notification_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, Notification, notification_id, user_id, "Notification not found")
    obj.status = NotificationStatus.READ.value
    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    obj = get_owned_or_404(db, Notification, notification_id, user_id, "Notification not found")
    db.delete(obj)
    db.commit()
    return None
