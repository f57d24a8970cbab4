"""
Shared helpers for the per-user resource routers
"""
from typing import Type, TypeVar
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


def get_owned_or_404(db: Session, model: Type[ModelT], obj_id: int, user_id: UUID, detail: str) -> ModelT:
    """Load a row by id, treating rows of other users as missing."""
    obj = db.query(model).filter(model.id == obj_id, model.user_id == user_id).first()
    if not obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return obj
