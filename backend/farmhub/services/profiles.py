"""Profile and sign-up services"""
from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from farmhub.models import UserProfile, UserRole
from farmhub.schemas.profile import SignUpRequest, UserProfileUpdate
from farmhub.services.supabase_client import (
    SupabaseAdminError,
    create_supabase_user,
    delete_supabase_user,
)

logger = logging.getLogger(__name__)


class SignUpError(RuntimeError):
    """Sign-up rejected by Supabase or by the database."""


def get_or_create_profile(db: Session, user_id: UUID) -> UserProfile:
    """Return the caller's profile, creating an empty one on first access."""
    profile = db.query(UserProfile).filter(UserProfile.id == user_id).first()
    if profile:
        return profile

    profile = UserProfile(id=user_id, full_name="", role=UserRole.FARMER.value)
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def update_profile(db: Session, user_id: UUID, update: UserProfileUpdate) -> UserProfile:
    profile = get_or_create_profile(db, user_id)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(profile, field, value)
    db.commit()
    db.refresh(profile)
    return profile


def register_user(db: Session, payload: SignUpRequest) -> UserProfile:
    """Create the Supabase Auth user and its profile row.

    If the profile cannot be stored the Supabase user is deleted again.
    """
    try:
        user = create_supabase_user(
            email=payload.email,
            password=payload.password,
            user_metadata={"full_name": payload.full_name},
        )
    except SupabaseAdminError as exc:
        raise SignUpError(str(exc)) from exc

    user_id = user.id if isinstance(user.id, UUID) else UUID(str(user.id))
    try:
        profile = UserProfile(
            id=user_id,
            full_name=payload.full_name,
            farm_name=payload.farm_name,
            location=payload.location,
            role=UserRole.FARMER.value,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return profile
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Profile creation failed for {payload.email}, removing auth user: {exc}")
        try:
            delete_supabase_user(user_id)
        except SupabaseAdminError as cleanup_exc:
            logger.error(f"Could not remove Supabase user {user_id}: {cleanup_exc}")
        raise SignUpError("Unable to create the user profile") from exc
