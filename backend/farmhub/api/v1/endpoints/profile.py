"""Profile and sign-up endpoints"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from uuid import UUID

from farmhub.api.auth import get_current_auth_user_id
from farmhub.core.database import get_db
from farmhub.schemas import UserProfileUpdate, UserProfileResponse, SignUpRequest, SignUpResponse
from farmhub.services.profiles import SignUpError, get_or_create_profile, register_user, update_profile
from farmhub.services.supabase_client import SupabaseNotConfigured

router = APIRouter(tags=["profile"])


@router.get("/profile", response_model=UserProfileResponse)
def get_profile(
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    return get_or_create_profile(db, user_id)


@router.put("/profile", response_model=UserProfileResponse)
def put_profile(
    update: UserProfileUpdate,
    user_id: UUID = Depends(get_current_auth_user_id),
    db: Session = Depends(get_db),
):
    return update_profile(db, user_id, update)


@router.post("/auth/signup", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: SignUpRequest, db: Session = Depends(get_db)):
    try:
        profile = register_user(db, payload)
    except SupabaseNotConfigured as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
    except SignUpError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    return SignUpResponse(
        profile=UserProfileResponse.model_validate(profile),
        message="Account created. You can now sign in.",
    )
