"""Utility helpers to interact with Supabase Auth"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Optional

from supabase import Client, create_client
from supabase_auth.errors import AuthApiError

from farmhub.core.config import settings


class SupabaseNotConfigured(RuntimeError):
    """Raised when Supabase credentials are missing."""


class SupabaseAdminError(RuntimeError):
    """Raised when Supabase admin operations fail."""


@lru_cache
def get_supabase_client() -> Client:
    """Instantiate a Supabase client using the service role key."""
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise SupabaseNotConfigured(
            "Supabase URL or service role key not configured. Check the environment variables."
        )
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)


def create_supabase_user(
    *,
    email: str,
    password: str,
    user_metadata: Optional[Dict[str, Any]] = None,
) -> Any:
    """Create a confirmed Supabase Auth user and return it."""
    client = get_supabase_client()

    try:
        response = client.auth.admin.create_user(  # type: ignore[arg-type]
            {
                "email": email,
                "password": password,
                "email_confirm": True,
                "user_metadata": user_metadata or {},
            }
        )
    except AuthApiError as exc:
        raise SupabaseAdminError(str(exc)) from exc
    except Exception as exc:  # pragma: no cover - unexpected client errors
        raise SupabaseAdminError(f"Error creating Supabase user: {exc}") from exc

    user = response.user
    if user is None:
        raise SupabaseAdminError("Supabase response does not contain a user.")
    return user


def delete_supabase_user(auth_user_id) -> None:
    """Delete a Supabase Auth user by their UUID."""
    client = get_supabase_client()
    try:
        client.auth.admin.delete_user(str(auth_user_id))
    except AuthApiError as exc:
        raise SupabaseAdminError(str(exc)) from exc
    except Exception as exc:
        raise SupabaseAdminError(f"Error deleting Supabase user: {exc}") from exc
