"""Authentication helpers for Supabase JWT tokens"""
from __future__ import annotations

import base64
import json
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import Header, HTTPException, status

from farmhub.core.context import ANONYMOUS, UserContext


def _decode_jwt_no_verify(token: str) -> Dict[str, Any]:
    """Decode a JWT payload without verifying the signature.

    Tokens are issued by Supabase Auth to our own frontend; only the `sub`
    claim is read here. Row ownership is enforced on every query.
    """
    try:
        payload_segment = token.split(".")[1]
    except IndexError as exc:
        raise ValueError("Malformed token") from exc

    # JWT uses base64url encoding without padding
    missing_padding = (-len(payload_segment)) % 4
    if missing_padding:
        payload_segment += "=" * missing_padding

    try:
        payload_bytes = base64.urlsafe_b64decode(payload_segment.encode("utf-8"))
        payload = json.loads(payload_bytes.decode("utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ValueError("Unable to decode token") from exc
    if not isinstance(payload, dict):
        raise ValueError("Unexpected token payload")
    return payload


def _user_id_from_header(authorization: str) -> UUID:
    prefix = "Bearer "
    if not authorization.startswith(prefix):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid Authorization format")

    token = authorization[len(prefix):].strip()
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")

    try:
        payload = _decode_jwt_no_verify(token)
        user_id = payload.get("sub")
        if not user_id:
            raise ValueError("Missing 'sub' claim")
        return UUID(str(user_id))
    except (ValueError, TypeError) as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc


def get_current_auth_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization")
) -> UUID:
    """Extract the Supabase user ID (UUID) from the Authorization header."""
    if not authorization:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")
    return _user_id_from_header(authorization)


def get_optional_user_context(
    authorization: Optional[str] = Header(None, alias="Authorization")
) -> UserContext:
    """UserContext for endpoints that also serve anonymous callers.

    No header means anonymous; a header that is present must be valid.
    """
    if not authorization:
        return ANONYMOUS
    return UserContext(user_id=_user_id_from_header(authorization))
