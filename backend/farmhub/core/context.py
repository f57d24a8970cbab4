"""Per-request identity passed explicitly to services"""
from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID


@dataclass(frozen=True)
class UserContext:
    """Authenticated caller. ``user_id`` is None for anonymous requests."""
    user_id: Optional[UUID] = None
    profile: Optional[Any] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


ANONYMOUS = UserContext()
