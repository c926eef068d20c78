from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from supabase import Client

from farah.db.vendors import fetch_user_profile
from farah.models import UserProfile


@dataclass(frozen=True)
class SessionContext:
    """
    Who is asking. Passed explicitly to whatever needs the current user;
    scoring only ever sees `profile`.
    """
    user_id: Optional[str] = None
    profile: Optional[UserProfile] = None

    @classmethod
    def anonymous(cls) -> "SessionContext":
        return cls()

    @property
    def is_signed_in(self) -> bool:
        return self.user_id is not None


def load_session(supabase: Client, user_id: str | None) -> SessionContext:
    if not user_id:
        return SessionContext.anonymous()
    return SessionContext(user_id=user_id, profile=fetch_user_profile(supabase, user_id))
