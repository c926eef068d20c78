from __future__ import annotations

from supabase import create_client, Client

from farah.config import Settings, get_settings


def get_supabase_client(settings: Settings | None = None) -> Client:
    settings = settings or get_settings()
    return create_client(settings.supabase_url, settings.supabase_key)
