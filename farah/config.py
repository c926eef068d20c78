from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    supabase_key: str
    log_level: str = "INFO"


def get_settings() -> Settings:
    """
    Read Supabase settings from the environment (.env and .env.local included).

    Prefer the service role key for backend scripts; the anon key only works
    where RLS policies allow reading approved vendors and the user's profile.
    """
    load_dotenv(find_dotenv(usecwd=True))
    load_dotenv(".env.local")

    url = (os.getenv("SUPABASE_URL") or os.getenv("VITE_SUPABASE_URL") or "").strip()
    key = (
        os.getenv("SUPABASE_SERVICE_ROLE_KEY")
        or os.getenv("SUPABASE_ANON_KEY")
        or ""
    ).strip()

    # Fail fast if required env vars are missing
    missing = []
    if not url:
        missing.append("SUPABASE_URL (or VITE_SUPABASE_URL)")
    if not key:
        missing.append("SUPABASE_SERVICE_ROLE_KEY (or SUPABASE_ANON_KEY)")
    if missing:
        raise EnvironmentError(
            f"Missing required environment variables: {', '.join(missing)}. "
            "Copy .env.example to .env and fill in your Supabase credentials."
        )

    return Settings(
        supabase_url=url,
        supabase_key=key,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )
