# shipsafe/config.py
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Service settings read from the environment (and a local .env file)."""

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = [
        o.strip()
        for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
        if o.strip()
    ]

    # Waitlist store (Supabase REST); both must be set to persist signups
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_SERVICE_ROLE_KEY: str = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")
    WAITLIST_TABLE: str = os.getenv("WAITLIST_TABLE", "waitlist")

    WAITLIST_NOTIFY_URL: str = os.getenv("WAITLIST_NOTIFY_URL", "")
    WAITLIST_TIMEOUT: float = float(os.getenv("WAITLIST_TIMEOUT", "10"))

    @property
    def supabase_enabled(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY)


settings = Settings()
