# shipsafe/waitlist.py
"""
Waitlist signups.

Every signup is logged. Persistence (Supabase REST) and the notification
webhook are best-effort: failures are logged and never surface to the caller.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx

from .config import settings
from .errors import ValidationError
from .models import WaitlistSignup

logger = logging.getLogger(__name__)


def validate_email(email: Optional[str]) -> str:
    if not email or not isinstance(email, str) or "@" not in email:
        raise ValidationError("Valid email required")
    return email.strip()


def _supabase_headers() -> Dict[str, str]:
    key = settings.SUPABASE_SERVICE_ROLE_KEY
    return {
        "apikey": key,
        "Authorization": f"Bearer {key}",
        "Content-Type": "application/json",
        "Prefer": "return=minimal",
    }


async def _post(client: Optional[httpx.AsyncClient], url: str, payload: Dict[str, Any], headers: Dict[str, str]) -> httpx.Response:
    if client is None:
        async with httpx.AsyncClient(timeout=settings.WAITLIST_TIMEOUT) as own_client:
            return await own_client.post(url, json=payload, headers=headers)
    return await client.post(url, json=payload, headers=headers)


async def submit_signup(signup: WaitlistSignup, client: Optional[httpx.AsyncClient] = None) -> bool:
    """Log the signup and insert it into the waitlist table when Supabase is configured."""
    logger.info(
        "New waitlist signup: email=%s url=%s timestamp=%s",
        signup.email, signup.url, datetime.now(timezone.utc).isoformat(),
    )
    if not settings.supabase_enabled:
        logger.debug("SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY not set; signup only logged")
        return False

    endpoint = f"{settings.SUPABASE_URL.rstrip('/')}/rest/v1/{settings.WAITLIST_TABLE}"
    try:
        resp = await _post(client, endpoint, {"email": signup.email, "url": signup.url or None}, _supabase_headers())
        resp.raise_for_status()
        return True
    except httpx.HTTPStatusError as e:
        logger.error("Supabase insert failed (%s): %s", e.response.status_code, e.response.text)
    except Exception as e:
        logger.exception("Supabase connection error: %s", e)
    return False


async def notify_signup(signup: WaitlistSignup, client: Optional[httpx.AsyncClient] = None) -> bool:
    if not settings.WAITLIST_NOTIFY_URL:
        return False

    payload = {
        "text": f"New waitlist signup: {signup.email}",
        "email": signup.email,
        "url": signup.url,
    }
    try:
        resp = await _post(client, settings.WAITLIST_NOTIFY_URL, payload, {"Content-Type": "application/json"})
        resp.raise_for_status()
        return True
    except Exception as e:
        logger.exception("Waitlist notification failed: %s", e)
    return False


async def process_signup(signup: WaitlistSignup, client: Optional[httpx.AsyncClient] = None) -> None:
    await submit_signup(signup, client)
    await notify_signup(signup, client)
