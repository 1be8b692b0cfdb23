import httpx
import pytest
from fastapi.testclient import TestClient

from shipsafe.config import settings
from shipsafe.main import app
from shipsafe.scans import security_headers


@pytest.fixture(autouse=True)
def no_external_services(monkeypatch):
    monkeypatch.setattr(settings, "SUPABASE_URL", "")
    monkeypatch.setattr(settings, "SUPABASE_SERVICE_ROLE_KEY", "")
    monkeypatch.setattr(settings, "WAITLIST_NOTIFY_URL", "")


@pytest.fixture
def api():
    return TestClient(app)


@pytest.fixture
def target(monkeypatch):
    """Route scans through a MockTransport built from the given handler."""
    original = security_headers.scan

    def install(handler):
        async def fake_scan(raw_url):
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await original(raw_url, client=client)

        monkeypatch.setattr(security_headers, "scan", fake_scan)

    return install
