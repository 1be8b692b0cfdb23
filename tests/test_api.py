import httpx

from shipsafe.scans import security_headers


def test_scan_headers_ok(api, target):
    target(lambda request: httpx.Response(200, headers={"content-security-policy": "default-src 'self'"}))

    resp = api.post("/api/scan-headers", json={"url": "https://example.com"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["url"] == "https://example.com/"
    assert body["summary"] == {"passed": 1, "failed": 3, "warnings": 2, "total": 6}
    assert body["results"][0] == {
        "name": "Content-Security-Policy",
        "header": "content-security-policy",
        "status": "pass",
        "message": "Present - XSS protection enabled",
    }
    assert set(body) == {"url", "timestamp", "results", "summary"}


def test_scan_headers_requires_url(api):
    resp = api.post("/api/scan-headers", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "URL is required"}


def test_scan_headers_rejects_bad_scheme(api):
    resp = api.post("/api/scan-headers", json={"url": "ftp://host"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid URL format"}


def test_scan_headers_unreachable(api, target):
    def handler(request):
        raise httpx.ConnectError("refused")

    target(handler)
    resp = api.post("/api/scan-headers", json={"url": "https://down.example"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Could not reach the target URL"}


def test_scan_headers_internal_error_is_generic(api, monkeypatch):
    async def broken_scan(raw_url):
        raise RuntimeError("secret detail")

    monkeypatch.setattr(security_headers, "scan", broken_scan)
    resp = api.post("/api/scan-headers", json={"url": "https://example.com"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to scan the target"}


def test_malformed_body_is_400(api):
    resp = api.post("/api/scan-headers", content=b"not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request body"}


def test_waitlist_ok(api):
    resp = api.post("/api/waitlist", json={"email": "dev@example.com", "url": "https://example.com"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True}


def test_waitlist_rejects_bad_email(api):
    for payload in ({}, {"email": ""}, {"email": "no-at-sign"}):
        resp = api.post("/api/waitlist", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Valid email required"}


def test_scan_headers_non_string_url_is_invalid_format(api):
    resp = api.post("/api/scan-headers", json={"url": 123})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid URL format"}
