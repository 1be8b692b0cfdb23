# shipsafe/scans/security_headers.py
"""
HTTP security header scan.

Fetches a single URL (HEAD, falling back to GET once) and checks the
response for a fixed list of security headers. Only presence is checked,
header values are never parsed.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, List, NamedTuple, Optional
from urllib.parse import urlsplit

import httpx

from ..errors import UnreachableError, ValidationError
from ..models import HeaderCheckResult, ScanReport, ScanSummary

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
USER_AGENT = "ShipSafe-Scanner/1.0"
ALLOWED_SCHEMES = ("http", "https")


class HeaderCheckSpec(NamedTuple):
    header: str
    name: str
    severity: str  # "high" | "medium" | "low"
    pass_message: str
    fail_message: str


SECURITY_HEADERS = (
    HeaderCheckSpec(
        "content-security-policy", "Content-Security-Policy", "high",
        "Present - XSS protection enabled", "Missing - XSS attacks possible",
    ),
    HeaderCheckSpec(
        "x-frame-options", "X-Frame-Options", "medium",
        "Present - Clickjacking blocked", "Missing - Clickjacking possible",
    ),
    HeaderCheckSpec(
        "strict-transport-security", "Strict-Transport-Security", "high",
        "Present - HTTPS enforced", "Missing - HTTPS not enforced",
    ),
    HeaderCheckSpec(
        "x-content-type-options", "X-Content-Type-Options", "medium",
        "Present - MIME sniffing blocked", "Missing - MIME sniffing possible",
    ),
    HeaderCheckSpec(
        "referrer-policy", "Referrer-Policy", "low",
        "Present - Referrer controlled", "Missing - Referrer data may leak",
    ),
    HeaderCheckSpec(
        "permissions-policy", "Permissions-Policy", "low",
        "Present - Browser features restricted", "Missing - Browser features unrestricted",
    ),
)


def validate_target(raw_url: Any) -> str:
    """Return the normalized absolute http(s) URL or raise ValidationError."""
    if raw_url is None or (isinstance(raw_url, str) and not raw_url.strip()):
        raise ValidationError("URL is required")
    # request bodies are untyped JSON, so url may be any value
    if not isinstance(raw_url, str):
        raise ValidationError("Invalid URL format")

    try:
        parsed = httpx.URL(raw_url.strip())
    except (httpx.InvalidURL, ValueError, TypeError):
        raise ValidationError("Invalid URL format")

    if parsed.scheme not in ALLOWED_SCHEMES or not parsed.host:
        raise ValidationError("Invalid URL format")

    # serialize like a browser URL parser: bare origin gets a "/" path
    if not urlsplit(str(parsed)).path:
        parsed = parsed.copy_with(path="/")
    return str(parsed)


async def _request(client: httpx.AsyncClient, method: str, url: str, timeout: float) -> httpx.Headers:
    request = client.build_request(method, url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    # streamed send returns once headers arrive; wait_for cancels it past the deadline
    resp = await asyncio.wait_for(
        client.send(request, follow_redirects=True, stream=True),
        timeout=timeout,
    )
    try:
        return resp.headers
    finally:
        # body is never read
        await resp.aclose()


async def fetch_headers(url: str, client: httpx.AsyncClient, timeout: float = DEFAULT_TIMEOUT) -> httpx.Headers:
    """HEAD the target; on any failure try one GET. Raises UnreachableError if both fail."""
    try:
        return await _request(client, "HEAD", url, timeout)
    except (httpx.HTTPError, httpx.InvalidURL, asyncio.TimeoutError) as e:
        logger.warning("HEAD %s failed, retrying with GET: %r", url, e)

    try:
        return await _request(client, "GET", url, timeout)
    except (httpx.HTTPError, httpx.InvalidURL, asyncio.TimeoutError) as e:
        logger.warning("GET %s failed: %r", url, e)
        raise UnreachableError("Could not reach the target URL") from e


def evaluate_headers(headers: httpx.Headers) -> List[HeaderCheckResult]:
    results: List[HeaderCheckResult] = []
    for check in SECURITY_HEADERS:
        # an empty value counts as missing
        present = bool(headers.get(check.header))
        if present:
            status = "pass"
        elif check.severity == "low":
            status = "warn"
        else:
            status = "fail"
        results.append(
            HeaderCheckResult(
                name=check.name,
                header=check.header,
                status=status,
                message=check.pass_message if present else check.fail_message,
            )
        )
    return results


def summarize(results: List[HeaderCheckResult]) -> ScanSummary:
    return ScanSummary(
        passed=sum(1 for r in results if r.status == "pass"),
        failed=sum(1 for r in results if r.status == "fail"),
        warnings=sum(1 for r in results if r.status == "warn"),
        total=len(results),
    )


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def scan(
    raw_url: Any,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ScanReport:
    url = validate_target(raw_url)

    if client is None:
        async with httpx.AsyncClient() as own_client:
            headers = await fetch_headers(url, own_client, timeout)
    else:
        headers = await fetch_headers(url, client, timeout)

    results = evaluate_headers(headers)
    summary = summarize(results)
    logger.info(
        "Scanned %s: %d passed, %d failed, %d warnings",
        url, summary.passed, summary.failed, summary.warnings,
    )
    return ScanReport(url=url, timestamp=_timestamp(), results=results, summary=summary)
