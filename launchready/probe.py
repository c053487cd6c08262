"""Runtime health probe for a live deployment.

Report-only context: nothing here feeds the numeric score. Two blocking
calls at most (GET for status and timing, HEAD for headers), each bounded
by TIMEOUT_SECONDS and following redirects. Failures are never retried.
"""
from __future__ import annotations

import logging
import time
from urllib.parse import urlsplit

import requests

from launchready.models import ProbeStatus, RuntimeResult

logger = logging.getLogger(__name__)

TIMEOUT_SECONDS = 10
SLOW_MS = 3000
ELEVATED_MS = 1000

SECURITY_HEADERS = (
    ("X-Frame-Options", "X-Frame-Options header"),
    ("Strict-Transport-Security", "HSTS header"),
    ("Content-Security-Policy", "CSP header"),
)

SKIPPED_MESSAGE = "No deployment URL provided - runtime checks skipped"
INVALID_URL_MESSAGE = "Invalid deployment URL provided"


def is_valid_url(url: str) -> bool:
    """Absolute http(s) URL with a host."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def status_finding(status_code: int) -> str:
    if 200 <= status_code < 300:
        return "✓ Site is accessible"
    if 300 <= status_code < 400:
        return "⚠ Site redirects"
    if 400 <= status_code < 500:
        return "✗ Client error (4xx)"
    if 500 <= status_code < 600:
        return "✗ Server error (5xx)"
    return "✗ Unexpected status code"


def latency_finding(response_time_ms: int) -> str:
    if response_time_ms > SLOW_MS:
        return "✗ SLOW: Response time > 3s"
    if response_time_ms > ELEVATED_MS:
        return "⚠ Response time > 1s"
    return "✓ Good response time"


def header_findings(responses: list[requests.Response]) -> list[str]:
    """Present/missing line per security header, across all redirect hops."""
    findings = []
    for header, label in SECURITY_HEADERS:
        if any(header in r.headers for r in responses):
            findings.append(f"✓ {label} present")
        else:
            findings.append(f"✗ Missing {label}")
    return findings


def probe(url: str | None, session: requests.Session | None = None) -> RuntimeResult:
    """Probe *url* and report status class, latency and security headers."""
    if not url:
        return RuntimeResult(status=ProbeStatus.SKIPPED, findings=[SKIPPED_MESSAGE])

    if not is_valid_url(url):
        logger.debug("rejecting deployment URL %r", url)
        return RuntimeResult(status=ProbeStatus.FAILED, findings=[INVALID_URL_MESSAGE])

    http = session or requests.Session()
    try:
        started = time.perf_counter()
        resp = http.get(url, timeout=TIMEOUT_SECONDS, allow_redirects=True)
        response_time_ms = int((time.perf_counter() - started) * 1000 + 0.5)
        resp.close()

        head = http.head(url, timeout=TIMEOUT_SECONDS, allow_redirects=True)
    except requests.exceptions.RequestException as e:
        logger.debug("runtime probe of %s failed: %s", url, e)
        return RuntimeResult(
            status=ProbeStatus.FAILED,
            findings=["Runtime checks failed", f"Error: {e}"],
        )
    finally:
        if session is None:
            http.close()

    findings = [
        f"HTTP Status: {resp.status_code}",
        f"Response Time: {response_time_ms}ms",
        status_finding(resp.status_code),
        latency_finding(response_time_ms),
    ]
    findings.extend(header_findings([*head.history, head]))

    logger.info("runtime probe %s: HTTP %d in %dms", url, resp.status_code, response_time_ms)
    return RuntimeResult(
        status=ProbeStatus.COMPLETED,
        findings=findings,
        status_code=resp.status_code,
        response_time_ms=response_time_ms,
    )
