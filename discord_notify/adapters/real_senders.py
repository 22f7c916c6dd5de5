"""Real webhook sender.

Mental model refresher:
- This module is an outbound adapter.
- It performs exactly one HTTP POST per call using the standard library.
- Application code only sees a simple `post_json(url=..., body=...)` callable
  that returns the HTTP status or raises `DeliveryError`.

Operational note:
- Discord sits behind Cloudflare, which rejects urllib's default
  `Python-urllib/x.y` agent with HTTP 403 (error 1010). Always send our own
  User-Agent.
"""

from __future__ import annotations

import http.client
import math
import os
import re
import urllib.error
import urllib.parse
import urllib.request

from ..errors import ConfigurationError, DeliveryError

USER_AGENT = "discord-notify/1.0"
DEFAULT_TIMEOUT_SECONDS = 10.0

ALLOWED_SCHEMES = frozenset({"http", "https"})

_WEBHOOK_TOKEN_RE = re.compile(r"(/webhooks/[^/]+/)[^/?#]+")


def post_json_via_urllib(
    *,
    url: str,
    body: bytes,
    timeout_seconds: float | None = None,
) -> int:
    """POST a JSON body and return the 2xx status code."""
    if timeout_seconds is None:
        timeout_seconds = _timeout_from_env()
    safe_url = require_webhook_url(url)

    request = urllib.request.Request(url, data=body, method="POST")
    request.add_header("Content-Type", "application/json")
    request.add_header("User-Agent", USER_AGENT)

    try:
        with urllib.request.urlopen(request, timeout=timeout_seconds) as response:
            status = int(response.getcode())
            response.read()
    except urllib.error.HTTPError as exc:
        details = exc.read().decode("utf-8", errors="replace") if exc.fp else ""
        raise DeliveryError(
            f"Webhook POST to {safe_url} failed HTTP {exc.code}: {details[:300]}",
            status_code=exc.code,
        ) from exc
    except urllib.error.URLError as exc:
        raise DeliveryError(f"Webhook POST to {safe_url} failed: {exc.reason}") from exc
    except (OSError, http.client.HTTPException) as exc:
        raise DeliveryError(f"Webhook POST to {safe_url} failed: {exc}") from exc

    if status < 200 or status >= 300:
        raise DeliveryError(
            f"Webhook POST to {safe_url} failed with status {status}",
            status_code=status,
        )
    return status


def require_webhook_url(url: str) -> str:
    """Reject destinations urllib cannot POST to; return the redacted URL."""
    safe_url = redact_webhook_url(url)
    parts = urllib.parse.urlsplit(url)
    if parts.scheme.lower() not in ALLOWED_SCHEMES or not parts.netloc:
        raise ConfigurationError(
            f"Webhook URL must be an absolute http(s) URL, got {safe_url!r}"
        )
    return safe_url


def redact_webhook_url(url: str) -> str:
    """Mask the token segment of a Discord webhook URL for log output."""
    return _WEBHOOK_TOKEN_RE.sub(r"\1***", url)


def _timeout_from_env() -> float:
    raw = os.getenv("DISCORD_NOTIFY_TIMEOUT_SECONDS")
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout_seconds = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid value for DISCORD_NOTIFY_TIMEOUT_SECONDS: {raw!r}"
        ) from exc
    if not math.isfinite(timeout_seconds) or timeout_seconds <= 0:
        raise ConfigurationError("DISCORD_NOTIFY_TIMEOUT_SECONDS must be a finite number > 0")
    return timeout_seconds
