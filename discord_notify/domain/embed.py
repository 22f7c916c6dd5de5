"""Embed presentation rules.

Mental model refresher:
- Domain modules decide what the message looks like.
- Every field falls back request -> build context -> fixed default.
- No I/O happens here; the result is a plain dict ready to serialize.
"""

from __future__ import annotations

import json

from ..types import NotificationPayload
from .models import BuildContext, NotificationRequest

DEFAULT_TITLE = "Jenkins Job"
DEFAULT_RESULT = "UNKNOWN"
DEFAULT_USERNAME = "Jenkins"
DEFAULT_AVATAR_URL = "https://get.jenkins.io/art/jenkins-logo/1024x1024/headshot.png"
FOOTER_PREFIX = "Jenkins • "

COLOR_SUCCESS = 0x19A974
COLOR_UNSTABLE = 0xFFD700
COLOR_ABORTED = 0x808080
COLOR_FAILURE = 0xAC2B37

RESULT_COLORS = {
    "SUCCESS": COLOR_SUCCESS,
    "UNSTABLE": COLOR_UNSTABLE,
    "ABORTED": COLOR_ABORTED,
}


def resolve_color(result_label: str, explicit: int | None = None) -> int:
    """Return the explicit color, else the color for an exact result label.

    FAILURE and any unrecognized label map to red.
    """
    if explicit is not None:
        return int(explicit)
    return RESULT_COLORS.get(result_label, COLOR_FAILURE)


def build_payload(
    request: NotificationRequest,
    build_context: BuildContext,
) -> NotificationPayload:
    """Assemble the Discord webhook body for one request."""
    result_label = build_context.result or DEFAULT_RESULT

    return {
        "username": request.username or DEFAULT_USERNAME,
        "avatar_url": request.avatar or DEFAULT_AVATAR_URL,
        "embeds": [
            {
                "title": request.title or build_context.job_name or DEFAULT_TITLE,
                "url": request.link or build_context.build_url or "",
                "description": request.text,
                "color": resolve_color(result_label, request.color),
                "footer": {"text": request.footer or f"{FOOTER_PREFIX}{result_label}"},
            }
        ],
    }


def serialize_payload(payload: NotificationPayload) -> bytes:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
