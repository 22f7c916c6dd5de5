"""Adapter layer: input mapping, environment collaborators and senders."""

from .build_context import build_context_from_env
from .fake_senders import post_json_via_console
from .real_senders import post_json_via_urllib, redact_webhook_url
from .request import parse_notification_request
from .secrets import lookup_secret_from_env

__all__ = [
    "build_context_from_env",
    "lookup_secret_from_env",
    "parse_notification_request",
    "post_json_via_console",
    "post_json_via_urllib",
    "redact_webhook_url",
]
