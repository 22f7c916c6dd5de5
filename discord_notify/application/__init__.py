"""Application layer: the send-notification use-case."""

from .send import WEBHOOK_CREDENTIAL_ID, resolve_webhook_url, send_notification

__all__ = [
    "WEBHOOK_CREDENTIAL_ID",
    "resolve_webhook_url",
    "send_notification",
]
