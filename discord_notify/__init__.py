"""Discord webhook notifications for CI builds."""

from .adapters import (
    build_context_from_env,
    lookup_secret_from_env,
    parse_notification_request,
    post_json_via_console,
    post_json_via_urllib,
)
from .application import send_notification
from .domain import (
    BuildContext,
    NotificationRequest,
    build_payload,
    resolve_color,
    serialize_payload,
)
from .errors import ConfigurationError, DeliveryError, NotifyError

__all__ = [
    "BuildContext",
    "ConfigurationError",
    "DeliveryError",
    "NotificationRequest",
    "NotifyError",
    "build_context_from_env",
    "build_payload",
    "lookup_secret_from_env",
    "parse_notification_request",
    "post_json_via_console",
    "post_json_via_urllib",
    "resolve_color",
    "send_notification",
    "serialize_payload",
]
