"""Domain layer: request/context value objects and embed rules."""

from .embed import build_payload, resolve_color, serialize_payload
from .models import BuildContext, NotificationRequest

__all__ = [
    "BuildContext",
    "NotificationRequest",
    "build_payload",
    "resolve_color",
    "serialize_payload",
]
