"""Invocation-map adapter.

Mental model refresher:
- This is an adapter/edge module.
- It translates the loosely typed argument map a pipeline step receives into
  the `NotificationRequest` value object used by application/domain code.
- It validates shape and required fields, but it does not resolve defaults.
- Display strings are kept as given; only `""` counts as not provided.
"""

from __future__ import annotations

import math
import numbers
from typing import Any

from ..domain.models import NotificationRequest
from ..errors import ConfigurationError
from ..types import InvocationArgs


def parse_notification_request(args: InvocationArgs) -> NotificationRequest:
    """Normalize an invocation map into a `NotificationRequest`.

    `webhook` is accepted as an alias of `url`. A `color` that is not a real
    number is ignored so the build-result color applies.
    """
    text = args.get("text")
    if not isinstance(text, str) or not text:
        raise ConfigurationError("'text' is required")

    return NotificationRequest(
        text=text,
        url=_as_optional_url(args.get("url")) or _as_optional_url(args.get("webhook")),
        title=_as_optional_str(args.get("title")),
        link=_as_optional_str(args.get("link")),
        color=_as_optional_color(args.get("color")),
        username=_as_optional_str(args.get("username")),
        avatar=_as_optional_str(args.get("avatar")),
        footer=_as_optional_str(args.get("footer")),
    )


def _as_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None


def _as_optional_url(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_optional_color(value: Any) -> int | None:
    # Decimal is a Number but not registered as Real.
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        return None
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return None
    if not math.isfinite(value):
        return None
    return int(value)
