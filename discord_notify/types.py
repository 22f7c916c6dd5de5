"""Shared type aliases for the discord_notify package."""

from __future__ import annotations

from typing import Any, Callable, Mapping

InvocationArgs = Mapping[str, Any]
NotificationPayload = dict[str, Any]

SecretLookupFn = Callable[[str], str | None]
PostJsonFn = Callable[..., int]
