"""Errors raised while preparing or delivering a notification."""

from __future__ import annotations


class NotifyError(RuntimeError):
    """Base class for discord_notify failures."""


class ConfigurationError(NotifyError):
    """Input or destination problem detected before any network I/O."""


class DeliveryError(NotifyError):
    """The webhook POST failed or returned a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
