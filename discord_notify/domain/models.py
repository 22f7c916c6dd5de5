"""Value objects for one notification.

Mental model refresher:
- `NotificationRequest` is what the caller asked for (all overrides optional
  except the message text).
- `BuildContext` is what the CI run knows about itself. It is passed in
  explicitly; nothing here reads process-wide state.
- Both are validated and normalized at construction so downstream code can
  rely on `None` meaning "not provided".
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ConfigurationError

MAX_COLOR = 0xFFFFFF


@dataclass(frozen=True)
class NotificationRequest:
    text: str
    url: str | None = None
    title: str | None = None
    link: str | None = None
    color: int | None = None
    username: str | None = None
    avatar: str | None = None
    footer: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise ConfigurationError("'text' is required")

        object.__setattr__(self, "url", _optional_str(self.url, strip=True))
        for field_name in ("title", "link", "username", "avatar", "footer"):
            object.__setattr__(self, field_name, _optional_str(getattr(self, field_name)))

        if self.color is not None:
            if isinstance(self.color, bool) or not isinstance(self.color, int):
                raise ConfigurationError(
                    f"'color' must be an integer, got {self.color!r}"
                )
            if not 0 <= self.color <= MAX_COLOR:
                raise ConfigurationError(
                    f"'color' must be a 24-bit RGB value, got {self.color}"
                )


@dataclass(frozen=True)
class BuildContext:
    job_name: str | None = None
    build_url: str | None = None
    result: str | None = None

    def __post_init__(self) -> None:
        for field_name in ("job_name", "build_url", "result"):
            object.__setattr__(self, field_name, _optional_str(getattr(self, field_name)))


def _optional_str(value: object, *, strip: bool = False) -> str | None:
    if value is None:
        return None
    text = str(value).strip() if strip else str(value)
    return text or None
