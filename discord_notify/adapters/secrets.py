"""Secret lookup adapter.

Mental model refresher:
- Application code only sees a `lookup_secret(name) -> str | None` callable.
- This implementation maps a credential id to an environment variable
  (`discordkey` -> `DISCORDKEY`), or to a file named by `<VAR>_FILE` as
  mounted by CI credential bindings and container secrets.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Mapping

from ..errors import ConfigurationError


def lookup_secret_from_env(
    name: str,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Return the secret value for `name`, or None when it is not configured.

    A blank env var does not hide a configured secret file.
    """
    env = os.environ if environ is None else environ
    var_name = secret_env_var(name)

    value = env.get(var_name)
    file_path = env.get(f"{var_name}_FILE")
    if value is not None and (value.strip() or not file_path):
        return value

    if file_path:
        try:
            return Path(file_path).read_text(encoding="utf-8").rstrip("\r\n")
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot read secret file for {name!r} from {file_path}: {exc}"
            ) from exc

    return None


def secret_env_var(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9]", "_", name).upper()
