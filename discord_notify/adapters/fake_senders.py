"""Fake sender adapter for dry runs and local smoke tests.

Mental model refresher:
- This is outbound adapter code with the same call shape as the real sender.
- Nothing leaves the machine; the would-be request is printed instead.
"""

from __future__ import annotations

import json

from .real_senders import redact_webhook_url

DRY_RUN_STATUS = 204


def post_json_via_console(*, url: str, body: bytes) -> int:
    print("[WEBHOOK]")
    print(f"url={redact_webhook_url(url)}")
    print(json.dumps(json.loads(body.decode("utf-8")), indent=2, ensure_ascii=False))
    return DRY_RUN_STATUS
