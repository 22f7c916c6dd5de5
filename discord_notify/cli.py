"""Command-line entry point for sending a build notification.

Exit codes:
- 0: webhook accepted the message (or dry run)
- 1: delivery failed
- 2: configuration error (missing text or webhook URL, bad color, ...)
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from .adapters.build_context import build_context_from_env
from .adapters.fake_senders import post_json_via_console
from .adapters.real_senders import post_json_via_urllib, redact_webhook_url
from .adapters.secrets import lookup_secret_from_env
from .application.send import send_notification
from .errors import ConfigurationError, DeliveryError


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    _load_env_file(Path.cwd() / ".env")

    build_context = build_context_from_env()
    overrides = {
        field_name: value
        for field_name, value in (
            ("job_name", args.job_name),
            ("build_url", args.build_url),
            ("result", args.result),
        )
        if value is not None
    }
    if overrides:
        build_context = replace(build_context, **overrides)

    invocation = {
        "url": args.url,
        "text": args.text,
        "title": args.title,
        "link": args.link,
        "color": args.color,
        "username": args.username,
        "avatar": args.avatar,
        "footer": args.footer,
    }
    post_json = post_json_via_console if args.dry_run else post_json_via_urllib

    try:
        status = send_notification(
            invocation,
            build_context,
            lookup_secret=lookup_secret_from_env,
            post_json=post_json,
        )
    except ConfigurationError as exc:
        print(f"[CONFIG ERROR] {exc}", file=sys.stderr)
        return 2
    except DeliveryError as exc:
        print(f"[DELIVERY ERROR] status={exc.status_code} error={exc}", file=sys.stderr)
        return 1

    target = redact_webhook_url(args.url) if args.url else "credential:discordkey"
    print(f"[SENT] status={status} target={target} dry_run={args.dry_run}")
    return 0


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="discord-notify",
        description="Send a Discord embed summarizing the current CI build.",
    )
    parser.add_argument(
        "--url",
        "--webhook",
        dest="url",
        default=None,
        help="Discord webhook URL. Defaults to the 'discordkey' credential "
        "(DISCORDKEY or DISCORDKEY_FILE).",
    )
    parser.add_argument("--text", required=True, help="Main message text.")
    parser.add_argument("--title", default=None, help="Embed title (defaults to JOB_NAME).")
    parser.add_argument("--link", default=None, help="Title link (defaults to BUILD_URL).")
    parser.add_argument(
        "--color",
        type=_parse_color,
        default=None,
        help="RGB color as decimal or 0x-prefixed hex (defaults from build result).",
    )
    parser.add_argument("--username", default=None, help='Sender name (default "Jenkins").')
    parser.add_argument("--avatar", default=None, help="Sender avatar URL.")
    parser.add_argument("--footer", default=None, help='Footer (default "Jenkins • <result>").')
    parser.add_argument("--job-name", default=None, help="Override JOB_NAME.")
    parser.add_argument("--build-url", default=None, help="Override BUILD_URL.")
    parser.add_argument("--result", default=None, help="Override BUILD_RESULT.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the payload instead of posting it.",
    )
    return parser.parse_args(argv)


def _parse_color(raw: str) -> int:
    try:
        return int(raw, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid color: {raw!r}") from exc


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        text = line.strip()
        if not text or text.startswith("#") or "=" not in text:
            continue
        key, value = text.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if value.startswith(("'", '"')) and value.endswith(("'", '"')) and len(value) >= 2:
            value = value[1:-1]
        os.environ.setdefault(key, value)
