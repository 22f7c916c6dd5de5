from __future__ import annotations

import json
import unittest
from typing import Any

from discord_notify.application.send import send_notification
from discord_notify.domain.embed import COLOR_SUCCESS
from discord_notify.domain.models import BuildContext, NotificationRequest
from discord_notify.errors import ConfigurationError, DeliveryError

HOOK_URL = "https://discord.com/api/webhooks/123/abc"


def make_context(**overrides: object) -> BuildContext:
    base: dict[str, object] = {
        "job_name": "demo-job",
        "build_url": "http://x/1",
        "result": "SUCCESS",
    }
    return BuildContext(**(base | overrides))


class RecordingTransport:
    def __init__(self, status: int = 204) -> None:
        self.status = status
        self.calls: list[dict[str, Any]] = []

    def __call__(self, *, url: str, body: bytes) -> int:
        self.calls.append({"url": url, "payload": json.loads(body.decode("utf-8"))})
        return self.status


class RecordingSecrets:
    def __init__(self, value: str | None) -> None:
        self.value = value
        self.names: list[str] = []

    def __call__(self, name: str) -> str | None:
        self.names.append(name)
        return self.value


class ValidationTests(unittest.TestCase):
    def test_missing_or_empty_text_fails_before_network(self) -> None:
        for args in ({}, {"text": ""}, {"text": None, "url": HOOK_URL}):
            with self.subTest(args=args):
                transport = RecordingTransport()
                secrets = RecordingSecrets(HOOK_URL)

                with self.assertRaises(ConfigurationError):
                    send_notification(
                        args,
                        make_context(),
                        lookup_secret=secrets,
                        post_json=transport,
                    )

                self.assertEqual(transport.calls, [])
                self.assertEqual(secrets.names, [])

    def test_no_url_and_no_secret_fails(self) -> None:
        for secret in (None, "", "   "):
            with self.subTest(secret=secret):
                transport = RecordingTransport()

                with self.assertRaises(ConfigurationError) as exc:
                    send_notification(
                        {"text": "hi"},
                        make_context(),
                        lookup_secret=RecordingSecrets(secret),
                        post_json=transport,
                    )

                self.assertIn("discordkey", str(exc.exception))
                self.assertEqual(transport.calls, [])

    def test_non_http_destinations_fail_before_network(self) -> None:
        for url in (
            "discord.com/api/webhooks/1/secret-token",
            "ftp://discord.com/api/webhooks/1/secret-token",
            "https:///api/webhooks/1/secret-token",
        ):
            for args, secret in (({"text": "hi", "url": url}, None), ({"text": "hi"}, url)):
                with self.subTest(url=url, from_secret=secret is not None):
                    transport = RecordingTransport()

                    with self.assertRaises(ConfigurationError) as exc:
                        send_notification(
                            args,
                            make_context(),
                            lookup_secret=RecordingSecrets(secret),
                            post_json=transport,
                        )

                    self.assertNotIn("secret-token", str(exc.exception))
                    self.assertEqual(transport.calls, [])


class DestinationTests(unittest.TestCase):
    def test_explicit_url_skips_secret_lookup(self) -> None:
        transport = RecordingTransport()
        secrets = RecordingSecrets("https://discord.com/api/webhooks/999/other")

        send_notification(
            {"text": "hi", "url": HOOK_URL},
            make_context(),
            lookup_secret=secrets,
            post_json=transport,
        )

        self.assertEqual(secrets.names, [])
        self.assertEqual(transport.calls[0]["url"], HOOK_URL)

    def test_webhook_alias_is_explicit_url(self) -> None:
        transport = RecordingTransport()
        secrets = RecordingSecrets(None)

        send_notification(
            {"text": "hi", "webhook": HOOK_URL},
            make_context(),
            lookup_secret=secrets,
            post_json=transport,
        )

        self.assertEqual(secrets.names, [])
        self.assertEqual(transport.calls[0]["url"], HOOK_URL)

    def test_secret_used_when_no_url(self) -> None:
        transport = RecordingTransport()
        secrets = RecordingSecrets(f"{HOOK_URL}\n")

        send_notification(
            NotificationRequest(text="hi"),
            make_context(),
            lookup_secret=secrets,
            post_json=transport,
        )

        self.assertEqual(secrets.names, ["discordkey"])
        self.assertEqual(transport.calls[0]["url"], HOOK_URL)


class EndToEndTests(unittest.TestCase):
    def test_success_build_with_defaults(self) -> None:
        transport = RecordingTransport(status=204)

        status = send_notification(
            {"text": "Build finished"},
            make_context(),
            lookup_secret=RecordingSecrets(HOOK_URL),
            post_json=transport,
        )

        self.assertEqual(status, 204)
        self.assertEqual(len(transport.calls), 1)
        payload = transport.calls[0]["payload"]
        embed = payload["embeds"][0]
        self.assertEqual(embed["title"], "demo-job")
        self.assertEqual(embed["url"], "http://x/1")
        self.assertEqual(embed["color"], COLOR_SUCCESS)
        self.assertEqual(embed["footer"]["text"], "Jenkins • SUCCESS")
        self.assertEqual(embed["description"], "Build finished")
        self.assertEqual(payload["username"], "Jenkins")

    def test_explicit_color_overrides_failure_red(self) -> None:
        transport = RecordingTransport(status=200)

        status = send_notification(
            {"text": "oops", "color": 255},
            make_context(result="FAILURE"),
            lookup_secret=RecordingSecrets(HOOK_URL),
            post_json=transport,
        )

        self.assertEqual(status, 200)
        self.assertEqual(transport.calls[0]["payload"]["embeds"][0]["color"], 255)

    def test_non_2xx_status_raises_delivery_error(self) -> None:
        transport = RecordingTransport(status=500)

        with self.assertRaises(DeliveryError) as exc:
            send_notification(
                {"text": "hi"},
                make_context(),
                lookup_secret=RecordingSecrets(HOOK_URL),
                post_json=transport,
            )

        self.assertEqual(exc.exception.status_code, 500)
        self.assertEqual(len(transport.calls), 1)

    def test_transport_errors_propagate(self) -> None:
        def failing_transport(*, url: str, body: bytes) -> int:
            raise DeliveryError("connection refused")

        with self.assertRaises(DeliveryError):
            send_notification(
                {"text": "hi", "url": HOOK_URL},
                make_context(),
                lookup_secret=RecordingSecrets(None),
                post_json=failing_transport,
            )


if __name__ == "__main__":
    unittest.main()
