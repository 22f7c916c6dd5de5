"""Application use-case: send one build notification.

Mental model refresher:
- Application layer coordinates the flow across domain and adapters.
- The flow is straight-line:
  validate -> resolve destination -> defaults -> serialize -> POST -> status
- Collaborators (secret lookup, HTTP transport) are injected so the use-case
  runs without a live CI environment or network.
"""

from __future__ import annotations

from ..adapters.real_senders import require_webhook_url
from ..adapters.request import parse_notification_request
from ..domain.embed import build_payload, serialize_payload
from ..domain.models import BuildContext, NotificationRequest
from ..errors import ConfigurationError, DeliveryError
from ..types import InvocationArgs, PostJsonFn, SecretLookupFn

WEBHOOK_CREDENTIAL_ID = "discordkey"


def send_notification(
    request: NotificationRequest | InvocationArgs,
    build_context: BuildContext,
    *,
    lookup_secret: SecretLookupFn,
    post_json: PostJsonFn,
) -> int:
    """Send one Discord embed for the current build and return the HTTP status.

    Raises `ConfigurationError` before any I/O when text or destination is
    missing, and `DeliveryError` when the POST does not return 2xx.
    """
    if not isinstance(request, NotificationRequest):
        request = parse_notification_request(request)

    webhook_url = resolve_webhook_url(request, lookup_secret)
    body = serialize_payload(build_payload(request, build_context))

    status = int(post_json(url=webhook_url, body=body))
    if status < 200 or status >= 300:
        raise DeliveryError(
            f"Webhook POST failed with status {status}",
            status_code=status,
        )
    return status


def resolve_webhook_url(
    request: NotificationRequest,
    lookup_secret: SecretLookupFn,
) -> str:
    """Return the explicit URL, else the stored credential.

    The secret store is only consulted when no URL was given. An empty secret
    counts as not found. Either way the URL must be absolute http(s).
    """
    if request.url:
        require_webhook_url(request.url)
        return request.url

    secret = lookup_secret(WEBHOOK_CREDENTIAL_ID)
    if secret is None or not secret.strip():
        raise ConfigurationError(
            "No webhook URL provided and credential "
            f"'{WEBHOOK_CREDENTIAL_ID}' not found."
        )
    webhook_url = secret.strip()
    require_webhook_url(webhook_url)
    return webhook_url
