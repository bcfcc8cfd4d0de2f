"""Webhook handlers for GitHub events."""

import asyncio
import hashlib
import hmac
import logging
from dataclasses import dataclass
from enum import Enum

from fastapi import Request, HTTPException

from mergeguard.server.config import get_settings
from mergeguard.server.github_app import get_github_app_auth
from mergeguard.github.models import PullRequestEvent
from mergeguard.guard import TitleValidator


logger = logging.getLogger(__name__)


class WebhookEvent(str, Enum):
    """Supported webhook events."""

    PING = "ping"
    PULL_REQUEST = "pull_request"


# Actions that (re)run the title check
TITLE_CHECK_ACTIONS = frozenset({"opened", "edited"})


@dataclass
class WebhookPayload:
    """Parsed webhook payload."""

    event: str
    action: str
    installation_id: int
    repository: str
    sender: str
    data: dict


async def verify_webhook_signature(request: Request, body: bytes) -> bool:
    """Verify the webhook signature from GitHub.

    Args:
        request: FastAPI request
        body: Raw request body

    Returns:
        True if signature is valid

    Raises:
        HTTPException: If signature is invalid
    """
    settings = get_settings()

    if not settings.github_webhook_secret:
        logger.warning("Webhook secret not configured, skipping verification")
        return True

    signature_header = request.headers.get("X-Hub-Signature-256", "")
    if not signature_header:
        raise HTTPException(status_code=401, detail="Missing signature header")

    expected_signature = (
        "sha256="
        + hmac.new(
            settings.github_webhook_secret.encode(),
            body,
            hashlib.sha256,
        ).hexdigest()
    )

    if not hmac.compare_digest(signature_header, expected_signature):
        raise HTTPException(status_code=401, detail="Invalid signature")

    return True


def parse_webhook_payload(event_type: str, payload: dict) -> WebhookPayload:
    """Parse a webhook payload into a structured format.

    Args:
        event_type: GitHub event type
        payload: Raw payload dictionary

    Returns:
        Parsed WebhookPayload
    """
    return WebhookPayload(
        event=event_type,
        action=payload.get("action", ""),
        installation_id=payload.get("installation", {}).get("id", 0),
        repository=payload.get("repository", {}).get("full_name", ""),
        sender=payload.get("sender", {}).get("login", ""),
        data=payload,
    )


async def handle_pull_request_event(payload: WebhookPayload) -> dict:
    """Handle pull request events by running the title check.

    Every opened or edited event runs a fresh check, so a PR edited twice
    ends up with one check run per event.

    Args:
        payload: Webhook payload

    Returns:
        Result dictionary
    """
    if payload.action not in TITLE_CHECK_ACTIONS:
        return {"status": "skipped", "reason": f"unsupported action: {payload.action}"}

    event = PullRequestEvent.from_payload(payload.data)
    logger.info(
        f"Checking title of PR #{event.number} in {event.repo_full_name}: "
        f"{event.title!r}"
    )

    try:
        app_auth = get_github_app_auth()
        github_client = await app_auth.get_client_for_installation(
            payload.installation_id, event.repo_full_name
        )
    except Exception as e:
        logger.exception(f"Error authenticating for PR #{event.number}")
        return {"status": "error", "error": str(e)}

    validator = TitleValidator(github_client)
    # PyGithub blocks; keep the event loop free for other deliveries
    outcome = await asyncio.to_thread(validator.run, event)
    return outcome.to_dict()


async def handle_webhook(event_type: str, payload: dict) -> dict:
    """Main webhook handler that routes to specific handlers.

    Args:
        event_type: GitHub event type
        payload: Webhook payload

    Returns:
        Handler result
    """
    parsed = parse_webhook_payload(event_type, payload)

    logger.info(
        f"Received webhook: {event_type}/{parsed.action} "
        f"from {parsed.repository or 'N/A'} by {parsed.sender}"
    )

    if event_type == WebhookEvent.PULL_REQUEST:
        return await handle_pull_request_event(parsed)

    logger.debug(f"Ignoring event type: {event_type}")
    return {"status": "ignored", "event": event_type}
