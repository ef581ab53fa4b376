"""LINE webhook endpoint"""
from fastapi import APIRouter, Request, HTTPException, status, Depends
from fastapi.responses import PlainTextResponse
from coursebot.config import settings
from coursebot.api.dependencies import get_event_handler
from coursebot.services.event_handler import EventHandler
import base64
import hashlib
import hmac
import json
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/webhook", response_class=PlainTextResponse)
async def handle_webhook(
    request: Request,
    event_handler: EventHandler = Depends(get_event_handler)
):
    """
    Webhook endpoint for receiving LINE events.

    Acknowledges with 200 "OK" right away. Each event is handled in its own
    background task after the response is sent; outcomes are only logged.

    Security: When LINE_CHANNEL_SECRET is configured, validates the
    X-Line-Signature header before accepting the payload.
    """
    raw_body = await request.body()

    if settings.signature_validation_enabled:
        signature_header = request.headers.get("X-Line-Signature", "")
        if not _validate_webhook_signature(raw_body, signature_header):
            logger.warning("❌ Invalid webhook signature - potential security threat")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid signature"
            )

    events = _extract_events(raw_body)
    if events:
        logger.info(f"📨 Webhook received - events: {len(events)}")
        event_handler.dispatch_events(events)

    # Always 200 so LINE does not redeliver
    return PlainTextResponse("OK", status_code=status.HTTP_200_OK)


def _extract_events(raw_body: bytes) -> list:
    """
    Parse the webhook body and return its events list.

    Returns:
        List of raw event dicts (empty for malformed or empty payloads)
    """
    try:
        body = json.loads(raw_body)
    except (ValueError, UnicodeDecodeError):
        logger.warning("Invalid webhook payload: not JSON")
        return []

    if not isinstance(body, dict):
        logger.warning("Invalid webhook payload: not a dictionary")
        return []

    events = body.get("events")
    if not isinstance(events, list):
        logger.warning("Invalid webhook payload: missing 'events' field")
        return []

    return events


def _validate_webhook_signature(payload: bytes, signature_header: str) -> bool:
    """
    Validate the X-Line-Signature header.

    LINE signs the raw body with HMAC-SHA256 keyed by the channel secret and
    sends the base64-encoded digest.

    Args:
        payload: Raw request body as bytes
        signature_header: Value of X-Line-Signature header

    Returns:
        True if signature is valid, False otherwise
    """
    if not settings.line_channel_secret:
        logger.error("LINE_CHANNEL_SECRET not configured - cannot validate webhook signature")
        return False

    if not signature_header:
        logger.warning("Missing signature header")
        # Still compute the digest below so timing doesn't reveal the branch
        signature_header = "invalid"

    computed_signature = base64.b64encode(
        hmac.new(
            settings.line_channel_secret.encode("utf-8"),
            payload,
            hashlib.sha256
        ).digest()
    )

    # Compare bytes: compare_digest rejects non-ASCII str
    return hmac.compare_digest(computed_signature, signature_header.encode("utf-8"))
