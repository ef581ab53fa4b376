#!/usr/bin/env python3
"""
Webhook Simulator Utility

Generates LINE webhook payloads with a valid X-Line-Signature for testing
the bot locally without a real LINE channel.

Usage:
    python -m coursebot.utils.webhook_simulator "ดูคอร์สทั้งหมด"
    python -m coursebot.utils.webhook_simulator "หมวดหมู่ bakery" --url http://localhost:3000/webhook
"""
import argparse
import base64
import hmac
import hashlib
import json
import time
import uuid
from typing import Optional

import httpx


class WebhookSimulator:
    """
    Generate LINE webhook payloads for local testing.

    Usage:
        simulator = WebhookSimulator(channel_secret="your_channel_secret")
        payload_bytes, signature = simulator.generate_text_event("bread")

        response = httpx.post(
            "http://localhost:3000/webhook",
            content=payload_bytes,
            headers={"X-Line-Signature": signature}
        )
    """

    def __init__(self, channel_secret: str = ""):
        """
        Args:
            channel_secret: LINE_CHANNEL_SECRET (empty: signature is still
                generated, the server ignores it when validation is off)
        """
        self.channel_secret = channel_secret

    def generate_text_event(
        self,
        *message_texts: str,
        user_id: str = "U0000000000000000000000000000test",
        reply_token: Optional[str] = None,
        timestamp_ms: Optional[int] = None
    ) -> tuple[bytes, str]:
        """
        Generate a webhook delivery with one text message event per text.

        Args:
            message_texts: Text of each message event
            user_id: LINE user ID of the sender
            reply_token: Reply token for every event (defaults to a random one each)
            timestamp_ms: Timestamp in milliseconds (defaults to current time)

        Returns:
            Tuple of (payload_bytes, signature_header)
        """
        if timestamp_ms is None:
            timestamp_ms = int(time.time() * 1000)

        events = [
            {
                "type": "message",
                "mode": "active",
                "timestamp": timestamp_ms,
                "source": {"type": "user", "userId": user_id},
                "webhookEventId": uuid.uuid4().hex.upper(),
                "replyToken": reply_token or uuid.uuid4().hex,
                "message": {
                    "id": str(uuid.uuid4().int)[:18],
                    "type": "text",
                    "text": text
                }
            }
            for text in message_texts
        ]

        payload = {"destination": "U" + "0" * 32, "events": events}
        payload_bytes = json.dumps(payload, ensure_ascii=False, separators=(',', ':')).encode('utf-8')

        return payload_bytes, self.sign(payload_bytes)

    def sign(self, payload_bytes: bytes) -> str:
        """Compute the X-Line-Signature value for a body."""
        digest = hmac.new(
            self.channel_secret.encode('utf-8'),
            payload_bytes,
            hashlib.sha256
        ).digest()
        return base64.b64encode(digest).decode('utf-8')

    def pretty_print_payload(self, payload_bytes: bytes) -> str:
        return json.dumps(json.loads(payload_bytes), indent=2, ensure_ascii=False)


def main():
    parser = argparse.ArgumentParser(
        description="Send a simulated LINE text message to the local webhook"
    )
    parser.add_argument("texts", nargs="+", help="Message text (one event per argument)")
    parser.add_argument("--url", default="http://localhost:3000/webhook", help="Webhook URL")
    parser.add_argument("--secret", default=None, help="Channel secret (defaults to LINE_CHANNEL_SECRET)")
    parser.add_argument("--dry-run", action="store_true", help="Print the payload without sending")
    args = parser.parse_args()

    if args.secret is None:
        from coursebot.config import settings
        args.secret = settings.line_channel_secret

    simulator = WebhookSimulator(channel_secret=args.secret)
    payload_bytes, signature = simulator.generate_text_event(*args.texts)

    print(simulator.pretty_print_payload(payload_bytes))
    if args.dry_run:
        return

    response = httpx.post(
        args.url,
        content=payload_bytes,
        headers={"Content-Type": "application/json", "X-Line-Signature": signature}
    )
    print(f"→ {response.status_code} {response.text}")


if __name__ == '__main__':
    main()
