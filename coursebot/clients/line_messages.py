"""
LINE Messaging API message object builders.

Plain dicts matching the reply API's JSON schema.
"""
from typing import List, Sequence

CAROUSEL_ALT_TEXT = "แนะนำคอร์สเรียน"

# Suggestion chips shown when nothing matched
QUICK_REPLY_SUGGESTIONS = (
    "ดูคอร์สทั้งหมด",
    "หมวดหมู่ เบเกอรี่",
    "หมวดหมู่ เค้ก",
)


def text_message(text: str) -> dict:
    return {"type": "text", "text": text}


def quick_reply_message(text: str, suggestions: Sequence[str] = QUICK_REPLY_SUGGESTIONS) -> dict:
    """Text message with message-action chips; each chip sends its own label."""
    message = text_message(text)
    message["quickReply"] = {
        "items": [
            {
                "type": "action",
                "action": {"type": "message", "label": suggestion, "text": suggestion},
            }
            for suggestion in suggestions
        ]
    }
    return message


def carousel_message(bubbles: List[dict], alt_text: str = CAROUSEL_ALT_TEXT) -> dict:
    """Flex message wrapping bubbles in a carousel (max 12 bubbles)."""
    return {
        "type": "flex",
        "altText": alt_text,
        "contents": {
            "type": "carousel",
            "contents": bubbles,
        },
    }
