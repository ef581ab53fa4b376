"""
Domain entities for the course catalog bot.

CatalogItem is an immutable snapshot of one Firestore course document.
InboundEvent is the minimal slice of a LINE webhook event we act on.
"""
from dataclasses import dataclass
from typing import Any, Optional


def _as_text(value: Any) -> str:
    """Firestore fields may be missing, null or numeric (price)."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class CatalogItem:
    """
    One course offered through the bot.

    keywords holds the raw comma-separated tag list exactly as stored in the
    document's ``keyword`` field; splitting happens at match time.
    """

    id: str
    title: str = ""
    description: str = ""
    image_url: str = ""
    link: str = ""
    price: str = ""
    status: str = ""
    category: str = ""
    keywords: str = ""

    @classmethod
    def from_document(cls, doc_id: str, data: dict) -> "CatalogItem":
        """
        Map a Firestore document to a CatalogItem.

        Args:
            doc_id: Firestore document ID
            data: Document fields (``doc.to_dict()``)
        """
        return cls(
            id=doc_id,
            title=_as_text(data.get("title")),
            description=_as_text(data.get("description")),
            image_url=_as_text(data.get("image")),
            link=_as_text(data.get("link")),
            price=_as_text(data.get("price")),
            status=_as_text(data.get("status")),
            category=_as_text(data.get("category")),
            keywords=_as_text(data.get("keyword")),
        )

    @staticmethod
    def is_active(data: dict) -> bool:
        """Only a literal boolean True counts as active."""
        return data.get("active") is True

    def to_dict(self) -> dict:
        """Serialize using the document field names (used by /test-courses)."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "image": self.image_url,
            "link": self.link,
            "price": self.price,
            "status": self.status,
            "category": self.category,
            "keyword": self.keywords,
        }


@dataclass(frozen=True)
class InboundEvent:
    """A text message event that can be answered with a reply token."""

    message_text: str
    reply_token: str

    @classmethod
    def from_payload(cls, event: Any) -> Optional["InboundEvent"]:
        """
        Extract text and reply token from a LINE webhook event.

        Returns:
            InboundEvent, or None if the event is not a text message or
            either field is missing
        """
        if not isinstance(event, dict):
            return None

        message = event.get("message")
        if not isinstance(message, dict):
            return None

        text = message.get("text")
        reply_token = event.get("replyToken")

        if not isinstance(text, str) or not isinstance(reply_token, str):
            return None
        if not text or not reply_token:
            return None

        return cls(message_text=text, reply_token=reply_token)
