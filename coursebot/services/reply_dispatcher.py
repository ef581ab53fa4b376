"""
Reply dispatch service.

Turns match results into LINE reply calls. Catalog replies are split into
carousels of at most 12 cards and sent one after another with a fixed pause
between them to stay under LINE's rate limit.
"""
import asyncio
import logging
from typing import Awaitable, Callable, List, Sequence, TypeVar

from coursebot.config import FeatureFlags, MAX_CAROUSEL_BUBBLES
from coursebot.core.interfaces import IReplyClient
from coursebot.clients.line_messages import carousel_message, quick_reply_message, text_message
from coursebot.domain.entities import CatalogItem
from coursebot.rules.card_composer import compose_card

logger = logging.getLogger(__name__)

T = TypeVar("T")


def chunk_items(items: Sequence[T], size: int = MAX_CAROUSEL_BUBBLES) -> List[List[T]]:
    """Split items into ordered chunks of at most ``size``."""
    if size < 1:
        raise ValueError("chunk size must be at least 1")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


class ReplyDispatcher:
    """
    Sends catalog carousels and text replies through a reply client.

    Usage:
        dispatcher = ReplyDispatcher(line_client, settings.features)
        await dispatcher.send_catalog(reply_token, courses)
    """

    def __init__(
        self,
        client: IReplyClient,
        flags: FeatureFlags,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        chunk_size: int = MAX_CAROUSEL_BUBBLES,
        pacing_seconds: float = 1.0
    ):
        """
        Initialize dispatcher.

        Args:
            client: Reply client (LineClient in production)
            flags: Feature flags passed through to the card composer
            sleep: Coroutine used for the pause between chunks
            chunk_size: Max cards per carousel (1..12)
            pacing_seconds: Pause between consecutive carousels
        """
        self._client = client
        self._flags = flags
        self._sleep = sleep
        self._chunk_size = max(1, min(chunk_size, MAX_CAROUSEL_BUBBLES))
        self._pacing_seconds = pacing_seconds

    async def send_catalog(self, reply_token: str, items: Sequence[CatalogItem]) -> int:
        """
        Send items as one or more carousels, in order.

        Chunks are sent sequentially; every chunk but the last is followed
        by a pause.

        Args:
            reply_token: Reply token from the inbound event
            items: Courses to show

        Returns:
            Number of carousel messages sent
        """
        chunks = chunk_items(items, self._chunk_size)

        for index, chunk in enumerate(chunks):
            message = carousel_message([compose_card(item, self._flags) for item in chunk])
            await self._client.reply_message(reply_token, [message])
            logger.info(f"📤 Carousel {index + 1}/{len(chunks)} sent ({len(chunk)} card(s))")

            if index < len(chunks) - 1:
                await self._sleep(self._pacing_seconds)

        return len(chunks)

    async def send_text(self, reply_token: str, text: str) -> None:
        await self._client.reply_message(reply_token, [text_message(text)])

    async def send_text_with_quick_reply(self, reply_token: str, text: str) -> None:
        await self._client.reply_message(reply_token, [quick_reply_message(text)])
