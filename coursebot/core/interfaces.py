"""
Core interfaces for the course catalog bot.

The event pipeline depends only on these abstractions so Firestore and the
LINE API can be swapped for fakes in tests.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from coursebot.domain.entities import CatalogItem


class ICourseRepository(ABC):
    """
    Read-only access to the course catalog.

    Implementations must fail soft: a storage error is logged and reported
    as an empty catalog, never raised.
    """

    @abstractmethod
    async def fetch_active_catalog(self) -> List['CatalogItem']:
        """
        Get all courses flagged active, in storage order.

        Returns:
            Active catalog items (empty on read failure)
        """
        pass


class IReplyClient(ABC):
    """Interface for sending reply messages to the messaging platform"""

    @abstractmethod
    async def reply_message(self, reply_token: str, messages: List[dict]) -> Optional[dict]:
        """
        Send reply messages correlated with an inbound event.

        Args:
            reply_token: One-time token from the inbound event
            messages: Platform message objects

        Returns:
            Response body, or None if replies are disabled

        Raises:
            LineAPIError: If the platform call fails
        """
        pass
