"""
Course catalog repository backed by Firestore.

Pure read with no caching: every call streams the collection fresh.
"""
import logging
from typing import List

from coursebot.core.interfaces import ICourseRepository
from coursebot.domain.entities import CatalogItem

logger = logging.getLogger(__name__)


class FirestoreCourseRepository(ICourseRepository):
    """
    Firestore implementation of ICourseRepository.

    Usage:
        repo = FirestoreCourseRepository(firestore_async.client())
        courses = await repo.fetch_active_catalog()
    """

    def __init__(self, client, collection: str = "courses"):
        """
        Initialize repository.

        Args:
            client: Async Firestore client (None means storage unavailable)
            collection: Name of the course collection
        """
        self._client = client
        self._collection = collection

    async def fetch_active_catalog(self) -> List[CatalogItem]:
        """
        Fetch every document flagged ``active: true``.

        Returns:
            Active courses in storage order. An empty list means either an
            empty catalog or a read failure; the failure is logged.
        """
        courses: List[CatalogItem] = []

        if self._client is None:
            logger.error("❌ Firestore client not available - returning empty catalog")
            return courses

        try:
            snapshot_size = 0
            async for doc in self._client.collection(self._collection).stream():
                snapshot_size += 1
                data = doc.to_dict() or {}
                if CatalogItem.is_active(data):
                    courses.append(CatalogItem.from_document(doc.id, data))

            logger.info(f"Firestore snapshot size: {snapshot_size}")
            logger.info(f"Filtered courses: {len(courses)}")
            return courses

        except Exception as e:
            # google.api_core errors carry code/details; fall back to the message
            code = getattr(e, "code", None)
            details = getattr(e, "details", None) or str(e)
            logger.error(
                f"❌ Error fetching courses from Firestore - code: {code}, details: {details}",
                exc_info=True
            )
            return []
