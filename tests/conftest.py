"""
Pytest configuration and shared fixtures.
"""
from typing import List, Optional

import pytest

from coursebot.config import FeatureFlags
from coursebot.core.interfaces import ICourseRepository, IReplyClient
from coursebot.domain.entities import CatalogItem


class FakeCourseRepository(ICourseRepository):
    """In-memory catalog; counts reads so tests can check there is no caching."""

    def __init__(self, items: Optional[List[CatalogItem]] = None, error: Exception = None):
        self.items = list(items or [])
        self.error = error
        self.calls = 0

    async def fetch_active_catalog(self) -> List[CatalogItem]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.items)


class RecordingReplyClient(IReplyClient):
    """Reply client that records every call instead of hitting LINE."""

    def __init__(self, error: Exception = None):
        self.calls = []
        self.error = error

    async def reply_message(self, reply_token: str, messages: List[dict]) -> Optional[dict]:
        self.calls.append((reply_token, messages))
        if self.error is not None:
            raise self.error
        return {}


@pytest.fixture
def flags():
    """All features on (production default)."""
    return FeatureFlags()


@pytest.fixture
def plain_flags():
    """All features off."""
    return FeatureFlags(
        themed_cards=False,
        fuzzy_search=False,
        category_search=False,
        quick_reply=False
    )


@pytest.fixture
def bread_course():
    return CatalogItem(
        id="course_bread",
        title="Bread Baking",
        description="Sourdough and soft rolls",
        image_url="https://example.com/bread.jpg",
        link="https://example.com/enroll/bread",
        price="1500",
        status="open",
        category="bakery",
        keywords="bread,baking"
    )


@pytest.fixture
def catalog(bread_course):
    return [
        bread_course,
        CatalogItem(
            id="course_cake",
            title="Chiffon Cake",
            description="Light and fluffy",
            price="1200",
            category="Cake",
            keywords="เค้ก,chiffon"
        ),
        CatalogItem(
            id="course_coffee",
            title="Latte Art",
            description="Milk foam basics",
            price="900",
            category="Drinks",
            keywords="coffee, latte"
        ),
    ]


def make_courses(count: int) -> List[CatalogItem]:
    return [
        CatalogItem(id=f"course_{i:03d}", title=f"Course {i}", price=str(100 + i))
        for i in range(count)
    ]
