"""
Intent matching rules for inbound chat text.

Decides which reply branch applies to a message and which catalog items it
selects. Rules are evaluated in order; the first one that applies wins:

1. List-all trigger phrase
2. Category filter ("หมวดหมู่ <name>"), if enabled
3. Keyword/title match (fuzzy or exact substring)
4. No match (quick reply suggestions or plain text)
"""
import logging
import re
from typing import Sequence

from coursebot.config import FeatureFlags
from coursebot.domain.entities import CatalogItem
from coursebot.domain.outcomes import (
    MatchOutcome,
    NotFoundPlain,
    NotFoundWithQuickReply,
    Prompt,
    ShowItems,
)

logger = logging.getLogger(__name__)

LIST_ALL_TRIGGER = "ดูคอร์สทั้งหมด"
CATEGORY_TRIGGER = "หมวดหมู่"

EMPTY_CATALOG_TEXT = "ขณะนี้ยังไม่มีคอร์สที่เปิดสอนค่ะ"
CATEGORY_PROMPT_TEXT = 'กรุณาระบุหมวดหมู่ที่ต้องการค้นหา เช่น "หมวดหมู่ เบเกอรี่"'
CATEGORY_NOT_FOUND_TEXT = 'ไม่พบคอร์สในหมวดหมู่ "{category}"'
NOT_FOUND_QUICK_REPLY_TEXT = "ไม่พบคอร์สที่เกี่ยวข้อง ลองเลือกจากเมนูด้านล่างนะคะ 👇"
NOT_FOUND_TEXT = "ไม่พบคอร์สที่เกี่ยวข้องค่ะ"

_WHITESPACE = re.compile(r"\s+")


def fuzzy_match(input_text: str, target: str) -> bool:
    """
    Loose containment match.

    Whitespace is removed and both sides are lowercased; the match succeeds
    if either string contains the other. This is not edit-distance matching:
    "bred" does not match "bread".
    """
    i = _WHITESPACE.sub("", input_text.lower())
    t = _WHITESPACE.sub("", target.lower())
    return i in t or t in i


class IntentMatcher:
    """
    Classifies user text against the active catalog.

    Usage:
        matcher = IntentMatcher(settings.features)
        outcome = matcher.match("หมวดหมู่ bakery", courses)
    """

    def __init__(self, flags: FeatureFlags):
        self._flags = flags

    def match(self, text: str, catalog: Sequence[CatalogItem]) -> MatchOutcome:
        """
        Decide the reply for a message.

        Args:
            text: Raw user text (lowercased here)
            catalog: Active catalog items in storage order

        Returns:
            One of ShowItems, Prompt, NotFoundWithQuickReply, NotFoundPlain
        """
        message = text.lower()

        if LIST_ALL_TRIGGER in message:
            if not catalog:
                return NotFoundPlain(EMPTY_CATALOG_TEXT)
            return ShowItems(tuple(catalog))

        if self._flags.category_search and message.startswith(CATEGORY_TRIGGER):
            return self._match_category(message, catalog)

        if self._flags.fuzzy_search:
            matched = [item for item in catalog if self._fuzzy_hit(message, item)]
        else:
            matched = [item for item in catalog if self._exact_hit(message, item)]

        if matched:
            logger.info(f"🎯 Keyword match: {len(matched)} course(s)")
            return ShowItems(tuple(matched))

        if self._flags.quick_reply:
            return NotFoundWithQuickReply(NOT_FOUND_QUICK_REPLY_TEXT)
        return NotFoundPlain(NOT_FOUND_TEXT)

    def _match_category(self, message: str, catalog: Sequence[CatalogItem]) -> MatchOutcome:
        parts = message.split(" ")
        if len(parts) <= 1:
            return Prompt(CATEGORY_PROMPT_TEXT)

        category = " ".join(parts[1:]).strip()
        filtered = [item for item in catalog if category in item.category.lower()]
        if filtered:
            logger.info(f"🎯 Category match: {len(filtered)} course(s)")
            return ShowItems(tuple(filtered))
        return NotFoundPlain(CATEGORY_NOT_FOUND_TEXT.format(category=category))

    @staticmethod
    def _fuzzy_hit(message: str, item: CatalogItem) -> bool:
        if any(fuzzy_match(message, tag) for tag in item.keywords.split(",")):
            return True
        return fuzzy_match(message, item.title.lower())

    @staticmethod
    def _exact_hit(message: str, item: CatalogItem) -> bool:
        return message in item.keywords.lower() or message in item.title.lower()
