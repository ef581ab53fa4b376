"""
Domain layer - catalog records and match outcomes.

No dependencies on infrastructure or frameworks.
"""
from coursebot.domain.entities import CatalogItem, InboundEvent
from coursebot.domain.outcomes import (
    MatchOutcome,
    NotFoundPlain,
    NotFoundWithQuickReply,
    Prompt,
    ShowItems,
)

__all__ = [
    "CatalogItem",
    "InboundEvent",
    "MatchOutcome",
    "NotFoundPlain",
    "NotFoundWithQuickReply",
    "Prompt",
    "ShowItems",
]
