"""
Match outcomes produced by the intent matcher.

MatchOutcome is a closed union; the event handler dispatches on it with
``match`` and must handle every variant.
"""
from dataclasses import dataclass
from typing import Tuple, Union

from coursebot.domain.entities import CatalogItem


@dataclass(frozen=True)
class ShowItems:
    """Reply with a carousel of these items (storage order)."""
    items: Tuple[CatalogItem, ...]


@dataclass(frozen=True)
class Prompt:
    """Ask the user for more input (e.g. a missing category name)."""
    text: str


@dataclass(frozen=True)
class NotFoundWithQuickReply:
    """Nothing matched; reply with suggestion chips."""
    text: str


@dataclass(frozen=True)
class NotFoundPlain:
    """Nothing matched; reply with plain text."""
    text: str


MatchOutcome = Union[ShowItems, Prompt, NotFoundWithQuickReply, NotFoundPlain]
