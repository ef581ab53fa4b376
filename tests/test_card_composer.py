"""
Tests for Flex bubble composition.
"""
import pytest

from coursebot.domain.entities import CatalogItem
from coursebot.rules.card_composer import (
    DEFAULT_LINK_URL,
    PLACEHOLDER_IMAGE_URL,
    compose_card,
)


def _body_texts(card):
    return [c["text"] for c in card["body"]["contents"] if c["type"] == "text"]


def test_card_contains_course_fields(flags, bread_course):
    card = compose_card(bread_course, flags)

    assert card["type"] == "bubble"
    assert card["size"] == "mega"
    assert card["hero"]["url"] == "https://example.com/bread.jpg"
    assert _body_texts(card) == [
        "Bread Baking",
        "Sourdough and soft rolls",
        "💰 ราคา: 1500 บาท",
    ]

    button = card["footer"]["contents"][0]
    assert button["type"] == "button"
    assert button["action"] == {
        "type": "uri",
        "label": "สมัครคอร์ส",
        "uri": "https://example.com/enroll/bread",
    }


@pytest.mark.parametrize("item", [
    CatalogItem(id="bare"),
    CatalogItem(id="no_image", title="T", link="https://example.com/x"),
    CatalogItem(id="no_link", title="T", image_url="https://example.com/i.jpg"),
])
def test_urls_never_empty(flags, plain_flags, item):
    for f in (flags, plain_flags):
        card = compose_card(item, f)
        assert card["hero"]["url"]
        assert card["footer"]["contents"][0]["action"]["uri"]


def test_fallback_urls(flags):
    card = compose_card(CatalogItem(id="bare"), flags)
    assert card["hero"]["url"] == PLACEHOLDER_IMAGE_URL
    assert card["footer"]["contents"][0]["action"]["uri"] == DEFAULT_LINK_URL


def test_price_line_with_empty_price(flags):
    card = compose_card(CatalogItem(id="free"), flags)
    assert _body_texts(card)[-1] == "💰 ราคา:  บาท"


def test_themed_card_colors(flags, bread_course):
    card = compose_card(bread_course, flags)

    assert card["body"]["contents"][0]["color"] == "#C1440E"
    assert card["styles"] == {
        "body": {"backgroundColor": "#FFF8F0"},
        "footer": {"backgroundColor": "#FFF0E0"},
    }


def test_plain_card_colors(plain_flags, bread_course):
    card = compose_card(bread_course, plain_flags)

    assert card["body"]["contents"][0]["color"] == "#000000"
    assert "styles" not in card


def test_theme_does_not_change_content(flags, plain_flags, bread_course):
    themed = compose_card(bread_course, flags)
    plain = compose_card(bread_course, plain_flags)

    assert _body_texts(themed) == _body_texts(plain)
    assert themed["hero"] == plain["hero"]
    assert themed["footer"] == plain["footer"]


def test_compose_is_pure(flags, bread_course):
    assert compose_card(bread_course, flags) == compose_card(bread_course, flags)
    assert compose_card(bread_course, flags) is not compose_card(bread_course, flags)
