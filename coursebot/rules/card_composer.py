"""
Flex bubble builder for catalog items.

compose_card is a pure function of the item and the feature flags; the
themed_cards flag only changes colours.
"""
from coursebot.config import FeatureFlags
from coursebot.domain.entities import CatalogItem

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/640x360?text=No+Image"
DEFAULT_LINK_URL = "https://your-default-link.com"
ENROLL_LABEL = "สมัครคอร์ส"

THEME_TITLE_COLOR = "#C1440E"
PLAIN_TITLE_COLOR = "#000000"
DESCRIPTION_COLOR = "#555555"
PRICE_COLOR = "#008080"
BUTTON_COLOR = "#FFA07A"
THEME_BODY_BACKGROUND = "#FFF8F0"
THEME_FOOTER_BACKGROUND = "#FFF0E0"


def format_price(price: str) -> str:
    return f"💰 ราคา: {price} บาท"


def compose_card(item: CatalogItem, flags: FeatureFlags) -> dict:
    """
    Build a LINE Flex bubble for one course.

    Image and button URLs always fall back to fixed defaults, so the
    bubble never carries an empty URL (LINE rejects those).

    Args:
        item: Course to render
        flags: Feature flags (themed_cards toggles the colour scheme)

    Returns:
        Flex bubble dict
    """
    card = {
        "type": "bubble",
        "size": "mega",
        "hero": {
            "type": "image",
            "url": item.image_url or PLACEHOLDER_IMAGE_URL,
            "size": "full",
            "aspectRatio": "16:9",
            "aspectMode": "cover",
        },
        "body": {
            "type": "box",
            "layout": "vertical",
            "spacing": "md",
            "contents": [
                {
                    "type": "text",
                    "text": item.title,
                    "weight": "bold",
                    "size": "xl",
                    "color": THEME_TITLE_COLOR if flags.themed_cards else PLAIN_TITLE_COLOR,
                    "wrap": True,
                },
                {
                    "type": "text",
                    "text": item.description,
                    "size": "sm",
                    "color": DESCRIPTION_COLOR,
                    "wrap": True,
                },
                {
                    "type": "separator",
                    "margin": "md",
                },
                {
                    "type": "text",
                    "text": format_price(item.price),
                    "size": "md",
                    "weight": "bold",
                    "color": PRICE_COLOR,
                },
            ],
        },
        "footer": {
            "type": "box",
            "layout": "vertical",
            "contents": [
                {
                    "type": "button",
                    "style": "primary",
                    "color": BUTTON_COLOR,
                    "action": {
                        "type": "uri",
                        "label": ENROLL_LABEL,
                        "uri": item.link or DEFAULT_LINK_URL,
                    },
                }
            ],
        },
    }

    if flags.themed_cards:
        card["styles"] = {
            "body": {"backgroundColor": THEME_BODY_BACKGROUND},
            "footer": {"backgroundColor": THEME_FOOTER_BACKGROUND},
        }

    return card
