"""Configuration management using environment variables"""
import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# LINE rejects carousels with more than 12 bubbles
MAX_CAROUSEL_BUBBLES = 12


def _get_bool(key: str, default: bool = True) -> bool:
    """Read a boolean flag ("true"/"false", "1"/"0", "yes"/"no")."""
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class FeatureFlags:
    """Process-wide presentation and matching toggles."""
    themed_cards: bool = True
    fuzzy_search: bool = True
    category_search: bool = True
    quick_reply: bool = True

    @classmethod
    def from_env(cls) -> "FeatureFlags":
        return cls(
            themed_cards=_get_bool("FEATURE_THEMED_CARDS"),
            fuzzy_search=_get_bool("FEATURE_FUZZY_SEARCH"),
            category_search=_get_bool("FEATURE_CATEGORY_SEARCH"),
            quick_reply=_get_bool("FEATURE_QUICK_REPLY"),
        )


class Settings:
    """Application settings - YAGNI: Only what we need right now"""

    def __init__(self):
        # Environment
        self.environment = os.getenv("ENVIRONMENT", "development")

        # LINE Messaging API credentials
        # Missing token is a valid state: replies become no-ops
        self.line_token = (
            os.getenv("LINE_TOKEN") or os.getenv("LINE_CHANNEL_ACCESS_TOKEN", "")
        ).strip()
        self.line_channel_secret = os.getenv("LINE_CHANNEL_SECRET", "").strip()
        self.line_api_base_url = os.getenv(
            "LINE_API_BASE_URL", "https://api.line.me/v2/bot"
        ).rstrip("/")
        self.line_api_timeout = float(os.getenv("LINE_API_TIMEOUT", "10.0"))  # seconds

        # Catalog store
        self.firestore_collection = os.getenv("FIRESTORE_COLLECTION", "courses")

        # Reply pacing (LINE rate limit)
        chunk_size = int(os.getenv("REPLY_CHUNK_SIZE", str(MAX_CAROUSEL_BUBBLES)))
        self.reply_chunk_size = max(1, min(chunk_size, MAX_CAROUSEL_BUBBLES))
        self.reply_pacing_seconds = float(os.getenv("REPLY_PACING_SECONDS", "1.0"))

        # Feature flags
        self.features = FeatureFlags.from_env()

        # Server configuration
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "3000"))

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        self._warn_missing_credentials()

    @property
    def replies_enabled(self) -> bool:
        return bool(self.line_token)

    @property
    def signature_validation_enabled(self) -> bool:
        return bool(self.line_channel_secret)

    def _warn_missing_credentials(self) -> None:
        """Warn about missing credentials. Never raises, even in production."""
        logger = logging.getLogger(__name__)

        if not self.line_token:
            logger.warning(
                "⚠️  LINE_TOKEN environment variable is not set. "
                "LINE messages will not be sent until it is configured."
            )
        if not self.line_channel_secret:
            logger.warning(
                "⚠️  LINE_CHANNEL_SECRET is not set - webhook signature validation is disabled"
            )


# Global settings instance
settings = Settings()
