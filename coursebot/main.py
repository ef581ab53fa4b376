"""
LINE Course Bot - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from coursebot.api import webhooks, courses
from coursebot.config import settings, Settings
from coursebot.core import firestore
from coursebot.core.interfaces import ICourseRepository
from coursebot.clients import LineClient
from coursebot.repositories import FirestoreCourseRepository
from coursebot.rules.intent_matcher import IntentMatcher
from coursebot.services import EventHandler, ReplyDispatcher
from coursebot.services.event_handler import wait_for_pending_events
from coursebot.version import __version__
import httpx
import logging
import re


# Custom logging filter to redact sensitive data
class SensitiveDataFilter(logging.Filter):
    """Filter to redact channel tokens and reply tokens from logs"""

    def filter(self, record):
        if hasattr(record, 'msg'):
            msg = str(record.msg)

            # Authorization headers
            msg = re.sub(r"(Bearer\s+)[A-Za-z0-9+/=._-]+", r"\1[REDACTED]", msg)

            # Reply tokens in JSON/dict representations
            msg = re.sub(
                r"(['\"]replyToken['\"]:\s*['\"])([^'\"]+)(['\"])",
                r"\1[REDACTED]\3",
                msg
            )

            record.msg = msg
        return True


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Add filter to all loggers
for handler in logging.root.handlers:
    handler.addFilter(SensitiveDataFilter())

# Add filter to httpx logger (logs API requests)
httpx_logger = logging.getLogger('httpx')
httpx_logger.addFilter(SensitiveDataFilter())

logger = logging.getLogger(__name__)

# Max wait for in-flight replies before the HTTP client is closed
SHUTDOWN_DRAIN_SECONDS = 10.0


def build_event_handler(
    app_settings: Settings,
    http_client: httpx.AsyncClient,
    repository: ICourseRepository
) -> EventHandler:
    """Wire matcher, composer flags and reply client into an EventHandler."""
    line_client = LineClient(
        http_client=http_client,
        settings=app_settings
    )
    dispatcher = ReplyDispatcher(
        client=line_client,
        flags=app_settings.features,
        chunk_size=app_settings.reply_chunk_size,
        pacing_seconds=app_settings.reply_pacing_seconds
    )
    return EventHandler(
        repository=repository,
        matcher=IntentMatcher(app_settings.features),
        dispatcher=dispatcher
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - handles startup and shutdown"""
    # Startup
    logger.info("🚀 Starting LINE Course Bot")
    logger.info(f"📦 Version: {__version__}")
    logger.info(f"📝 Environment: {settings.environment}")
    logger.info(f"🧩 Features: {settings.features}")

    firestore.init_firestore()

    http_client = httpx.AsyncClient()
    repository = FirestoreCourseRepository(
        firestore.get_firestore_client(),
        collection=settings.firestore_collection
    )
    app.state.course_repository = repository
    app.state.event_handler = build_event_handler(settings, http_client, repository)

    if not settings.replies_enabled:
        logger.warning("⚠️ Outbound replies disabled - set LINE_TOKEN to enable")

    logger.info("✅ Configuration loaded successfully")
    logger.info("🔗 Webhook endpoint: /webhook")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await wait_for_pending_events(timeout=SHUTDOWN_DRAIN_SECONDS)
    await http_client.aclose()
    firestore.close_firestore()


app = FastAPI(
    title="LINE Course Bot",
    description="LINE webhook bot that recommends courses from a Firestore catalog",
    version=__version__,
    lifespan=lifespan
)


# Register webhook and diagnostic routes
app.include_router(webhooks.router, tags=["webhooks"])
app.include_router(courses.router, tags=["courses"])


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint"""
    return "Hello from your LINE Bot backend! Server is running."


@app.get("/health")
async def health_check():
    """Health check endpoint - no dependency checks"""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment
    }


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    logger.info(f"Server listening on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
