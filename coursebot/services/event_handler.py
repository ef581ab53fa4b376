"""
Per-event orchestration: extract, fetch catalog, match, reply.

Each webhook event is handled in its own asyncio task. Failures are logged
and end that event's handling only; they never reach the webhook response
or sibling events.
"""
import asyncio
import logging
from typing import Any, Iterable, List, Set

from coursebot.core.interfaces import ICourseRepository
from coursebot.domain.entities import InboundEvent
from coursebot.domain.outcomes import (
    MatchOutcome,
    NotFoundPlain,
    NotFoundWithQuickReply,
    Prompt,
    ShowItems,
)
from coursebot.rules.intent_matcher import IntentMatcher
from coursebot.services.reply_dispatcher import ReplyDispatcher

logger = logging.getLogger(__name__)

# Strong references to in-flight event tasks (the loop only keeps weak ones)
_background_tasks: Set[asyncio.Task] = set()


async def wait_for_pending_events(timeout: float = 10.0) -> int:
    """
    Wait for in-flight event tasks, e.g. before closing the HTTP client.

    Args:
        timeout: Max seconds to wait

    Returns:
        Number of tasks still running when the timeout expired
    """
    pending = list(_background_tasks)
    if not pending:
        return 0

    logger.info(f"⏳ Waiting for {len(pending)} in-flight event(s)")
    _, still_running = await asyncio.wait(pending, timeout=timeout)
    if still_running:
        logger.warning(f"⚠️ {len(still_running)} event(s) still running after {timeout}s")
    return len(still_running)


class EventHandler:
    """
    Handles one inbound LINE event end to end.

    Usage:
        handler = EventHandler(repository, IntentMatcher(flags), dispatcher)
        await handler.handle_event(event_dict)
    """

    def __init__(
        self,
        repository: ICourseRepository,
        matcher: IntentMatcher,
        dispatcher: ReplyDispatcher
    ):
        self._repository = repository
        self._matcher = matcher
        self._dispatcher = dispatcher

    async def handle_event(self, raw_event: Any) -> None:
        """
        Handle a single webhook event.

        Events without text or reply token are skipped silently. Any error
        is logged and swallowed here.
        """
        try:
            event = InboundEvent.from_payload(raw_event)
            if event is None:
                logger.debug("ℹ️ Skipped event without text or reply token")
                return

            courses = await self._repository.fetch_active_catalog()
            outcome = self._matcher.match(event.message_text, courses)
            logger.info(f"🎯 Match outcome: {type(outcome).__name__}")

            await self._act(event.reply_token, outcome)

        except Exception as e:
            logger.error(f"❌ Error handling event: {e}", exc_info=True)

    async def _act(self, reply_token: str, outcome: MatchOutcome) -> None:
        match outcome:
            case ShowItems(items=items):
                await self._dispatcher.send_catalog(reply_token, items)
            case Prompt(text=text) | NotFoundPlain(text=text):
                await self._dispatcher.send_text(reply_token, text)
            case NotFoundWithQuickReply(text=text):
                await self._dispatcher.send_text_with_quick_reply(reply_token, text)
            case _:
                raise TypeError(f"Unhandled match outcome: {outcome!r}")

    def dispatch_events(self, raw_events: Iterable[Any]) -> List[asyncio.Task]:
        """
        Start one independent task per event (fire-and-forget).

        Must be called from a running event loop.

        Returns:
            The created tasks (callers may ignore them)
        """
        tasks = []
        for raw_event in raw_events:
            task = asyncio.create_task(self.handle_event(raw_event))
            _background_tasks.add(task)
            task.add_done_callback(_background_tasks.discard)
            tasks.append(task)
        return tasks
