"""
Tests for the LINE Course Bot

Tests are organized by functionality:
- test_intent_matcher.py: Message classification rules
- test_card_composer.py: Flex bubble rendering
- test_reply_dispatcher.py: Carousel chunking and pacing
- test_event_handler.py: Per-event orchestration and error isolation
- api/test_webhooks.py: HTTP routes
"""
