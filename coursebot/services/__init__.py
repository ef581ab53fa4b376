"""
Services package for business logic.
"""
from coursebot.services.reply_dispatcher import ReplyDispatcher, chunk_items
from coursebot.services.event_handler import EventHandler

__all__ = ['ReplyDispatcher', 'chunk_items', 'EventHandler']
