"""Core module containing interfaces."""

from coursebot.core.interfaces import ICourseRepository, IReplyClient

__all__ = ["ICourseRepository", "IReplyClient"]
