"""LINE Messaging API clients"""
from coursebot.clients.line_client import LineClient, LineAPIError

__all__ = ["LineClient", "LineAPIError"]
