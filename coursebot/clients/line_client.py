"""
LINE Messaging API client for sending reply messages.

Uses the channel access token from settings. Without a token the client
stays usable but every reply is a logged no-op.
"""
import httpx
import logging
from typing import List, Optional
from coursebot.config import Settings
from coursebot.core.interfaces import IReplyClient

logger = logging.getLogger(__name__)


class LineAPIError(Exception):
    """Exception raised when a LINE API request fails"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_body: Optional[dict] = None):
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(self.message)


class LineClient(IReplyClient):
    """
    Client for the LINE Messaging API reply endpoint.

    Usage:
        async with httpx.AsyncClient() as http_client:
            client = LineClient(http_client, settings)
            await client.reply_message(reply_token, [text_message("hi")])
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Settings,
        logger_instance: logging.Logger = logger
    ):
        """
        Initialize LINE API client.

        Args:
            http_client: httpx AsyncClient for making HTTP requests
            settings: Application settings containing the channel access token
            logger_instance: Logger for tracking API calls
        """
        self._http_client = http_client
        self._settings = settings
        self._logger = logger_instance
        self._api_base_url = settings.line_api_base_url

    @property
    def enabled(self) -> bool:
        return bool(self._settings.line_token)

    async def reply_message(self, reply_token: str, messages: List[dict]) -> Optional[dict]:
        """
        Send reply messages for an inbound event.

        Args:
            reply_token: Reply token from the webhook event
            messages: LINE message objects (at most 5 per call)

        Returns:
            Parsed response body, or None if LINE_TOKEN is not set

        Raises:
            ValueError: If reply_token or messages is empty
            LineAPIError: If the API request fails
        """
        if not self.enabled:
            self._logger.warning("⚠️ LINE_TOKEN is not set. Cannot send reply message.")
            return None

        if not reply_token or not reply_token.strip():
            raise ValueError("reply_token cannot be empty")

        if not messages:
            raise ValueError("messages cannot be empty")

        url = f"{self._api_base_url}/message/reply"
        payload = {
            "replyToken": reply_token,
            "messages": messages
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._settings.line_token}"
        }

        message_types = ",".join(m.get("type", "?") for m in messages)
        self._logger.info(f"📤 Sending reply ({message_types})")

        try:
            response = await self._http_client.post(
                url,
                json=payload,
                headers=headers,
                timeout=self._settings.line_api_timeout
            )
        except httpx.TimeoutException as e:
            self._logger.error(f"❌ Request timeout sending LINE reply: {e}")
            raise LineAPIError(
                message=f"Request timeout: {str(e)}",
                status_code=None,
                response_body=None
            ) from e
        except httpx.RequestError as e:
            self._logger.error(f"❌ Request error sending LINE reply: {e}")
            raise LineAPIError(
                message=f"Request error: {str(e)}",
                status_code=None,
                response_body=None
            ) from e

        if 200 <= response.status_code < 300:
            self._logger.info(f"✅ Reply sent successfully - status: {response.status_code}")
            try:
                return response.json() if response.text else {}
            except ValueError:
                return {}

        try:
            error_data = response.json() if response.text else {}
        except ValueError:
            error_data = {"raw": response.text}
        if not isinstance(error_data, dict):
            error_data = {"raw": error_data}
        error_message = error_data.get("message", "Unknown error")

        self._logger.error(
            f"❌ LINE API error - "
            f"status: {response.status_code}, "
            f"message: {error_message}"
        )

        raise LineAPIError(
            message=f"LINE API error: {error_message}",
            status_code=response.status_code,
            response_body=error_data
        )
