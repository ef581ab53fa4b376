"""
Tests for the LINE Messaging API reply client.
"""
from unittest.mock import AsyncMock

import httpx
import pytest

from coursebot.clients.line_client import LineAPIError, LineClient
from coursebot.clients.line_messages import text_message
from coursebot.config import Settings


@pytest.fixture
def line_settings(monkeypatch):
    monkeypatch.setenv("LINE_TOKEN", "test_channel_token")
    monkeypatch.setenv("LINE_API_BASE_URL", "https://api.line.me/v2/bot")
    return Settings()


def _response(status_code, body=None):
    request = httpx.Request("POST", "https://api.line.me/v2/bot/message/reply")
    if body is None:
        return httpx.Response(status_code, request=request)
    return httpx.Response(status_code, json=body, request=request)


@pytest.mark.asyncio
async def test_reply_posts_payload_with_bearer_token(line_settings):
    http_client = AsyncMock(spec=httpx.AsyncClient)
    http_client.post = AsyncMock(return_value=_response(200, {}))
    client = LineClient(http_client, line_settings)

    result = await client.reply_message("reply-token-1", [text_message("hi")])

    assert result == {}
    http_client.post.assert_awaited_once()
    args, kwargs = http_client.post.call_args
    assert args[0] == "https://api.line.me/v2/bot/message/reply"
    assert kwargs["json"] == {
        "replyToken": "reply-token-1",
        "messages": [{"type": "text", "text": "hi"}],
    }
    assert kwargs["headers"]["Authorization"] == "Bearer test_channel_token"
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["timeout"] == line_settings.line_api_timeout


@pytest.mark.asyncio
async def test_missing_token_is_noop(monkeypatch):
    monkeypatch.delenv("LINE_TOKEN", raising=False)
    monkeypatch.delenv("LINE_CHANNEL_ACCESS_TOKEN", raising=False)
    http_client = AsyncMock(spec=httpx.AsyncClient)
    client = LineClient(http_client, Settings())

    assert client.enabled is False
    assert await client.reply_message("reply-token-1", [text_message("hi")]) is None
    http_client.post.assert_not_called()


@pytest.mark.asyncio
async def test_channel_access_token_alias(monkeypatch):
    monkeypatch.delenv("LINE_TOKEN", raising=False)
    monkeypatch.setenv("LINE_CHANNEL_ACCESS_TOKEN", "alias_token")

    assert LineClient(AsyncMock(spec=httpx.AsyncClient), Settings()).enabled is True


@pytest.mark.asyncio
async def test_api_error_raises(line_settings):
    http_client = AsyncMock(spec=httpx.AsyncClient)
    http_client.post = AsyncMock(return_value=_response(400, {"message": "Invalid reply token"}))
    client = LineClient(http_client, line_settings)

    with pytest.raises(LineAPIError) as exc_info:
        await client.reply_message("expired", [text_message("hi")])

    assert exc_info.value.status_code == 400
    assert "Invalid reply token" in exc_info.value.message
    assert exc_info.value.response_body == {"message": "Invalid reply token"}


@pytest.mark.asyncio
async def test_error_without_json_body(line_settings):
    http_client = AsyncMock(spec=httpx.AsyncClient)
    http_client.post = AsyncMock(return_value=_response(500))
    client = LineClient(http_client, line_settings)

    with pytest.raises(LineAPIError) as exc_info:
        await client.reply_message("reply-token-1", [text_message("hi")])

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_timeout_wrapped(line_settings):
    http_client = AsyncMock(spec=httpx.AsyncClient)
    http_client.post = AsyncMock(side_effect=httpx.TimeoutException("Timeout"))
    client = LineClient(http_client, line_settings)

    with pytest.raises(LineAPIError) as exc_info:
        await client.reply_message("reply-token-1", [text_message("hi")])

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.TimeoutException)


@pytest.mark.asyncio
async def test_connection_error_wrapped(line_settings):
    http_client = AsyncMock(spec=httpx.AsyncClient)
    http_client.post = AsyncMock(side_effect=httpx.ConnectError("refused"))
    client = LineClient(http_client, line_settings)

    with pytest.raises(LineAPIError):
        await client.reply_message("reply-token-1", [text_message("hi")])


@pytest.mark.asyncio
async def test_empty_arguments_rejected(line_settings):
    client = LineClient(AsyncMock(spec=httpx.AsyncClient), line_settings)

    with pytest.raises(ValueError):
        await client.reply_message("", [text_message("hi")])
    with pytest.raises(ValueError):
        await client.reply_message("reply-token-1", [])
