"""Rocket.Chat incoming-webhook client.

The async methods are the primary surface; the *_sync methods block the
calling thread. Both share payload building and the status check, and open a
fresh httpx client per request.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import httpx

from .config import Settings, get_settings
from .errors import RequestError, ResponseError
from .log import get_logger
from .rendering.payload import build_payload, payload_to_json
from .schemas.message import Message

logger = get_logger("rocketchat_client")


def _check_response(response: httpx.Response) -> httpx.Response:
    # Only an exact 200 counts as delivered; 201/202/204 are failures too.
    if response.status_code != 200:
        logger.warning(f"Webhook rejected message: HTTP {response.status_code}")
        raise ResponseError(response.status_code, response)
    return response


@dataclass(frozen=True)
class RocketChat:
    """
    Client bound to one webhook URL and one channel (#channel or @user).
    Instances are immutable; set_channel() returns a new client.
    """

    webhook_url: str
    channel: str

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "RocketChat":
        settings = settings or get_settings()
        if not settings.ROCKETCHAT_WEBHOOK_URL or not settings.ROCKETCHAT_CHANNEL:
            raise ValueError("ROCKETCHAT_WEBHOOK_URL and ROCKETCHAT_CHANNEL must be set")
        return cls(settings.ROCKETCHAT_WEBHOOK_URL, settings.ROCKETCHAT_CHANNEL)

    def set_channel(self, channel: str) -> "RocketChat":
        return dataclasses.replace(self, channel=channel)

    def _body(self, message: Message) -> Dict[str, Any]:
        body = payload_to_json(build_payload(message, self.channel))
        logger.debug(f"POST webhook for channel {self.channel}")
        return body

    async def send_text(self, text: str) -> httpx.Response:
        return await self.send_message(Message().set_text(text))

    async def send_message(self, message: Message) -> httpx.Response:
        """
        Posts one message. Returns the response on HTTP 200.
        Raises RequestError when no response was obtained and ResponseError
        for any other status code.
        """
        body = self._body(message)
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(self.webhook_url, json=body)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"Webhook request failed: {e!r}")
            raise RequestError() from e
        return _check_response(response)

    async def send_messages(self, messages: Iterable[Message]) -> None:
        """Sends in order and stops at the first failure."""
        for message in messages:
            await self.send_message(message)

    def send_text_sync(self, text: str) -> httpx.Response:
        return self.send_message_sync(Message().set_text(text))

    def send_message_sync(self, message: Message) -> httpx.Response:
        body = self._body(message)
        try:
            with httpx.Client() as client:
                response = client.post(self.webhook_url, json=body)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"Webhook request failed: {e!r}")
            raise RequestError() from e
        return _check_response(response)

    def send_messages_sync(self, messages: Iterable[Message]) -> None:
        for message in messages:
            self.send_message_sync(message)
