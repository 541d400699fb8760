"""Errors raised by the webhook client.

RequestError means no response came back at all; ResponseError means the
server answered with something other than 200.
"""

from __future__ import annotations

from typing import Optional

import httpx


class RocketChatError(Exception):
    """Base class for everything this library raises."""


class RequestError(RocketChatError):
    def __init__(self, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(f"Request error: {status_code}")


class ResponseError(RocketChatError):
    def __init__(self, status_code: int, response: Optional[httpx.Response] = None):
        self.status_code = status_code
        self.response = response
        super().__init__(f"Response error: {status_code}")
