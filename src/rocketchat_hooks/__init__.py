"""rocketchat-hooks - post messages and attachments to a Rocket.Chat incoming webhook.

    client = RocketChat("ROCKET_CHAT_WEBHOOK_URL", "#channel")
    await client.send_text("Text")
    client.send_text_sync("Text")

Components:
- schemas.message: Message / Attachment / Field builders
- rendering.payload: wire payload for the webhook endpoint
- client: async and blocking send operations
- errors: RequestError / ResponseError
"""

from .client import RocketChat
from .errors import RequestError, ResponseError, RocketChatError
from .schemas.message import Attachment, Field, Message

__all__ = [
    "Attachment",
    "Field",
    "Message",
    "RequestError",
    "ResponseError",
    "RocketChat",
    "RocketChatError",
]
