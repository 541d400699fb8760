"""Webhook payload builders.

Combines a Message with the client's channel into the body expected by the
Rocket.Chat incoming webhook endpoint.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from rocketchat_hooks.schemas.message import Attachment, Message


class OutboundPayload(BaseModel):
    text: Optional[str] = None
    channel: Optional[str] = None
    attachments: List[Attachment] = []


def build_payload(message: Message, channel: str) -> OutboundPayload:
    """
    Copies text and attachments from the message and targets `channel`.
    The message is not modified.
    """
    return OutboundPayload(
        text=message.text,
        channel=channel,
        attachments=[a.model_copy(deep=True) for a in message.attachments],
    )


def payload_to_json(payload: OutboundPayload) -> Dict[str, Any]:
    """
    JSON-ready dict for the POST body.
    Unset optional keys are dropped at every level (absent, not null); empty
    attachment/field lists stay as [].
    """
    return payload.model_dump(mode="json", exclude_none=True)
