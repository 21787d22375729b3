"""
Messaging gateway handler.

Receives inbound chat messages, runs triage off the event loop, and sends the
verdict back through the gateway. A failed triage or a failed delivery produces
no reply and never stops the handler from serving later messages.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from typing import Optional, Protocol

from pydantic import BaseModel

from chatops.core.exceptions import TriageError

from .triage_service import TriageService, format_reply

logger = logging.getLogger("backend.gateway")


class InboundMessage(BaseModel):
    """Chat message delivered by the gateway."""

    message_id: int
    chat_id: int
    text: Optional[str] = None


class OutboundReply(BaseModel):
    """Reply to post back through the gateway."""

    chat_id: int
    text: str
    reply_to_message_id: Optional[int] = None


class MessageGateway(Protocol):
    async def send_message(self, reply: OutboundReply) -> None:
        ...


@dataclass
class TriageHandler:
    """
    Gateway handler for inbound chat messages.

    - threaded_replies: reply to the originating message instead of the chat.
    """

    service: TriageService
    gateway: Optional[MessageGateway] = None
    threaded_replies: bool = True

    async def handle(self, message: InboundMessage) -> Optional[OutboundReply]:
        if not message.text or not message.text.strip():
            return None

        try:
            # Blocking backend call; keep the event loop free for other messages.
            result = await asyncio.to_thread(self.service.triage, message.text)
        except TriageError as exc:
            logger.error("cannot triage message %s in chat %s: %s", message.message_id, message.chat_id, exc)
            return None

        reply = OutboundReply(
            chat_id=message.chat_id,
            text=format_reply(result),
            reply_to_message_id=message.message_id if self.threaded_replies else None,
        )
        if self.gateway is not None:
            try:
                await self.gateway.send_message(reply)
            except Exception as exc:
                logger.exception("cannot deliver reply to message %s in chat %s: %s", message.message_id, message.chat_id, exc)
                return None
        return reply
