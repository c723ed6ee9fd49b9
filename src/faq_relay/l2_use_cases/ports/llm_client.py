"""Port: streaming LLM chat client."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol

from faq_relay.l1_entities.chat_message import ChatMessage


class ChatStreamClient(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract streaming chat client. Zero framework types leak through."""

    def stream_chat(
        self,
        model: str,
        messages: list[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> AsyncIterator[str]:
        """Stream the reply as raw text deltas. A delta may be empty."""
        ...
