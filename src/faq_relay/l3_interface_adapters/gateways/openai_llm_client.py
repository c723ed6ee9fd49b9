"""Gateway: OpenAI-compatible streaming LLM client — implements ChatStreamClient port.

Works with any OpenAI-compatible API: OpenAI, Gemini, Groq, Together, vLLM, etc.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

import openai

from faq_relay.l1_entities.chat_message import ChatMessage

log = logging.getLogger('faq.llm')

DEFAULT_BASE_URL = 'https://api.openai.com/v1'


def delta_text(chunk: Any) -> str:
    """Extract the text delta from a streamed ChatCompletionChunk; '' when absent."""
    choices = getattr(chunk, 'choices', None)
    if not choices:
        return ''
    delta = getattr(choices[0], 'delta', None)
    if delta is None:
        return ''
    return getattr(delta, 'content', None) or ''


class OpenAICompatLLMClient:
    """Wraps one openai.AsyncOpenAI handle to implement the ChatStreamClient protocol."""

    def __init__(
        self,
        api_key: str = '',
        base_url: str = DEFAULT_BASE_URL,
        client: openai.AsyncOpenAI | None = None,
    ) -> None:
        self._base_url = base_url
        # An empty key is accepted here; the API rejects it on the first call.
        self._client = client or openai.AsyncOpenAI(api_key=api_key, base_url=base_url)

    async def stream_chat(
        self,
        model: str,
        messages: list[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> AsyncIterator[str]:
        stream = await self._client.chat.completions.create(
            model=model,
            messages=[{'role': m.role, 'content': m.content} for m in messages],  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
            temperature=temperature,
            max_tokens=max_tokens,
            stream=True,
        )
        log.debug('Stream opened: model=%s, base_url=%s', model, self._base_url)
        async for chunk in stream:
            yield delta_text(chunk)

