"""Use case: relay a streamed model reply as UTF-8 byte fragments."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from faq_relay.l1_entities.chat_message import ChatMessage
from faq_relay.l1_entities.config import CompletionConfig
from faq_relay.l2_use_cases.ports.llm_client import ChatStreamClient
from faq_relay.l2_use_cases.utils.prompt_builder import build_outbound_messages

log = logging.getLogger('faq.relay')


class StreamCompletionUseCase:
    """Prepends the FAQ system prompt and streams the model's reply.

    ``execute`` is an async generator: nothing is sent upstream until the
    caller starts iterating, and upstream failures are raised from the
    iteration rather than from the call.
    """

    def __init__(self, llm_client: ChatStreamClient, config: CompletionConfig) -> None:
        self._llm = llm_client
        self._config = config

    async def execute(self, conversation: list[ChatMessage], faq_context: str) -> AsyncIterator[bytes]:
        messages = build_outbound_messages(conversation, faq_context)
        log.info(
            'Completion request: model=%s, msgs=%d, context_chars=%d',
            self._config.model,
            len(messages),
            len(faq_context),
        )

        emitted = 0
        try:
            async for delta in self._llm.stream_chat(
                model=self._config.model,
                messages=messages,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
            ):
                if not delta:
                    continue
                emitted += 1
                yield delta.encode('utf-8')
        except Exception as e:
            log.error(
                'Completion stream failed after %d fragments: %s: %s',
                emitted,
                type(e).__name__,
                e,
                exc_info=True,
            )
            raise

        log.info('Completion finished (%d fragments)', emitted)
