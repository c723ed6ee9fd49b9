"""Use case: answer a question from the FAQ directly, or via the model."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from faq_relay.l1_entities.chat_message import ChatMessage
from faq_relay.l1_entities.config import ChunkerConfig, FaqConfig
from faq_relay.l1_entities.faq import KnowledgeBase
from faq_relay.l2_use_cases.completion_relay_use_case import StreamCompletionUseCase
from faq_relay.l2_use_cases.text_stream_use_case import create_text_stream
from faq_relay.l2_use_cases.utils.faq_matcher import match_faq
from faq_relay.l2_use_cases.utils.prompt_builder import last_user_question

log = logging.getLogger('faq.answer')


class AnswerQuestionUseCase:
    """Routes a conversation to a direct FAQ reply or to the completion relay."""

    def __init__(
        self,
        relay: StreamCompletionUseCase,
        faq_config: FaqConfig,
        chunker_config: ChunkerConfig,
    ) -> None:
        self._relay = relay
        self._faq = faq_config
        self._chunker = chunker_config

    def execute(self, conversation: list[ChatMessage], knowledge_base: KnowledgeBase) -> AsyncIterator[bytes]:
        """Return the answer stream. Never raises; relay errors surface on iteration."""
        if self._faq.direct_reply:
            match = match_faq(last_user_question(conversation), knowledge_base, self._faq.match_threshold)
            if match is not None:
                log.info('Direct FAQ reply (score=%.2f): %s', match.score, match.entry.question)
                return create_text_stream(match.entry.answer, self._chunker.words_per_chunk)

        return self._relay.execute(conversation, knowledge_base.to_context())
