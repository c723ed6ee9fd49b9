"""Tests for AnswerQuestionUseCase — direct FAQ reply vs. model relay."""

from __future__ import annotations

import pytest

from faq_relay.l1_entities.chat_message import ChatMessage
from faq_relay.l1_entities.config import ChunkerConfig, CompletionConfig, FaqConfig
from faq_relay.l1_entities.faq import KnowledgeBase
from faq_relay.l2_use_cases.answer_use_case import AnswerQuestionUseCase
from faq_relay.l2_use_cases.completion_relay_use_case import StreamCompletionUseCase
from tests.conftest import FakeChatStreamClient, collect


def _make_uc(fake: FakeChatStreamClient, *, direct_reply: bool = True, threshold: float = 0.6):
    relay = StreamCompletionUseCase(fake, CompletionConfig(model='m', temperature=0.7, max_tokens=500))
    return AnswerQuestionUseCase(
        relay=relay,
        faq_config=FaqConfig(knowledge_base='kb', match_threshold=threshold, direct_reply=direct_reply),
        chunker_config=ChunkerConfig(words_per_chunk=5),
    )


class TestAnswerQuestion:
    @pytest.mark.asyncio
    async def test_matching_question_answered_from_faq(self, sample_kb: KnowledgeBase):
        fake = FakeChatStreamClient()
        uc = _make_uc(fake)

        stream = uc.execute([ChatMessage(role='user', content='Czy muszę mieć Gewerbe?')], sample_kb)
        fragments = await collect(stream)

        assert b''.join(fragments).decode('utf-8') == 'Tak, jeśli pracujesz na własny rachunek. '
        assert fake.stream_calls == []

    @pytest.mark.asyncio
    async def test_unmatched_question_goes_to_model(self, sample_kb: KnowledgeBase):
        fake = FakeChatStreamClient(deltas=['Odpowiedź ', 'modelu'])
        uc = _make_uc(fake)

        fragments = await collect(uc.execute([ChatMessage(role='user', content='Jaka jest pogoda?')], sample_kb))

        assert fragments == ['Odpowiedź '.encode(), b'modelu']
        system = fake.stream_calls[0][1][0]
        assert sample_kb.to_context() in system.content

    @pytest.mark.asyncio
    async def test_direct_reply_disabled(self, sample_kb: KnowledgeBase):
        fake = FakeChatStreamClient()
        uc = _make_uc(fake, direct_reply=False)

        await collect(uc.execute([ChatMessage(role='user', content='Czy muszę mieć Gewerbe?')], sample_kb))

        assert len(fake.stream_calls) == 1

    @pytest.mark.asyncio
    async def test_matches_last_user_message(self, sample_kb: KnowledgeBase):
        fake = FakeChatStreamClient()
        uc = _make_uc(fake)
        conversation = [
            ChatMessage(role='user', content='Czy muszę mieć Gewerbe?'),
            ChatMessage(role='assistant', content='Tak.'),
            ChatMessage(role='user', content='A co z podatkami w przyszłym roku?'),
        ]

        await collect(uc.execute(conversation, sample_kb))

        assert len(fake.stream_calls) == 1

    @pytest.mark.asyncio
    async def test_empty_conversation_goes_to_model(self, sample_kb: KnowledgeBase):
        fake = FakeChatStreamClient()
        uc = _make_uc(fake)

        await collect(uc.execute([], sample_kb))

        assert len(fake.stream_calls) == 1

    @pytest.mark.asyncio
    async def test_relay_error_surfaces_on_iteration(self, sample_kb: KnowledgeBase):
        fake = FakeChatStreamClient(deltas=[], error=PermissionError('401'))
        uc = _make_uc(fake)

        stream = uc.execute([ChatMessage(role='user', content='Jaka jest pogoda?')], sample_kb)

        with pytest.raises(PermissionError):
            await collect(stream)
