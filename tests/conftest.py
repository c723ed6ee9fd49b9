"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest

from faq_relay.l1_entities.chat_message import ChatMessage
from faq_relay.l1_entities.config import AppConfig
from faq_relay.l1_entities.faq import KnowledgeBase
from faq_relay.l3_interface_adapters.gateways.yaml_faq_loader import YamlFaqLoader
from faq_relay.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeChatStreamClient:
    """Fake streaming LLM client for L2 use case tests."""

    def __init__(self, deltas: list[str] | None = None, error: Exception | None = None):
        self._deltas = list(deltas if deltas is not None else ['Fake ', 'LLM ', 'response'])
        self._error = error
        self.stream_calls: list[tuple[str, list[ChatMessage], float, int]] = []

    async def stream_chat(
        self,
        model: str,
        messages: list[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> AsyncIterator[str]:
        self.stream_calls.append((model, list(messages), temperature, max_tokens))
        for delta in self._deltas:
            yield delta
        if self._error is not None:
            raise self._error


async def collect(stream: AsyncIterator[bytes]) -> list[bytes]:
    """Drain an output stream into a list of fragments."""
    return [fragment async for fragment in stream]


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def default_kb() -> KnowledgeBase:
    return YamlFaqLoader().load('caregivers_pl')


@pytest.fixture
def sample_kb() -> KnowledgeBase:
    return KnowledgeBase.model_validate(
        {
            'metadata': {'name': 'Sample'},
            'entries': [
                {'question': 'Czy muszę mieć Gewerbe?', 'answer': 'Tak, jeśli pracujesz na własny rachunek.'},
                {
                    'question': 'Co to jest formularz A1?',
                    'answer': 'To zaświadczenie z ZUS.',
                    'keywords': ['a1'],
                },
            ],
        }
    )


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
completion:
  model: "gpt-4o-mini"
  temperature: 0.2
  max_tokens: 200
chunker:
  words_per_chunk: 3
faq:
  knowledge_base: "caregivers_pl"
  match_threshold: 0.5
  direct_reply: false
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def sample_kb_yaml(tmp_path: Path) -> Path:
    content = """\
metadata:
  name: "Test FAQ"
  locale: "pl"
entries:
  - question: "Ile kosztuje Gewerbe?"
    answer: "Zwykle od 20 do 60 euro."
    keywords: ["koszt", "gewerbe"]
"""
    p = tmp_path / 'test_faq.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_llm() -> FakeChatStreamClient:
    return FakeChatStreamClient()
