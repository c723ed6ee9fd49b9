"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from faq_relay.l1_entities.config import AppConfig
from faq_relay.l2_use_cases.answer_use_case import AnswerQuestionUseCase
from faq_relay.l2_use_cases.completion_relay_use_case import StreamCompletionUseCase
from faq_relay.l2_use_cases.ports.faq_loader import FaqLoader
from faq_relay.l2_use_cases.ports.llm_client import ChatStreamClient
from faq_relay.l3_interface_adapters.gateways.openai_llm_client import OpenAICompatLLMClient
from faq_relay.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from faq_relay.l3_interface_adapters.gateways.yaml_faq_loader import YamlFaqLoader
from faq_relay.l4_frameworks_and_drivers.config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        infra: InfraConfig | None = None,
        llm_client: ChatStreamClient | None = None,
    ) -> None:
        self.config = config

        _infra = infra or InfraConfig()
        self.llm_client: ChatStreamClient = llm_client or OpenAICompatLLMClient(
            api_key=_infra.openai.api_key,
            base_url=_infra.openai.base_url,
        )
        self.faq_loader: FaqLoader = self.knowledge_base_loader()

        self.relay = StreamCompletionUseCase(self.llm_client, config.completion)
        self.answerer = AnswerQuestionUseCase(
            relay=self.relay,
            faq_config=config.faq,
            chunker_config=config.chunker,
        )

    @staticmethod
    def config_loader() -> YamlConfigLoader:
        return YamlConfigLoader()

    @staticmethod
    def knowledge_base_loader() -> YamlFaqLoader:
        return YamlFaqLoader()
