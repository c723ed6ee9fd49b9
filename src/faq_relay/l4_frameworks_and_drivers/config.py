"""Infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

import copy
import os

from pydantic import BaseModel, Field

from faq_relay.l1_entities.config import AppConfig
from faq_relay.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'completion': {
        'model': 'gpt-4o',
        'temperature': 0.7,
        'max_tokens': 500,
    },
    'chunker': {
        'words_per_chunk': 5,
    },
    'faq': {
        'knowledge_base': 'caregivers_pl',
        'match_threshold': 0.6,
        'direct_reply': True,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


def _env_api_key() -> str:
    return os.environ.get('OPENAI_API_KEY', '')


class OpenAIProviderConfig(BaseModel):
    api_key: str = Field(default_factory=_env_api_key)  # '' → auth fails on first call
    base_url: str = 'https://api.openai.com/v1'


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    openai: OpenAIProviderConfig = Field(default_factory=OpenAIProviderConfig)
