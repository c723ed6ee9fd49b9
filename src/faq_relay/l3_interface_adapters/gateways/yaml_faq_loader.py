"""Gateway: YAML knowledge base loader — implements FaqLoader port."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import yaml

from faq_relay.l1_entities.faq import KnowledgeBase, KnowledgeBaseMetadata
from faq_relay.l3_interface_adapters.gateways.paths import USER_FAQ_DIR

_FAQ_DIR = resources.files('faq_relay') / 'faq'


def builtin_names() -> set[str]:
    """Discover built-in knowledge base names from the packaged faq directory."""
    return {p.name.removesuffix('.yaml') for p in _FAQ_DIR.iterdir() if p.name.endswith('.yaml')}


def user_knowledge_base_names() -> set[str]:
    """Discover user knowledge base names from the user faq directory."""
    if not USER_FAQ_DIR.is_dir():
        return set()
    return {p.name.removesuffix('.yaml') for p in USER_FAQ_DIR.iterdir() if p.name.endswith('.yaml')}


def all_knowledge_base_names() -> set[str]:
    return builtin_names() | user_knowledge_base_names()


class YamlFaqLoader:
    """Loads KnowledgeBase from YAML files or built-in resources."""

    def load(self, knowledge_base_ref: str) -> KnowledgeBase:
        # 1. Explicit file path
        path = Path(knowledge_base_ref)
        if path.exists() and path.is_file():
            kb = _parse(path.read_text(encoding='utf-8'))
            kb.metadata.key = kb.metadata.key or path.stem
            return kb
        # 2. User knowledge base (overrides built-in of the same name)
        if knowledge_base_ref in user_knowledge_base_names():
            return _load_user(knowledge_base_ref)
        # 3. Built-in knowledge base
        if knowledge_base_ref in builtin_names():
            return _load_builtin(knowledge_base_ref)
        available = sorted(all_knowledge_base_names())
        raise FileNotFoundError(
            f"Knowledge base not found: '{knowledge_base_ref}'. Available knowledge bases: {', '.join(available)}"
        )

    def list_knowledge_bases(self) -> list[KnowledgeBaseMetadata]:
        loaded: dict[str, KnowledgeBaseMetadata] = {}
        # Built-ins first, then user overrides on top
        for name in builtin_names():
            loaded[name] = _load_builtin(name).metadata
        for name in user_knowledge_base_names():
            loaded[name] = _load_user(name).metadata
        return [loaded[k] for k in sorted(loaded)]


def _parse(text: str) -> KnowledgeBase:
    return KnowledgeBase.model_validate(yaml.safe_load(text) or {})


def _load_builtin(name: str) -> KnowledgeBase:
    kb = _parse((_FAQ_DIR / f'{name}.yaml').read_text(encoding='utf-8'))
    kb.metadata.key = name
    return kb


def _load_user(name: str) -> KnowledgeBase:
    kb = _parse((USER_FAQ_DIR / f'{name}.yaml').read_text(encoding='utf-8'))
    kb.metadata.key = name
    return kb
