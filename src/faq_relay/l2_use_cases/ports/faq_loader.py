"""Port: FAQ knowledge base loader."""

from __future__ import annotations

from typing import Protocol

from faq_relay.l1_entities.faq import KnowledgeBase, KnowledgeBaseMetadata


class FaqLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract knowledge base loader."""

    def load(self, knowledge_base_ref: str) -> KnowledgeBase:
        """Load a knowledge base by name or file path."""
        ...

    def list_knowledge_bases(self) -> list[KnowledgeBaseMetadata]:
        """List available knowledge bases (built-in and user)."""
        ...
