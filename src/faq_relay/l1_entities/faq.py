"""FAQ knowledge base models — pure data, no I/O."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field, field_validator


class KnowledgeBaseMetadata(BaseModel):
    name: str = ''
    description: str = ''
    locale: str = ''
    key: str = ''  # file key (set by loader, not stored in YAML)


class FaqEntry(BaseModel):
    question: str
    answer: str
    keywords: list[str] = Field(default_factory=list)

    @field_validator('question', 'answer')
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('FAQ question and answer must not be blank')
        return value.strip()


class KnowledgeBase(BaseModel):
    metadata: KnowledgeBaseMetadata = Field(default_factory=KnowledgeBaseMetadata)
    entries: list[FaqEntry] = Field(default_factory=list)

    def to_context(self) -> str:
        """Render entries as the plain-text context block handed to the model."""
        return '\n\n'.join(f'P: {e.question}\nO: {e.answer}' for e in self.entries)


@dataclass(frozen=True)
class FaqMatch:
    """An FAQ entry matched against a user question."""

    entry: FaqEntry
    score: float
