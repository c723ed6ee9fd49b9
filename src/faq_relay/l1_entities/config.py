"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CompletionConfig(BaseModel):
    model: str
    temperature: float = Field(ge=0.0, le=2.0)
    max_tokens: int = Field(gt=0)


class ChunkerConfig(BaseModel):
    words_per_chunk: int = Field(ge=1)


class FaqConfig(BaseModel):
    knowledge_base: str
    match_threshold: float = Field(ge=0.0, le=1.0)
    direct_reply: bool


class AppConfig(BaseModel):
    completion: CompletionConfig
    chunker: ChunkerConfig
    faq: FaqConfig
