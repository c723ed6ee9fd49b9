"""Chat message entity — typed replacement for dict[str, Any]."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal['system', 'user', 'assistant']


class ChatMessage(BaseModel):
    """A single message in an LLM conversation. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
