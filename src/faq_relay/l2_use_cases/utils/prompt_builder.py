"""Pure functions for building LLM prompts."""

from __future__ import annotations

from faq_relay.l1_entities.chat_message import ChatMessage

SYSTEM_PROMPT_TEMPLATE = """\
Jesteś asystentem dla polskich opiekunek pracujących w Niemczech.
Pomagasz z pytaniami o Gewerbe, legalną pracę, ubezpieczenia i wszystkie aspekty zatrudnienia.

ZASADY ODPOWIEDZI:
1. NAJPIERW szukaj odpowiedzi w bazie wiedzy FAQ poniżej
2. Jeśli FAQ nie zawiera odpowiedzi, użyj swojej wiedzy o niemieckim prawie pracy, Gewerbe, ubezpieczeniach
3. Podawaj tylko sprawdzone, rzetelne informacje
4. Jeśli nie jesteś pewien, zasugeruj kontakt z biurem

Odpowiadaj:
- Po polsku
- Zwięźle (2-4 zdania)
- Pomocnie i przyjaźnie
- Konkretnie i merytorycznie

Baza wiedzy FAQ:

{faq_context}

Jeśli pytanie wykracza poza FAQ, odpowiedz na podstawie swojej wiedzy o niemieckim systemie prawnym i pracy."""


def build_system_message(faq_context: str) -> ChatMessage:
    """Build the system message with *faq_context* spliced in verbatim."""
    # context is inserted verbatim, braces included
    return ChatMessage(role='system', content=SYSTEM_PROMPT_TEMPLATE.replace('{faq_context}', faq_context))


def build_outbound_messages(conversation: list[ChatMessage], faq_context: str) -> list[ChatMessage]:
    """Prepend the synthesized system message to the caller's conversation."""
    return [build_system_message(faq_context), *conversation]


def last_user_question(conversation: list[ChatMessage]) -> str:
    """Return the content of the most recent user message, or '' if there is none."""
    for message in reversed(conversation):
        if message.role == 'user':
            return message.content
    return ''
