"""Use case: replay a precomputed answer as a word-chunked byte stream."""

from __future__ import annotations

from collections.abc import AsyncIterator

DEFAULT_WORDS_PER_CHUNK = 5


def chunk_words(text: str, words_per_chunk: int = DEFAULT_WORDS_PER_CHUNK) -> list[str]:
    """Group *text* into fragments of up to *words_per_chunk* space-separated words.

    Every word keeps a trailing space, so the fragments rejoin to ``text + ' '``.
    Empty input yields a single ``' '`` fragment.
    """
    if words_per_chunk < 1:
        raise ValueError(f'words_per_chunk must be >= 1, got {words_per_chunk}')

    words = text.split(' ')
    fragments: list[str] = []
    current = ''
    for i, word in enumerate(words):
        current += word + ' '
        if (i + 1) % words_per_chunk == 0 or i == len(words) - 1:
            fragments.append(current)
            current = ''
    return fragments


async def create_text_stream(
    text: str,
    words_per_chunk: int = DEFAULT_WORDS_PER_CHUNK,
) -> AsyncIterator[bytes]:
    """Emit *text* as UTF-8 fragments without contacting any service."""
    for fragment in chunk_words(text, words_per_chunk):
        yield fragment.encode('utf-8')
