"""Pure functions for matching a user question against FAQ entries."""

from __future__ import annotations

import re

from faq_relay.l1_entities.faq import FaqEntry, FaqMatch, KnowledgeBase

_TOKEN_RE = re.compile(r'\w+', re.UNICODE)


def tokenize(text: str) -> set[str]:
    """Lowercased word tokens with punctuation dropped."""
    return set(_TOKEN_RE.findall(text.lower()))


def score_entry(question_tokens: set[str], entry: FaqEntry) -> float:
    """Jaccard similarity between the question tokens and the entry's own question."""
    entry_tokens = tokenize(entry.question)
    union = question_tokens | entry_tokens
    if not question_tokens or not union:
        return 0.0
    return len(question_tokens & entry_tokens) / len(union)


def keyword_coverage(question_tokens: set[str], entry: FaqEntry) -> float:
    """Fraction of the entry's keywords fully present in the question."""
    if not entry.keywords:
        return 0.0
    keyword_sets = [tokenize(kw) for kw in entry.keywords]
    hits = sum(1 for kw_tokens in keyword_sets if kw_tokens and kw_tokens <= question_tokens)
    return hits / len(entry.keywords)


def match_faq(question: str, knowledge_base: KnowledgeBase, threshold: float) -> FaqMatch | None:
    """Return the entry whose question is most similar, if it reaches *threshold*.

    Only question similarity counts toward *threshold*; keyword coverage breaks
    ties between equally similar entries. Full ties keep the earlier entry.
    """
    tokens = tokenize(question)
    best: FaqMatch | None = None
    best_rank = (-1.0, -1.0)
    for entry in knowledge_base.entries:
        score = score_entry(tokens, entry)
        if score < threshold:
            continue
        rank = (score, keyword_coverage(tokens, entry))
        if rank > best_rank:
            best, best_rank = FaqMatch(entry=entry, score=score), rank
    return best
