"""
Noun-based keyword extraction and frequency ranking.
"""
from __future__ import annotations

from typing import Dict, Iterable, List

from utils.nlp.tokenizer import NOUN, NOUN_GENERAL, NOUN_PROPER, NOUN_SAHEN
from utils.nlp.types import Keyword, Token

KEYWORD_SUB_CATEGORIES = frozenset({NOUN_GENERAL, NOUN_PROPER, NOUN_SAHEN})


def is_keyword_candidate(token: Token) -> bool:
    """General, proper and sahen-stem nouns longer than one character."""
    return (
        token.pos == NOUN
        and token.pos_detail in KEYWORD_SUB_CATEGORIES
        and len(token.surface) > 1
    )


def extract_nouns(tokens: Iterable[Token]) -> List[str]:
    return [t.surface for t in tokens if is_keyword_candidate(t)]


def count_keywords(tokens: Iterable[Token]) -> Dict[str, int]:
    """
    Count candidate nouns by exact surface form.

    The returned dict keeps first-occurrence order, which the ranking relies on
    for tie-breaking.
    """
    counts: Dict[str, int] = {}
    for word in extract_nouns(tokens):
        counts[word] = counts.get(word, 0) + 1
    return counts


def rank_keywords(counts: Dict[str, int], top_n: int = 20) -> List[Keyword]:
    if top_n <= 0:
        return []
    # sorted() is stable: equal counts stay in first-occurrence order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [Keyword(word=w, count=c) for w, c in ranked[:top_n]]


def extract_keywords(tokens: Iterable[Token], top_n: int = 20) -> List[Keyword]:
    """Return the top-N keywords of a token sequence, most frequent first."""
    return rank_keywords(count_keywords(tokens), top_n=top_n)
