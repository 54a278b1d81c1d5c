"""
Lexicon-based sentiment scoring with local intensifier / negation modifiers.
"""
from __future__ import annotations

from typing import List, Sequence

from utils.nlp.sentiment_lexicon import DEFAULT_LEXICON, Lexicon, contains_any
from utils.nlp.types import MatchDetail, SentimentResult, Token, label_for

INTENSIFIER_FACTOR = 1.5
NEGATION_WINDOW = 2
CONTEXT_BEFORE = 2
CONTEXT_AFTER = 2


def base_score(token: Token, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    """+1 / -1 / 0 for one token; positive words are checked first."""
    forms = (token.surface, token.base or token.surface)
    if any(contains_any(form, lexicon.positive) for form in forms):
        return 1
    if any(contains_any(form, lexicon.negative) for form in forms):
        return -1
    return 0


def is_intensified(tokens: Sequence[Token], i: int, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    return i > 0 and contains_any(tokens[i - 1].surface, lexicon.intensifiers)


def is_negated(tokens: Sequence[Token], i: int, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    for j in range(max(0, i - NEGATION_WINDOW), i):
        if contains_any(tokens[j].surface, lexicon.negations):
            return True
    return False


def context_window(tokens: Sequence[Token], i: int) -> str:
    start = max(0, i - CONTEXT_BEFORE)
    end = min(len(tokens), i + CONTEXT_AFTER + 1)
    return "".join(t.surface for t in tokens[start:end])


def score_document(tokens: Sequence[Token], lexicon: Lexicon = DEFAULT_LEXICON) -> SentimentResult:
    """
    Score one document's token sequence.

    For each token with a lexicon hit the base score (+1/-1) is multiplied by
    1.5 when the previous token is an intensifier, then flipped when either of
    the two previous tokens is a negation. Both modifiers may apply at once.
    """
    if not tokens:
        return SentimentResult.empty()

    positive = 0.0
    negative = 0.0
    matched = 0
    matches: List[MatchDetail] = []

    for i, token in enumerate(tokens):
        score = base_score(token, lexicon)
        if score == 0:
            continue
        matched += 1

        final_score = float(score)
        if is_intensified(tokens, i, lexicon):
            final_score *= INTENSIFIER_FACTOR
        # negation applies to the already-intensified value
        if is_negated(tokens, i, lexicon):
            final_score *= -1

        if final_score > 0:
            positive += final_score
        else:
            negative += abs(final_score)

        matches.append(MatchDetail(
            word=token.surface,
            position=i,
            score=final_score,
            context=context_window(tokens, i),
        ))

    total = positive - negative
    return SentimentResult(
        score=total,
        positive=positive,
        negative=negative,
        neutral=len(tokens) - matched,
        label=label_for(total),
        matches=matches,
    )
