"""
Fold per-document sentiment into corpus-level statistics.
"""
from __future__ import annotations

from typing import Sequence

from utils.nlp.types import (
    LABEL_NEGATIVE,
    LABEL_POSITIVE,
    CorpusSentiment,
    SentimentResult,
)


def aggregate(results: Sequence[SentimentResult]) -> CorpusSentiment:
    """
    Average score, label counts and label rates (0-100) over documents.

    Returns ``CorpusSentiment.empty()`` for an empty sequence instead of
    dividing by zero.
    """
    total = len(results)
    if total == 0:
        return CorpusSentiment.empty()

    positive = sum(1 for r in results if r.label == LABEL_POSITIVE)
    negative = sum(1 for r in results if r.label == LABEL_NEGATIVE)
    neutral = total - positive - negative

    return CorpusSentiment(
        document_count=total,
        average=sum(r.score for r in results) / total,
        positive_count=positive,
        negative_count=negative,
        neutral_count=neutral,
        positive_rate=positive / total * 100,
        negative_rate=negative / total * 100,
        neutral_rate=neutral / total * 100,
    )
