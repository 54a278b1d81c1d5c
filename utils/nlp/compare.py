"""
Differential analysis between two corpora (e.g. social bookmarks vs news media).
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from utils.nlp.analysis import analyze_corpus
from utils.nlp.sentiment_lexicon import DEFAULT_LEXICON, Lexicon
from utils.nlp.tokenizer import BaseTokenizer
from utils.nlp.types import (
    ComparisonResult,
    CorpusSentiment,
    Document,
    Keyword,
    SideAnalysis,
)

TENDENCY_A = "a_more_positive"
TENDENCY_B = "b_more_positive"
TENDENCY_SIMILAR = "similar"
TENDENCY_UNKNOWN = "unknown"


def unique_keywords(
    target: Sequence[Keyword],
    other: Sequence[Keyword],
    limit: Optional[int] = None,
) -> List[Keyword]:
    """Keywords of ``target`` whose word never appears in ``other``, rank order kept."""
    other_words = {k.word for k in other}
    unique = [k for k in target if k.word not in other_words]
    if limit is None:
        return unique
    return unique[:max(0, limit)]


def sentiment_diff(a: CorpusSentiment, b: CorpusSentiment) -> Optional[float]:
    if a.is_empty or b.is_empty:
        return None
    return a.average - b.average


def sentiment_tendency(diff: Optional[float], threshold: float = 0.5) -> str:
    """Classify an average-score difference; within ``threshold`` is "similar"."""
    if diff is None:
        return TENDENCY_UNKNOWN
    if abs(diff) <= threshold:
        return TENDENCY_SIMILAR
    return TENDENCY_A if diff > 0 else TENDENCY_B


def compare_corpora(
    tokenizer: BaseTokenizer,
    documents_a: Sequence[Document],
    documents_b: Sequence[Document],
    top_n: int = 30,
    unique_limit: int = 10,
    lexicon: Lexicon = DEFAULT_LEXICON,
    threshold: float = 0.5,
) -> ComparisonResult:
    analysis_a = analyze_corpus(tokenizer, documents_a, top_n=top_n, lexicon=lexicon)
    analysis_b = analyze_corpus(tokenizer, documents_b, top_n=top_n, lexicon=lexicon)

    diff = sentiment_diff(analysis_a.sentiment, analysis_b.sentiment)
    return ComparisonResult(
        side_a=SideAnalysis(
            keywords=analysis_a.keywords,
            sentiment=analysis_a.sentiment,
            unique_keywords=unique_keywords(analysis_a.keywords, analysis_b.keywords, unique_limit),
        ),
        side_b=SideAnalysis(
            keywords=analysis_b.keywords,
            sentiment=analysis_b.sentiment,
            unique_keywords=unique_keywords(analysis_b.keywords, analysis_a.keywords, unique_limit),
        ),
        sentiment_diff=diff,
        tendency=sentiment_tendency(diff, threshold),
    )
