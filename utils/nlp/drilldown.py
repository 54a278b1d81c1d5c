"""
Keyword-scoped drill-down: re-run the analysis over documents containing a keyword.

``drill_down`` is stateless. The breadcrumb of previously selected keywords is
kept by the caller (``DrillPath`` is a small helper for that).
"""
from __future__ import annotations

from typing import List, Sequence

from utils.nlp.analysis import analyze_corpus
from utils.nlp.sentiment_lexicon import DEFAULT_LEXICON, Lexicon
from utils.nlp.tokenizer import BaseTokenizer
from utils.nlp.types import CorpusSentiment, Document, DrillDownResult

SCOPE_SOCIAL = "social"
SCOPE_MEDIA = "media"
SCOPE_BOTH = "both"
SCOPES = (SCOPE_SOCIAL, SCOPE_MEDIA, SCOPE_BOTH)


def filter_documents(
    documents: Sequence[Document],
    keyword: str,
    scope: str = SCOPE_BOTH,
) -> List[Document]:
    """
    Documents of ``scope`` whose title+body contains ``keyword``, in input order.

    An empty keyword matches every document of the scope.
    """
    if scope not in SCOPES:
        raise ValueError(f"Unknown drill-down scope: {scope}")

    selected = []
    for doc in documents:
        if scope != SCOPE_BOTH and doc.source != scope:
            continue
        if keyword in doc.text:
            selected.append(doc)
    return selected


def drill_down(
    tokenizer: BaseTokenizer,
    documents: Sequence[Document],
    keyword: str,
    scope: str = SCOPE_BOTH,
    top_n: int = 20,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> DrillDownResult:
    """
    Full analysis of the documents matching ``keyword``.

    No match is not an error: the result has no keywords, no documents and an
    empty sentiment distribution.
    """
    subset = filter_documents(documents, keyword, scope)
    if not subset:
        return DrillDownResult(
            keyword=keyword,
            scope=scope,
            keywords=[],
            sentiment=CorpusSentiment.empty(),
            articles=[],
            documents=[],
        )

    analysis = analyze_corpus(tokenizer, subset, top_n=top_n, lexicon=lexicon)
    return DrillDownResult(
        keyword=keyword,
        scope=scope,
        keywords=analysis.keywords,
        sentiment=analysis.sentiment,
        articles=analysis.articles,
        documents=analysis.documents,
    )


class DrillPath:
    """Caller-side breadcrumb of selected keywords."""

    def __init__(self, keywords: Sequence[str] = ()):
        self._keywords: List[str] = list(keywords)

    def push(self, keyword: str) -> None:
        self._keywords.append(keyword)

    def pop(self) -> str:
        if not self._keywords:
            raise IndexError("drill path is empty")
        return self._keywords.pop()

    @property
    def current(self) -> str:
        """Most recently selected keyword, or "" at the top level."""
        return self._keywords[-1] if self._keywords else ""

    @property
    def depth(self) -> int:
        return len(self._keywords)

    def as_list(self) -> List[str]:
        return list(self._keywords)

    def __str__(self) -> str:
        return " > ".join(self._keywords)
