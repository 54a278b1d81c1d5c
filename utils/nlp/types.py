"""
Record types shared by the text-analytics engine.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

LABEL_POSITIVE = "positive"
LABEL_NEGATIVE = "negative"
LABEL_NEUTRAL = "neutral"


def label_for(score: float) -> str:
    if score > 0:
        return LABEL_POSITIVE
    if score < 0:
        return LABEL_NEGATIVE
    return LABEL_NEUTRAL


@dataclass(frozen=True)
class Token:
    """One morpheme as returned by a tokenizer backend."""

    surface: str
    pos: str = ""
    pos_detail: str = ""
    base: str = ""


@dataclass(frozen=True)
class Document:
    title: str = ""
    body: str = ""
    link: str = ""
    source: str = ""

    @property
    def text(self) -> str:
        """Analyzable text: title and body joined by a single space."""
        return f"{self.title} {self.body}"

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], source: str = "") -> "Document":
        """
        Build a document from a loosely shaped record.

        Missing or null fields become empty strings, so a malformed record is
        analyzed as a zero-text document instead of failing the batch.
        """
        raw = raw or {}
        body = ""
        for key in ("body", "content", "contentSnippet", "summary", "description"):
            if raw.get(key):
                body = str(raw[key])
                break
        link = raw.get("link") or raw.get("url") or ""
        return cls(
            title=str(raw.get("title") or ""),
            body=body,
            link=str(link),
            source=str(source or raw.get("source_type") or raw.get("source") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Keyword:
    word: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "count": self.count}


@dataclass(frozen=True)
class MatchDetail:
    word: str
    position: int
    score: float
    context: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SentimentResult:
    """Per-document sentiment. ``score == positive - negative`` always holds."""

    score: float
    positive: float
    negative: float
    neutral: int
    label: str
    matches: List[MatchDetail] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "SentimentResult":
        return cls(score=0, positive=0, negative=0, neutral=0, label=LABEL_NEUTRAL, matches=[])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "positive": self.positive,
            "negative": self.negative,
            "neutral": self.neutral,
            "label": self.label,
            "matches": [m.to_dict() for m in self.matches],
        }


@dataclass(frozen=True)
class CorpusSentiment:
    """
    Corpus-level sentiment distribution.

    An empty corpus is represented explicitly: ``document_count == 0`` with
    ``average`` and the rates set to ``None``.
    """

    document_count: int
    average: Optional[float]
    positive_count: int
    negative_count: int
    neutral_count: int
    positive_rate: Optional[float]
    negative_rate: Optional[float]
    neutral_rate: Optional[float]

    @classmethod
    def empty(cls) -> "CorpusSentiment":
        return cls(
            document_count=0,
            average=None,
            positive_count=0,
            negative_count=0,
            neutral_count=0,
            positive_rate=None,
            negative_rate=None,
            neutral_rate=None,
        )

    @property
    def is_empty(self) -> bool:
        return self.document_count == 0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["is_empty"] = self.is_empty
        return data


@dataclass(frozen=True)
class ArticleSentiment:
    title: str
    link: str
    source: str
    label: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CorpusAnalysis:
    keywords: List[Keyword]
    sentiment: CorpusSentiment
    articles: List[ArticleSentiment]
    documents: List[Document]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keywords": [k.to_dict() for k in self.keywords],
            "sentiment": self.sentiment.to_dict(),
            "articles": [a.to_dict() for a in self.articles],
        }


@dataclass(frozen=True)
class SideAnalysis:
    keywords: List[Keyword]
    sentiment: CorpusSentiment
    unique_keywords: List[Keyword]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keywords": [k.to_dict() for k in self.keywords],
            "sentiment": self.sentiment.to_dict(),
            "unique_keywords": [k.to_dict() for k in self.unique_keywords],
        }


@dataclass(frozen=True)
class ComparisonResult:
    side_a: SideAnalysis
    side_b: SideAnalysis
    sentiment_diff: Optional[float]
    tendency: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "side_a": self.side_a.to_dict(),
            "side_b": self.side_b.to_dict(),
            "sentiment_diff": self.sentiment_diff,
            "tendency": self.tendency,
        }


@dataclass(frozen=True)
class DrillDownResult:
    keyword: str
    scope: str
    keywords: List[Keyword]
    sentiment: CorpusSentiment
    articles: List[ArticleSentiment]
    documents: List[Document]

    @property
    def is_empty(self) -> bool:
        return not self.documents

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "scope": self.scope,
            "is_empty": self.is_empty,
            "keywords": [k.to_dict() for k in self.keywords],
            "sentiment": self.sentiment.to_dict(),
            "articles": [a.to_dict() for a in self.articles],
            "documents": [d.to_dict() for d in self.documents],
        }
