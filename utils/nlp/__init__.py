"""
Text-analytics engine: tokenization, keywords, lexicon sentiment, comparison, drill-down.
"""
from utils.nlp.types import (
    ArticleSentiment,
    ComparisonResult,
    CorpusAnalysis,
    CorpusSentiment,
    Document,
    DrillDownResult,
    Keyword,
    MatchDetail,
    SentimentResult,
    SideAnalysis,
    Token,
)
from utils.nlp.text_cleaner import clean_text, strip_html
from utils.nlp.tokenizer import (
    BaseTokenizer,
    JanomeTokenizer,
    JiebaTokenizer,
    build_tokenizer,
    tokenize,
    tokenize_documents,
)
from utils.nlp.keyword_extractor import count_keywords, extract_keywords, is_keyword_candidate
from utils.nlp.sentiment_lexicon import DEFAULT_LEXICON, Lexicon, load_lexicon
from utils.nlp.sentiment import score_document
from utils.nlp.aggregate import aggregate
from utils.nlp.analysis import analyze_corpus
from utils.nlp.compare import compare_corpora, sentiment_diff, sentiment_tendency, unique_keywords
from utils.nlp.drilldown import SCOPE_BOTH, SCOPE_MEDIA, SCOPE_SOCIAL, DrillPath, drill_down, filter_documents

__all__ = [
    "ArticleSentiment",
    "ComparisonResult",
    "CorpusAnalysis",
    "CorpusSentiment",
    "Document",
    "DrillDownResult",
    "Keyword",
    "MatchDetail",
    "SentimentResult",
    "SideAnalysis",
    "Token",
    "clean_text",
    "strip_html",
    "BaseTokenizer",
    "JanomeTokenizer",
    "JiebaTokenizer",
    "build_tokenizer",
    "tokenize",
    "tokenize_documents",
    "count_keywords",
    "extract_keywords",
    "is_keyword_candidate",
    "DEFAULT_LEXICON",
    "Lexicon",
    "load_lexicon",
    "score_document",
    "aggregate",
    "analyze_corpus",
    "compare_corpora",
    "sentiment_diff",
    "sentiment_tendency",
    "unique_keywords",
    "SCOPE_BOTH",
    "SCOPE_MEDIA",
    "SCOPE_SOCIAL",
    "DrillPath",
    "drill_down",
    "filter_documents",
]
