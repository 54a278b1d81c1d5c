"""
Primary corpus analysis: keyword table, per-article sentiment and distribution.
"""
from __future__ import annotations

from itertools import chain
from typing import List, Sequence

from utils.nlp.aggregate import aggregate
from utils.nlp.keyword_extractor import extract_keywords
from utils.nlp.sentiment import score_document
from utils.nlp.sentiment_lexicon import DEFAULT_LEXICON, Lexicon
from utils.nlp.tokenizer import BaseTokenizer, tokenize_documents
from utils.nlp.types import ArticleSentiment, CorpusAnalysis, Document


def analyze_corpus(
    tokenizer: BaseTokenizer,
    documents: Sequence[Document],
    top_n: int = 20,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> CorpusAnalysis:
    """
    Analyze a batch of documents.

    Each document is tokenized once. Keywords are ranked over the token stream
    of the whole batch (documents in input order), sentiment is scored per
    document and folded into the corpus distribution.
    """
    documents = list(documents)
    token_lists = tokenize_documents(tokenizer, documents)

    keywords = extract_keywords(chain.from_iterable(token_lists), top_n=top_n)
    results = [score_document(tokens, lexicon) for tokens in token_lists]

    articles: List[ArticleSentiment] = [
        ArticleSentiment(
            title=doc.title,
            link=doc.link,
            source=doc.source,
            label=res.label,
            score=res.score,
        )
        for doc, res in zip(documents, results)
    ]

    return CorpusAnalysis(
        keywords=keywords,
        sentiment=aggregate(results),
        articles=articles,
        documents=documents,
    )
