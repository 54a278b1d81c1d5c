"""
Morphological tokenizer adapters (janome for Japanese, jieba for Chinese).

Both backends emit ``Token`` records using the IPADIC part-of-speech vocabulary
(``名詞`` / ``一般``, ``固有名詞``, ``サ変接続`` ...), so the keyword filter does not
depend on which backend produced the tokens.

A tokenizer is expensive to build: create one handle at startup with
``build_tokenizer`` and pass it to every call.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Sequence

import jieba
import jieba.posseg as pseg
from janome.tokenizer import Tokenizer as _JanomeTokenizer

from utils.nlp.types import Document, Token

logger = logging.getLogger(__name__)

NOUN = "名詞"
NOUN_GENERAL = "一般"
NOUN_PROPER = "固有名詞"
NOUN_SAHEN = "サ変接続"

# jieba.posseg flag -> (coarse POS, sub-category)
_JIEBA_POS_MAP: Dict[str, tuple] = {
    "n": (NOUN, NOUN_GENERAL),
    "nr": (NOUN, NOUN_PROPER),
    "ns": (NOUN, NOUN_PROPER),
    "nt": (NOUN, NOUN_PROPER),
    "nz": (NOUN, NOUN_PROPER),
    "vn": (NOUN, NOUN_SAHEN),
}


class BaseTokenizer:
    """Abstract tokenizer: ``tokenize(text)`` returns tokens in text order."""

    name = "base"

    def tokenize(self, text: str) -> List[Token]:
        raise NotImplementedError


class JanomeTokenizer(BaseTokenizer):
    """IPADIC tokenizer backed by janome."""

    name = "janome"

    def __init__(self):
        self._tokenizer = _JanomeTokenizer()
        logger.info("janome tokenizer initialized")

    def tokenize(self, text: str) -> List[Token]:
        if not text:
            return []
        tokens = []
        for tok in self._tokenizer.tokenize(text):
            parts = tok.part_of_speech.split(",")
            pos = parts[0] if parts else ""
            pos_detail = parts[1] if len(parts) > 1 else ""
            base = tok.base_form if tok.base_form and tok.base_form != "*" else tok.surface
            tokens.append(Token(surface=tok.surface, pos=pos, pos_detail=pos_detail, base=base))
        return tokens


def jieba_flag_to_pos(flag: str) -> tuple:
    """Map a jieba POS flag onto the IPADIC (coarse, sub-category) pair."""
    return _JIEBA_POS_MAP.get(flag, (flag, ""))


class JiebaTokenizer(BaseTokenizer):
    """Chinese tokenizer backed by jieba.posseg."""

    name = "jieba"

    def __init__(self, hmm: bool = False):
        self.hmm = hmm
        jieba.initialize()
        logger.info("jieba tokenizer initialized")

    def tokenize(self, text: str) -> List[Token]:
        if not text:
            return []
        tokens = []
        for pair in pseg.lcut(text, HMM=self.hmm):
            word = pair.word
            if not word.strip():
                continue
            pos, pos_detail = jieba_flag_to_pos(pair.flag)
            tokens.append(Token(surface=word, pos=pos, pos_detail=pos_detail, base=word))
        return tokens


_BACKENDS = {
    "janome": JanomeTokenizer,
    "jieba": JiebaTokenizer,
}


def build_tokenizer(backend: str = "janome") -> BaseTokenizer:
    """Construct the process-wide tokenizer handle for ``backend``."""
    try:
        factory = _BACKENDS[backend]
    except KeyError:
        raise ValueError(f"Unknown tokenizer backend: {backend}") from None
    return factory()


def tokenize(tokenizer: BaseTokenizer, text: str) -> List[Token]:
    """Tokenize text; tokenizer errors propagate to the caller."""
    if not text:
        return []
    return tokenizer.tokenize(text)


def tokenize_documents(tokenizer: BaseTokenizer, documents: Sequence[Document]) -> List[List[Token]]:
    """Tokenize each document's analyzable text, preserving input order."""
    return [tokenize(tokenizer, doc.text) for doc in documents]
