"""
Static sentiment lexicon (positive / negative / intensifier / negation words).

The lexicon is read-only for the lifetime of the process. ``DEFAULT_LEXICON`` is
used unless a YAML override is configured, in which case ``load_lexicon`` builds
a new immutable ``Lexicon`` once at startup.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import FrozenSet, Iterable

import yaml

logger = logging.getLogger(__name__)


_POS_WORDS = {
    "良い", "いい", "嬉しい", "楽しい", "素晴らしい", "素敵", "最高", "好き", "幸せ",
    "成功", "便利", "安心", "期待", "改善", "向上", "評価", "人気", "快適", "美しい",
    "感謝", "喜び", "優れ", "勝利", "上昇", "成長", "回復", "希望", "面白い", "魅力",
    "満足", "応援", "活躍", "支持", "好調", "可愛い",
}
_NEG_WORDS = {
    "悪い", "悲しい", "辛い", "失敗", "嫌い", "不安", "最悪", "問題", "危険", "心配",
    "批判", "事故", "被害", "減少", "下落", "困難", "怒り", "残念", "損失", "違反",
    "炎上", "懸念", "不満", "苦しい", "事件", "死亡", "低下", "悪化", "反対", "疑惑",
    "怖い", "酷い", "詐欺", "不正",
}
_INTENSIFIERS = {
    "とても", "すごく", "凄く", "非常に", "かなり", "大変", "めちゃ", "超", "本当に",
    "極めて", "最も", "一番", "大いに",
}
_NEGATIONS = {
    "ない", "なく", "なかっ", "無い", "無く", "ません", "ぬ",
}


@dataclass(frozen=True)
class Lexicon:
    positive: FrozenSet[str]
    negative: FrozenSet[str]
    intensifiers: FrozenSet[str]
    negations: FrozenSet[str]

    @classmethod
    def from_words(
        cls,
        positive: Iterable[str],
        negative: Iterable[str],
        intensifiers: Iterable[str],
        negations: Iterable[str],
    ) -> "Lexicon":
        lexicon = cls(
            positive=frozenset(w for w in positive if w),
            negative=frozenset(w for w in negative if w),
            intensifiers=frozenset(w for w in intensifiers if w),
            negations=frozenset(w for w in negations if w),
        )
        lexicon.validate()
        return lexicon

    def validate(self) -> None:
        """The four word sets must be pairwise disjoint."""
        groups = {
            "positive": self.positive,
            "negative": self.negative,
            "intensifiers": self.intensifiers,
            "negations": self.negations,
        }
        names = list(groups)
        for i, a in enumerate(names):
            for b in names[i + 1:]:
                overlap = groups[a] & groups[b]
                if overlap:
                    raise ValueError(
                        f"Lexicon sets '{a}' and '{b}' overlap: {sorted(overlap)}"
                    )


DEFAULT_LEXICON = Lexicon.from_words(_POS_WORDS, _NEG_WORDS, _INTENSIFIERS, _NEGATIONS)


def load_lexicon(path: str) -> Lexicon:
    """
    Load a lexicon override from YAML.

    Expected keys: ``positive``, ``negative``, ``intensifiers``, ``negations``.
    A missing key keeps the default word set for that group.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Lexicon file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    lexicon = Lexicon.from_words(
        positive=raw.get("positive") or DEFAULT_LEXICON.positive,
        negative=raw.get("negative") or DEFAULT_LEXICON.negative,
        intensifiers=raw.get("intensifiers") or DEFAULT_LEXICON.intensifiers,
        negations=raw.get("negations") or DEFAULT_LEXICON.negations,
    )
    logger.info(
        "Loaded lexicon from %s (%d positive, %d negative, %d intensifiers, %d negations)",
        path,
        len(lexicon.positive),
        len(lexicon.negative),
        len(lexicon.intensifiers),
        len(lexicon.negations),
    )
    return lexicon


def contains_any(text: str, words: Iterable[str]) -> bool:
    """Substring test: does ``text`` contain any of ``words``?"""
    if not text:
        return False
    return any(w in text for w in words)
