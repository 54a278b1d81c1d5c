"""
conftest.py — pytest 共享 Fixtures

为所有测试提供统一的测试文档、确定性的假 tokenizer 与 shared 字典。
"""
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from utils.nlp.tokenizer import BaseTokenizer
from utils.nlp.types import Document, Token

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


# 非名词词性表；未列出的词一律视为 名詞/一般
_POS_TABLE = {
    "とても": ("副詞", "助詞類接続"),
    "高い": ("形容詞", "自立"),
    "楽しい": ("形容詞", "自立"),
    "嬉しい": ("形容詞", "自立"),
    "相次ぐ": ("動詞", "自立"),
    "ない": ("助動詞", ""),
    "は": ("助詞", "係助詞"),
    "の": ("助詞", "連体化"),
    "新": ("接頭詞", "名詞接続"),
}


class WhitespaceTokenizer(BaseTokenizer):
    """按空白切分的确定性 tokenizer，用于替代真实形态素分析"""

    name = "whitespace"

    def __init__(self):
        self.calls = []

    def tokenize(self, text):
        self.calls.append(text)
        tokens = []
        for word in text.split():
            pos, detail = _POS_TABLE.get(word, ("名詞", "一般"))
            tokens.append(Token(surface=word, pos=pos, pos_detail=detail, base=word))
        return tokens


class FailingTokenizer(BaseTokenizer):
    name = "failing"

    def tokenize(self, text):
        raise RuntimeError("tokenizer crashed")


def make_tokens(*words, pos="名詞", detail="一般"):
    """Build tokens sharing one POS pair."""
    return [Token(surface=w, pos=pos, pos_detail=detail, base=w) for w in words]


# =============================================================================
# 数据 Fixtures
# =============================================================================

@pytest.fixture
def sample_records():
    """5条带来源标签的原始文档记录（其中2条包含「円安」）"""
    with open(FIXTURES_DIR / "sample_documents.json", "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sample_documents(sample_records):
    return [Document.from_dict(r) for r in sample_records]


@pytest.fixture
def social_documents(sample_documents):
    return [d for d in sample_documents if d.source == "social"]


@pytest.fixture
def media_documents(sample_documents):
    return [d for d in sample_documents if d.source == "media"]


@pytest.fixture
def tokenizer():
    return WhitespaceTokenizer()


@pytest.fixture
def failing_tokenizer():
    return FailingTokenizer()


# =============================================================================
# shared 字典 Fixtures
# =============================================================================

@pytest.fixture
def minimal_shared(tmp_path, tokenizer):
    """
    最小化的 shared 字典，结构与 config_to_shared() 的输出一致。
    """
    return {
        "config": {
            "mode": "analyze",
            "data_source": {
                "type": "json",
                "input_path": str(FIXTURES_DIR / "sample_documents.json"),
                "social_path": str(tmp_path / "social.json"),
                "media_path": str(tmp_path / "media.json"),
                "snapshot_path": "",
                "social_feeds": ["general"],
                "media_feeds": ["nhk"],
                "limit": 10,
                "timeout_seconds": 5,
            },
            "analysis": {
                "keyword_top_n": 3,
                "comparison_top_n": 30,
                "unique_limit": 10,
                "tendency_threshold": 0.5,
            },
            "drilldown": {
                "keywords": ["円安"],
                "scope": "both",
            },
            "output": {
                "report_dir": str(tmp_path / "report"),
                "output_path": str(tmp_path / "report" / "analysis.json"),
                "charts": False,
            },
        },
        "data": {
            "documents": [],
            "social_documents": [],
            "media_documents": [],
        },
        "results": {},
        "monitor": {
            "execution_log": [],
            "error_log": [],
        },
        "runtime": {
            "tokenizer": tokenizer,
        },
    }


@pytest.fixture
def tokens_of():
    """工厂：tokens_of("猫", "犬", pos="名詞", detail="一般")"""
    return make_tokens
