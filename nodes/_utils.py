"""
_utils.py - 节点共享的运行时句柄读取
"""

from typing import Any, Dict

from utils.nlp.sentiment_lexicon import DEFAULT_LEXICON, Lexicon
from utils.nlp.tokenizer import BaseTokenizer


def get_tokenizer(shared: Dict[str, Any]) -> BaseTokenizer:
    """返回启动时注入的 tokenizer 句柄（shared["runtime"]["tokenizer"]）"""
    tokenizer = (shared.get("runtime") or {}).get("tokenizer")
    if tokenizer is None:
        raise ValueError("shared['runtime']['tokenizer'] is not set; build it once at startup")
    return tokenizer


def get_lexicon(shared: Dict[str, Any]) -> Lexicon:
    return (shared.get("runtime") or {}).get("lexicon") or DEFAULT_LEXICON
