"""
test_tokenizer.py — 分词后端适配（janome / jieba）
"""
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from utils.nlp.tokenizer import (
    JanomeTokenizer,
    JiebaTokenizer,
    build_tokenizer,
    jieba_flag_to_pos,
    tokenize,
    tokenize_documents,
)
from utils.nlp.types import Document, Token


def janome_token(surface, part_of_speech, base_form):
    return SimpleNamespace(surface=surface, part_of_speech=part_of_speech, base_form=base_form)


class TestJanomeTokenizer:
    @patch("utils.nlp.tokenizer._JanomeTokenizer")
    def test_maps_ipadic_features(self, mock_cls):
        mock_cls.return_value.tokenize.return_value = [
            janome_token("東京", "名詞,固有名詞,地域,一般", "東京"),
            janome_token("に", "助詞,格助詞,一般,*", "に"),
            janome_token("行き", "動詞,自立,*,*", "行く"),
            janome_token("ＡＩ", "名詞,一般,*,*", "*"),
        ]
        tokens = JanomeTokenizer().tokenize("東京に行きＡＩ")

        assert tokens == [
            Token("東京", "名詞", "固有名詞", "東京"),
            Token("に", "助詞", "格助詞", "に"),
            Token("行き", "動詞", "自立", "行く"),
            Token("ＡＩ", "名詞", "一般", "ＡＩ"),
        ]

    @patch("utils.nlp.tokenizer._JanomeTokenizer")
    def test_empty_text_skips_backend(self, mock_cls):
        assert JanomeTokenizer().tokenize("") == []
        mock_cls.return_value.tokenize.assert_not_called()


class TestJiebaTokenizer:
    @pytest.mark.parametrize("flag, expected", [
        ("n", ("名詞", "一般")),
        ("nr", ("名詞", "固有名詞")),
        ("ns", ("名詞", "固有名詞")),
        ("vn", ("名詞", "サ変接続")),
        ("v", ("v", "")),
    ])
    def test_flag_mapping(self, flag, expected):
        assert jieba_flag_to_pos(flag) == expected

    @patch("utils.nlp.tokenizer.pseg.lcut")
    @patch("utils.nlp.tokenizer.jieba.initialize")
    def test_tokenize_drops_whitespace(self, _init, mock_lcut):
        mock_lcut.return_value = [
            SimpleNamespace(word="北京", flag="ns"),
            SimpleNamespace(word=" ", flag="x"),
            SimpleNamespace(word="发布", flag="vn"),
        ]
        tokens = JiebaTokenizer().tokenize("北京 发布")
        assert tokens == [
            Token("北京", "名詞", "固有名詞", "北京"),
            Token("发布", "名詞", "サ変接続", "发布"),
        ]
        mock_lcut.assert_called_once_with("北京 发布", HMM=False)


def test_build_tokenizer_unknown_backend():
    with pytest.raises(ValueError, match="Unknown tokenizer backend"):
        build_tokenizer("mecab")


@patch("utils.nlp.tokenizer._JanomeTokenizer")
def test_build_tokenizer_default_is_janome(_mock_cls):
    assert isinstance(build_tokenizer(), JanomeTokenizer)


def test_tokenize_empty_text_does_not_call_backend(tokenizer):
    assert tokenize(tokenizer, "") == []
    assert tokenizer.calls == []


def test_tokenize_documents_keeps_order(tokenizer):
    docs = [Document(title="円安", body="進行"), Document(title="大雨")]
    token_lists = tokenize_documents(tokenizer, docs)
    assert [[t.surface for t in tokens] for tokens in token_lists] == [
        ["円安", "進行"],
        ["大雨"],
    ]
