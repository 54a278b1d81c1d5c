"""
test_sentiment.py — 词典情感打分（强调词 / 否定词修饰）
"""
import pytest

from utils.nlp.sentiment import base_score, score_document
from utils.nlp.sentiment_lexicon import Lexicon
from utils.nlp.tokenizer import tokenize
from utils.nlp.types import SentimentResult, Token


def toks(*words):
    return [Token(surface=w, base=w) for w in words]


class TestEmptyInput:
    def test_empty_tokens_yield_neutral_zero_result(self):
        result = score_document([])
        assert result == SentimentResult.empty()
        assert result.score == 0
        assert result.positive == 0
        assert result.negative == 0
        assert result.neutral == 0
        assert result.label == "neutral"
        assert result.matches == []

    def test_empty_text_never_reaches_tokenizer(self, tokenizer):
        assert score_document(tokenize(tokenizer, "")) == SentimentResult.empty()
        assert tokenizer.calls == []


class TestBaseScore:
    def test_positive_word(self):
        assert base_score(Token("嬉しい", base="嬉しい")) == 1

    def test_negative_word(self):
        assert base_score(Token("不安", base="不安")) == -1

    def test_no_hit(self):
        assert base_score(Token("政府", base="政府")) == 0

    def test_substring_match(self):
        assert base_score(Token("大成功", base="大成功")) == 1

    def test_base_form_is_checked(self):
        assert base_score(Token("嬉しく", base="嬉しい")) == 1

    def test_positive_takes_precedence(self):
        assert base_score(Token("最高最悪", base="最高最悪")) == 1


class TestModifiers:
    def test_plain_positive(self):
        result = score_document(toks("今日", "嬉しい"))
        assert result.matches[0].score == 1
        assert result.positive == 1
        assert result.label == "positive"

    def test_negation_flips_positive(self):
        result = score_document(toks("ない", "嬉しい"))
        assert result.matches[0].score == -1
        assert result.positive == 0
        assert result.negative == 1
        assert result.label == "negative"

    def test_negation_two_tokens_back(self):
        result = score_document(toks("ない", "の", "嬉しい"))
        assert result.matches[0].score == -1

    def test_negation_three_tokens_back_is_ignored(self):
        result = score_document(toks("ない", "の", "は", "嬉しい"))
        assert result.matches[0].score == 1

    def test_negation_flips_negative_to_positive(self):
        result = score_document(toks("ない", "不安"))
        assert result.matches[0].score == 1
        assert result.positive == 1
        assert result.negative == 0

    def test_intensifier_scales(self):
        result = score_document(toks("とても", "嬉しい"))
        assert result.matches[0].score == 1.5
        assert result.positive == 1.5

    def test_intensifier_must_be_adjacent(self):
        result = score_document(toks("とても", "の", "嬉しい"))
        assert result.matches[0].score == 1

    def test_intensifier_and_negation_both_apply(self):
        result = score_document(toks("ない", "とても", "嬉しい"))
        assert result.matches[0].score == -1.5
        assert result.negative == 1.5
        assert result.positive == 0

    def test_first_token_has_no_modifiers(self):
        result = score_document(toks("最高", "です"))
        assert result.matches[0].score == 1


class TestMatchDetails:
    def test_context_window_centered_on_match(self):
        result = score_document(toks("今日", "は", "とても", "楽しい", "一日", "でした"))
        assert len(result.matches) == 1
        match = result.matches[0]
        assert match.word == "楽しい"
        assert match.position == 3
        assert match.score == 1.5
        assert match.context == "はとても楽しい一日でした"

    def test_context_window_clipped_at_start(self):
        result = score_document(toks("最高", "です"))
        assert result.matches[0].context == "最高です"

    def test_matches_in_token_order(self):
        result = score_document(toks("不安", "と", "期待"))
        assert [m.word for m in result.matches] == ["不安", "期待"]
        assert [m.position for m in result.matches] == [0, 2]


class TestAggregatesPerDocument:
    def test_neutral_counts_unmatched_tokens(self):
        result = score_document(toks("今日", "は", "とても", "楽しい", "一日", "でした"))
        assert result.neutral == 5

    def test_score_decomposition(self):
        for words in [
            ("ない", "とても", "嬉しい", "不安", "最高"),
            ("とても", "最悪", "とても", "最高"),
            ("政府", "発表"),
        ]:
            result = score_document(toks(*words))
            assert result.score == result.positive - result.negative

    def test_mixed_document_label(self):
        result = score_document(toks("不安", "と", "とても", "最悪"))
        assert result.score == -2.5
        assert result.label == "negative"

    def test_balanced_document_is_neutral(self):
        result = score_document(toks("不安", "と", "期待"))
        assert result.score == 0
        assert result.label == "neutral"

    def test_deterministic(self):
        tokens = toks("ない", "とても", "嬉しい", "不安", "最高")
        assert score_document(tokens) == score_document(tokens)


class TestCustomLexicon:
    def test_uses_supplied_lexicon(self):
        lexicon = Lexicon.from_words(["晴れ"], ["雨"], ["超"], ["ない"])
        result = score_document(toks("超", "晴れ", "雨"), lexicon)
        assert [m.score for m in result.matches] == [1.5, -1]

    def test_tokenized_text_scores_once(self, tokenizer):
        result = score_document(tokenize(tokenizer, "とても 嬉しい"))
        assert result.score == 1.5
        assert tokenizer.calls == ["とても 嬉しい"]


def test_tokenizer_failure_propagates(failing_tokenizer):
    with pytest.raises(RuntimeError, match="tokenizer crashed"):
        score_document(tokenize(failing_tokenizer, "何か"))
