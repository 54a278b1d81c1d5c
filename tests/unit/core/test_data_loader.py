"""
test_data_loader.py — 文档 JSON 读写
"""
import json

import pytest

from utils.data_loader import (
    load_documents,
    save_analysis_results,
    save_documents,
)
from utils.nlp.types import Document


def _write(path, payload):
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return str(path)


def test_load_array_with_source_tag(tmp_path):
    path = _write(tmp_path / "social.json", [
        {"title": "円安", "body": "旅行"},
        {"title": "カフェ", "content": "巡り", "url": "https://example.com/c"},
    ])
    docs = load_documents(path, source="social")
    assert docs == [
        Document(title="円安", body="旅行", link="", source="social"),
        Document(title="カフェ", body="巡り", link="https://example.com/c", source="social"),
    ]


def test_load_object_keyed_by_source(tmp_path):
    path = _write(tmp_path / "documents.json", {
        "social": [{"title": "円安"}],
        "media": [{"title": "大雨"}, {"title": "政府"}],
    })
    docs = load_documents(path)
    assert [(d.title, d.source) for d in docs] == [
        ("円安", "social"),
        ("大雨", "media"),
        ("政府", "media"),
    ]


def test_malformed_records_become_empty_documents(tmp_path):
    path = _write(tmp_path / "bad.json", [{"title": None, "body": None}, "oops"])
    docs = load_documents(path)
    assert [d.text.strip() for d in docs] == ["", ""]


def test_non_array_payload_rejected(tmp_path):
    path = _write(tmp_path / "scalar.json", 42)
    with pytest.raises(ValueError):
        load_documents(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_documents(str(tmp_path / "missing.json"))


def test_save_documents_then_load(tmp_path):
    docs = [Document(title="円安", body="進行", link="https://example.com/1", source="media")]
    path = str(tmp_path / "out" / "docs.json")
    assert save_documents(docs, path) is True
    assert load_documents(path) == docs


def test_save_analysis_results(tmp_path):
    path = str(tmp_path / "report" / "analysis.json")
    assert save_analysis_results({"mode": "analyze", "keywords": ["円安"]}, path) is True
    with open(path, "r", encoding="utf-8") as f:
        assert json.load(f)["keywords"] == ["円安"]


def test_save_analysis_results_reports_failure(tmp_path):
    assert save_analysis_results({"mode": "analyze"}, str(tmp_path)) is False
