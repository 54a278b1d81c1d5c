"""
test_flow_entrypoint.py — Main flow routing and end-to-end runs with a fake tokenizer.
"""
import json
from pathlib import Path
from unittest.mock import patch

import pytest

import main as main_module
from flow import create_main_flow


FIXTURES_DIR = Path(__file__).resolve().parents[2] / "fixtures"


def _split_fixture(tmp_path):
    with open(FIXTURES_DIR / "sample_documents.json", "r", encoding="utf-8") as f:
        records = json.load(f)
    for side in ("social", "media"):
        (tmp_path / f"{side}.json").write_text(
            json.dumps([r for r in records if r["source"] == side], ensure_ascii=False),
            encoding="utf-8",
        )


def _output(shared):
    with open(shared["config"]["output"]["output_path"], "r", encoding="utf-8") as f:
        return json.load(f)


def test_main_flow_starts_at_dispatcher():
    flow = create_main_flow()
    assert flow.start_node.__class__.__name__ == "DispatcherNode"
    assert set(flow.start_node.successors) == {"analyze", "compare", "drill"}


def test_analyze_mode_end_to_end(minimal_shared):
    create_main_flow().run(minimal_shared)

    assert minimal_shared["results"]["finished"] is True
    payload = _output(minimal_shared)
    assert payload["mode"] == "analyze"
    assert [k["word"] for k in payload["analysis"]["keywords"]] == ["円安", "拡大", "上昇"]
    assert payload["analysis"]["sentiment"]["document_count"] == 5

    nodes = [e["node"] for e in minimal_shared["monitor"]["execution_log"] if e["status"] == "completed"]
    assert nodes == [
        "DispatcherNode",
        "LoadDocumentsNode",
        "AnalyzeCorpusNode",
        "SaveResultsNode",
        "TerminalNode",
    ]


def test_compare_mode_end_to_end(minimal_shared, tmp_path):
    _split_fixture(tmp_path)
    minimal_shared["config"]["mode"] = "compare"
    create_main_flow().run(minimal_shared)

    payload = _output(minimal_shared)
    assert payload["mode"] == "compare"
    assert payload["comparison"]["tendency"] == "a_more_positive"
    assert payload["comparison"]["sentiment_diff"] == pytest.approx(2.0)


def test_drill_mode_end_to_end(minimal_shared):
    minimal_shared["config"]["mode"] = "drill"
    minimal_shared["config"]["drilldown"]["keywords"] = ["円安", "上昇"]
    create_main_flow().run(minimal_shared)

    payload = _output(minimal_shared)
    assert payload["mode"] == "drill"
    assert payload["path"] == ["円安", "上昇"]
    assert len(payload["steps"][1]["documents"]) == 1


def test_main_runs_from_config_file(tmp_path, tokenizer):
    output_path = tmp_path / "out" / "analysis.json"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "\n".join([
            "data:",
            f"  input_path: \"{(FIXTURES_DIR / 'sample_documents.json').as_posix()}\"",
            f"  output_path: \"{output_path.as_posix()}\"",
            "analysis:",
            "  mode: \"analyze\"",
            "  keyword_top_n: 5",
            "output:",
            f"  report_dir: \"{(tmp_path / 'report').as_posix()}\"",
            "  charts: false",
        ]),
        encoding="utf-8",
    )

    with patch.object(main_module, "build_tokenizer", return_value=tokenizer):
        assert main_module.main([str(config_path)]) == 0

    with open(output_path, "r", encoding="utf-8") as f:
        assert len(json.load(f)["analysis"]["keywords"]) == 5


def test_main_returns_error_code_on_bad_config(tmp_path):
    assert main_module.main([str(tmp_path / "missing.yaml")]) == 1
