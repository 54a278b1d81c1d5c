"""
analysis.py - 分析执行节点

包含 AnalyzeCorpusNode, CompareCorporaNode, DrillDownNode
"""
from typing import List

from nodes.base import MonitoredNode
from nodes._utils import get_lexicon, get_tokenizer

from utils.nlp.analysis import analyze_corpus
from utils.nlp.compare import compare_corpora
from utils.nlp.drilldown import DrillPath, drill_down
from utils.nlp.types import DrillDownResult


def _fmt_avg(value):
    return "n/a" if value is None else f"{value:+.2f}"


class AnalyzeCorpusNode(MonitoredNode):
    """
    单批次分析节点

    输出：关键词排行、逐篇情感、情感分布（shared["results"]["analysis"]）
    """

    def prep(self, shared):
        analysis_cfg = (shared.get("config") or {}).get("analysis", {}) or {}
        return {
            "documents": shared.get("data", {}).get("documents", []),
            "top_n": int(analysis_cfg.get("keyword_top_n", 20)),
            "tokenizer": get_tokenizer(shared),
            "lexicon": get_lexicon(shared),
        }

    def exec(self, prep_res):
        return analyze_corpus(
            prep_res["tokenizer"],
            prep_res["documents"],
            top_n=prep_res["top_n"],
            lexicon=prep_res["lexicon"],
        )

    def post(self, shared, prep_res, exec_res):
        results = shared.setdefault("results", {})
        results["analysis"] = exec_res
        results["summary"] = {
            "documents": exec_res.sentiment.document_count,
            "keywords": len(exec_res.keywords),
            "average_score": _fmt_avg(exec_res.sentiment.average),
        }
        print(
            f"[AnalyzeCorpus] 文档 {exec_res.sentiment.document_count} 条, "
            f"关键词 {len(exec_res.keywords)} 个, 平均分 {_fmt_avg(exec_res.sentiment.average)}"
        )
        return "default"


class CompareCorporaNode(MonitoredNode):
    """
    social / media 差异分析节点

    side_a = social, side_b = media；sentiment_diff = social 平均分 - media 平均分
    """

    def prep(self, shared):
        analysis_cfg = (shared.get("config") or {}).get("analysis", {}) or {}
        data = shared.get("data", {})
        return {
            "social_documents": data.get("social_documents", []),
            "media_documents": data.get("media_documents", []),
            "top_n": int(analysis_cfg.get("comparison_top_n", 30)),
            "unique_limit": int(analysis_cfg.get("unique_limit", 10)),
            "threshold": float(analysis_cfg.get("tendency_threshold", 0.5)),
            "tokenizer": get_tokenizer(shared),
            "lexicon": get_lexicon(shared),
        }

    def exec(self, prep_res):
        return compare_corpora(
            prep_res["tokenizer"],
            prep_res["social_documents"],
            prep_res["media_documents"],
            top_n=prep_res["top_n"],
            unique_limit=prep_res["unique_limit"],
            lexicon=prep_res["lexicon"],
            threshold=prep_res["threshold"],
        )

    def post(self, shared, prep_res, exec_res):
        results = shared.setdefault("results", {})
        results["comparison"] = exec_res
        results["summary"] = {
            "social_documents": exec_res.side_a.sentiment.document_count,
            "media_documents": exec_res.side_b.sentiment.document_count,
            "sentiment_diff": _fmt_avg(exec_res.sentiment_diff),
            "tendency": exec_res.tendency,
        }
        print(
            f"[CompareCorpora] 情感差 {_fmt_avg(exec_res.sentiment_diff)} ({exec_res.tendency}), "
            f"social 独有 {len(exec_res.side_a.unique_keywords)} 个, "
            f"media 独有 {len(exec_res.side_b.unique_keywords)} 个"
        )
        return "default"


class DrillDownNode(MonitoredNode):
    """
    关键词下钻节点

    按 drilldown.keywords 顺序逐级下钻：每一级在上一级命中的文档中再次筛选，
    命中为空时停止并保留空结果。
    """

    def prep(self, shared):
        cfg = shared.get("config") or {}
        drill_cfg = cfg.get("drilldown", {}) or {}
        analysis_cfg = cfg.get("analysis", {}) or {}
        return {
            "documents": shared.get("data", {}).get("documents", []),
            "keywords": list(drill_cfg.get("keywords", [])),
            "scope": drill_cfg.get("scope", "both"),
            "top_n": int(analysis_cfg.get("keyword_top_n", 20)),
            "tokenizer": get_tokenizer(shared),
            "lexicon": get_lexicon(shared),
        }

    def exec(self, prep_res):
        path = DrillPath()
        steps: List[DrillDownResult] = []
        documents = prep_res["documents"]
        for keyword in prep_res["keywords"]:
            result = drill_down(
                prep_res["tokenizer"],
                documents,
                keyword,
                scope=prep_res["scope"],
                top_n=prep_res["top_n"],
                lexicon=prep_res["lexicon"],
            )
            path.push(keyword)
            steps.append(result)
            if result.is_empty:
                break
            documents = result.documents
        return {"path": path.as_list(), "steps": steps}

    def post(self, shared, prep_res, exec_res):
        results = shared.setdefault("results", {})
        results["drilldown"] = exec_res
        final = exec_res["steps"][-1] if exec_res["steps"] else None
        results["summary"] = {
            "path": " > ".join(exec_res["path"]),
            "documents": len(final.documents) if final else 0,
            "average_score": _fmt_avg(final.sentiment.average) if final else "n/a",
        }
        for step in exec_res["steps"]:
            if step.is_empty:
                print(f"[DrillDown] '{step.keyword}': 无匹配文档")
            else:
                print(
                    f"[DrillDown] '{step.keyword}': 文档 {len(step.documents)} 条, "
                    f"关键词 {len(step.keywords)} 个"
                )
        return "default"
