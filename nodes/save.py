"""
save.py - 结果保存节点

将分析结果写入 JSON，同时输出关键词/情感 CSV 表格，并按需生成图表。
"""
import os
from typing import Any, Dict, List

from nodes.base import MonitoredNode

from utils.charts import (
    keyword_bar_chart,
    keyword_frame,
    save_table,
    sentiment_distribution_chart,
    sentiment_frame,
)
from utils.data_loader import save_analysis_results
from utils.path_manager import get_images_dir, get_report_dir


def _analysis_payload(results: Dict[str, Any]) -> Dict[str, Any]:
    if "analysis" in results:
        return {"mode": "analyze", "analysis": results["analysis"].to_dict()}
    if "comparison" in results:
        return {"mode": "compare", "comparison": results["comparison"].to_dict()}
    if "drilldown" in results:
        drill = results["drilldown"]
        return {
            "mode": "drill",
            "path": list(drill["path"]),
            "steps": [step.to_dict() for step in drill["steps"]],
        }
    return {"mode": "none"}


def _charts_for(results: Dict[str, Any], images_dir: str) -> List[Dict[str, Any]]:
    charts = []
    if "analysis" in results:
        a = results["analysis"]
        charts.append(keyword_bar_chart(a.keywords, images_dir, "keywords.png"))
        charts.append(sentiment_distribution_chart(a.sentiment, images_dir, "sentiment.png"))
    elif "comparison" in results:
        c = results["comparison"]
        for name, side in (("social", c.side_a), ("media", c.side_b)):
            charts.append(keyword_bar_chart(
                side.keywords, images_dir, f"{name}_keywords.png", title=f"Keyword Frequency ({name})",
            ))
            charts.append(keyword_bar_chart(
                side.unique_keywords, images_dir, f"{name}_unique_keywords.png",
                title=f"Unique Keywords ({name})",
            ))
            charts.append(sentiment_distribution_chart(
                side.sentiment, images_dir, f"{name}_sentiment.png", title=f"Sentiment ({name})",
            ))
    elif "drilldown" in results and results["drilldown"]["steps"]:
        final = results["drilldown"]["steps"][-1]
        charts.append(keyword_bar_chart(
            final.keywords, images_dir, "drilldown_keywords.png", title=f"Keywords: {final.keyword}",
        ))
        charts.append(sentiment_distribution_chart(
            final.sentiment, images_dir, "drilldown_sentiment.png", title=f"Sentiment: {final.keyword}",
        ))
    return [c for c in charts if c]


def _tables_for(results: Dict[str, Any], report_dir: str) -> List[Dict[str, Any]]:
    tables = []
    if "analysis" in results:
        a = results["analysis"]
        tables.append(save_table(keyword_frame(a.keywords), report_dir, "keywords_table.csv"))
        tables.append(save_table(sentiment_frame({"corpus": a.sentiment}), report_dir, "sentiment_table.csv"))
    elif "comparison" in results:
        c = results["comparison"]
        for name, side in (("social", c.side_a), ("media", c.side_b)):
            tables.append(save_table(keyword_frame(side.keywords), report_dir, f"{name}_keywords_table.csv"))
            tables.append(save_table(
                keyword_frame(side.unique_keywords), report_dir, f"{name}_unique_keywords_table.csv",
            ))
        tables.append(save_table(
            sentiment_frame({"social": c.side_a.sentiment, "media": c.side_b.sentiment}),
            report_dir,
            "sentiment_table.csv",
        ))
    elif "drilldown" in results and results["drilldown"]["steps"]:
        steps = results["drilldown"]["steps"]
        # 每一级一行，行名为到该级为止的下钻路径
        path = [step.keyword for step in steps]
        per_step = {" > ".join(path[:i + 1]): step.sentiment for i, step in enumerate(steps)}
        tables.append(save_table(keyword_frame(steps[-1].keywords), report_dir, "drilldown_keywords_table.csv"))
        tables.append(save_table(sentiment_frame(per_step), report_dir, "drilldown_sentiment_table.csv"))
    return tables


class SaveResultsNode(MonitoredNode):
    """
    结果保存节点

    输出：output_path 处的 JSON 结果文件；report_dir 下的关键词/情感 CSV 表格；
    charts 开启时写入 report_dir/images
    """

    def prep(self, shared):
        output_cfg = (shared.get("config") or {}).get("output", {}) or {}
        return {
            "results": shared.get("results", {}),
            "output_path": output_cfg.get("output_path", "report/analysis.json"),
            "report_dir": output_cfg.get("report_dir", "report"),
            "charts": bool(output_cfg.get("charts", True)),
        }

    def exec(self, prep_res):
        results = prep_res["results"]
        payload = _analysis_payload(results)

        tables = _tables_for(results, get_report_dir(prep_res["report_dir"]))
        payload["tables"] = tables

        charts = []
        if prep_res["charts"]:
            charts = _charts_for(results, get_images_dir(prep_res["report_dir"]))
        payload["charts"] = charts

        saved = save_analysis_results(payload, prep_res["output_path"])
        if not saved:
            raise IOError(f"Failed to write results to {prep_res['output_path']}")
        return {"output_path": prep_res["output_path"], "tables": tables, "charts": charts}

    def post(self, shared, prep_res, exec_res):
        output_files = shared.setdefault("results", {}).setdefault("output_files", {})
        output_files["results"] = exec_res["output_path"]
        for item in exec_res["tables"] + exec_res["charts"]:
            output_files[item["id"]] = item["path"]
        print(
            f"[SaveResults] 结果已保存: {os.path.abspath(exec_res['output_path'])} "
            f"(表格 {len(exec_res['tables'])} 个, 图表 {len(exec_res['charts'])} 张)"
        )
        return "default"
