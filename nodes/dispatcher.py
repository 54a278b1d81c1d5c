"""
dispatcher.py - 调度节点与终止节点

包含 DispatcherNode, TerminalNode
"""

from nodes.base import MonitoredNode

VALID_ACTIONS = ("analyze", "compare", "drill")


class DispatcherNode(MonitoredNode):
    """
    调度节点 - 系统入口

    根据 shared["config"]["mode"] 选择执行路径。

    返回的Action类型：
    - analyze: 单批次关键词 + 情感分析
    - compare: social / media 两批次差异分析
    - drill: 关键词下钻分析
    """

    def prep(self, shared):
        return (shared.get("config") or {}).get("mode", "analyze")

    def exec(self, prep_res):
        if prep_res not in VALID_ACTIONS:
            raise ValueError(f"Invalid analysis mode: {prep_res}")
        return prep_res

    def post(self, shared, prep_res, exec_res):
        print(f"[Dispatcher] 下一步动作: {exec_res}")
        return exec_res


class TerminalNode(MonitoredNode):
    """
    终止节点 - 宣布流程结束并输出执行摘要
    """

    def prep(self, shared):
        results = shared.get("results", {})
        monitor = shared.get("monitor", {})
        return {
            "mode": (shared.get("config") or {}).get("mode", "analyze"),
            "output_files": results.get("output_files", {}),
            "error_count": len(monitor.get("error_log", [])),
            "summary": results.get("summary", {}),
        }

    def exec(self, prep_res):
        lines = [f"mode: {prep_res['mode']}"]
        for key, value in prep_res["summary"].items():
            lines.append(f"{key}: {value}")
        for key, path in prep_res["output_files"].items():
            lines.append(f"{key}: {path}")
        return "\n".join(lines)

    def post(self, shared, prep_res, exec_res):
        print("=" * 60)
        print("[Terminal] 分析完成")
        print(exec_res)
        print("=" * 60)
        shared.setdefault("results", {})["finished"] = True
        return None
