"""
nodes/ 包 — 统一导出层

保证 ``from nodes import XXX`` 可用，所有公开节点在此注册。
"""

# ── 基类 ──────────────────────────────────────────────────────
from nodes.base import MonitoredNode

# ── 调度 & 终止节点 ──────────────────────────────────────────
from nodes.dispatcher import DispatcherNode, TerminalNode

# ── 数据加载 ──────────────────────────────────────────────────
from nodes.load import LoadDocumentsNode, LoadComparisonDocumentsNode

# ── 分析执行 ──────────────────────────────────────────────────
from nodes.analysis import AnalyzeCorpusNode, CompareCorporaNode, DrillDownNode

# ── 结果保存 ──────────────────────────────────────────────────
from nodes.save import SaveResultsNode

__all__ = [
    "MonitoredNode",
    "DispatcherNode",
    "TerminalNode",
    "LoadDocumentsNode",
    "LoadComparisonDocumentsNode",
    "AnalyzeCorpusNode",
    "CompareCorporaNode",
    "DrillDownNode",
    "SaveResultsNode",
]
