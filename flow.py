"""
趋势分析 - Flow编排定义

系统采用中央调度模式，DispatcherNode作为唯一入口，
按 shared["config"]["mode"] 选择路径。

================================================================================
架构说明
================================================================================

DispatcherNode（中央调度入口）
    ├─ analyze → AnalysisFlow（加载 → 分析 → 保存）→ TerminalNode
    ├─ compare → ComparisonFlow（加载 social/media → 差异分析 → 保存）→ TerminalNode
    └─ drill   → DrillDownFlow（加载 → 逐级下钻 → 保存）→ TerminalNode

================================================================================
"""

from pocketflow import Flow

from nodes import (
    DispatcherNode,
    TerminalNode,
    LoadDocumentsNode,
    LoadComparisonDocumentsNode,
    AnalyzeCorpusNode,
    CompareCorporaNode,
    DrillDownNode,
    SaveResultsNode,
)


def create_analysis_flow() -> Flow:
    """单批次分析：关键词排行 + 情感分布"""
    load_node = LoadDocumentsNode()
    analyze_node = AnalyzeCorpusNode()
    save_node = SaveResultsNode()

    load_node >> analyze_node >> save_node

    return Flow(start=load_node)


def create_comparison_flow() -> Flow:
    """social vs media 差异分析"""
    load_node = LoadComparisonDocumentsNode()
    compare_node = CompareCorporaNode()
    save_node = SaveResultsNode()

    load_node >> compare_node >> save_node

    return Flow(start=load_node)


def create_drilldown_flow() -> Flow:
    """关键词下钻分析"""
    load_node = LoadDocumentsNode()
    drill_node = DrillDownNode()
    save_node = SaveResultsNode()

    load_node >> drill_node >> save_node

    return Flow(start=load_node)


def create_main_flow() -> Flow:
    """
    创建中央调度主Flow - 系统唯一入口

    Returns:
        Flow: 配置好的主Flow
    """
    dispatcher = DispatcherNode()
    terminal = TerminalNode()

    analysis_flow = create_analysis_flow()
    comparison_flow = create_comparison_flow()
    drilldown_flow = create_drilldown_flow()

    dispatcher - "analyze" >> analysis_flow
    dispatcher - "compare" >> comparison_flow
    dispatcher - "drill" >> drilldown_flow

    analysis_flow >> terminal
    comparison_flow >> terminal
    drilldown_flow >> terminal

    return Flow(start=dispatcher)
