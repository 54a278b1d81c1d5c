"""
load.py - 文档加载节点

包含 LoadDocumentsNode, LoadComparisonDocumentsNode
"""
from typing import Any, Dict, List

from nodes.base import MonitoredNode

from utils.data_loader import load_documents, save_documents
from utils.data_sources.json_source import JsonDataSource
from utils.data_sources.rss_source import RssDataSource, SOURCE_MEDIA, SOURCE_SOCIAL
from utils.nlp.types import Document


def _build_rss_source(ds_cfg: Dict[str, Any]) -> RssDataSource:
    return RssDataSource(
        social_feeds=ds_cfg.get("social_feeds", ["general"]),
        media_feeds=ds_cfg.get("media_feeds", []),
        limit=int(ds_cfg.get("limit", 20)),
        timeout=float(ds_cfg.get("timeout_seconds", 12)),
    )


def _save_snapshot(documents: List[Document], snapshot_path: str) -> None:
    """RSS 抓取结果落盘，之后可用 json 数据源重放"""
    if not snapshot_path:
        return
    if not save_documents(documents, snapshot_path):
        raise IOError(f"Failed to write document snapshot to {snapshot_path}")


class LoadDocumentsNode(MonitoredNode):
    """
    文档加载节点（analyze / drill 路径）

    json: 从 data_source.input_path 读取
    rss: 抓取 social_feeds + media_feeds，按来源打标签；
         设置了 snapshot_path 时保存抓取结果
    """

    def prep(self, shared):
        ds_cfg = (shared.get("config") or {}).get("data_source", {}) or {}
        return {
            "type": ds_cfg.get("type", "json"),
            "input_path": ds_cfg.get("input_path", "data/documents.json"),
            "snapshot_path": ds_cfg.get("snapshot_path", ""),
            "ds_cfg": ds_cfg,
        }

    def exec(self, prep_res) -> List[Document]:
        if prep_res["type"] == "rss":
            documents = _build_rss_source(prep_res["ds_cfg"]).load_documents()
            _save_snapshot(documents, prep_res["snapshot_path"])
            return documents
        source = JsonDataSource(prep_res["input_path"], loader=load_documents)
        return source.load_documents()

    def post(self, shared, prep_res, exec_res):
        shared.setdefault("data", {})["documents"] = exec_res
        print(f"[LoadDocuments] 加载文档 {len(exec_res)} 条 ({prep_res['type']})")
        return "default"


class LoadComparisonDocumentsNode(MonitoredNode):
    """
    对比文档加载节点（compare 路径）

    json: social_path / media_path 两个文件，分别打上 social / media 标签
    rss: Hatena 书签为 social，新闻源为 media；
         snapshot_path 中保存两侧文档（各自带 source 标签）
    """

    def prep(self, shared):
        ds_cfg = (shared.get("config") or {}).get("data_source", {}) or {}
        return {
            "type": ds_cfg.get("type", "json"),
            "social_path": ds_cfg.get("social_path", "data/social.json"),
            "media_path": ds_cfg.get("media_path", "data/media.json"),
            "snapshot_path": ds_cfg.get("snapshot_path", ""),
            "ds_cfg": ds_cfg,
        }

    def exec(self, prep_res):
        if prep_res["type"] == "rss":
            source = _build_rss_source(prep_res["ds_cfg"])
            social_documents = source.load_social()
            media_documents = source.load_media()
            _save_snapshot(social_documents + media_documents, prep_res["snapshot_path"])
            return {
                "social_documents": social_documents,
                "media_documents": media_documents,
            }
        social = JsonDataSource(prep_res["social_path"], source=SOURCE_SOCIAL, loader=load_documents)
        media = JsonDataSource(prep_res["media_path"], source=SOURCE_MEDIA, loader=load_documents)
        return {
            "social_documents": social.load_documents(),
            "media_documents": media.load_documents(),
        }

    def post(self, shared, prep_res, exec_res):
        data = shared.setdefault("data", {})
        data["social_documents"] = exec_res["social_documents"]
        data["media_documents"] = exec_res["media_documents"]
        print(
            f"[LoadComparisonDocuments] social {len(exec_res['social_documents'])} 条, "
            f"media {len(exec_res['media_documents'])} 条"
        )
        return "default"
