"""
Configuration loader and shared-store builder.

Uses a YAML file as the single source of truth for runtime settings.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List
import os

import yaml

from utils.data_sources.rss_source import HATENA_FEEDS, NEWS_FEEDS
from utils.nlp.drilldown import SCOPES

VALID_MODES = {"analyze", "compare", "drill"}
VALID_SOURCE_TYPES = {"json", "rss"}
VALID_TOKENIZERS = {"janome", "jieba"}

CONFIG_PATH_ENV = "TREND_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "config.yaml"


@dataclass
class DataConfig:
    input_path: str = "data/documents.json"
    social_path: str = "data/social.json"
    media_path: str = "data/media.json"
    output_path: str = "report/analysis.json"
    snapshot_path: str = ""


@dataclass
class SourceConfig:
    type: str = "json"
    social_feeds: List[str] = field(default_factory=lambda: ["general"])
    media_feeds: List[str] = field(default_factory=lambda: ["nhk", "yahoo_topics"])
    limit: int = 20
    timeout_seconds: int = 12


@dataclass
class TokenizerConfig:
    backend: str = "janome"


@dataclass
class AnalysisConfig:
    mode: str = "analyze"
    keyword_top_n: int = 20
    comparison_top_n: int = 30
    unique_limit: int = 10
    tendency_threshold: float = 0.5


@dataclass
class DrillDownConfig:
    keywords: List[str] = field(default_factory=list)
    scope: str = "both"


@dataclass
class LexiconConfig:
    path: str = ""


@dataclass
class OutputConfig:
    report_dir: str = "report"
    charts: bool = True


@dataclass
class AppConfig:
    data: DataConfig = field(default_factory=DataConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    drilldown: DrillDownConfig = field(default_factory=DrillDownConfig)
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def resolve_config_path(path: str = "") -> str:
    """Explicit path, else ``$TREND_CONFIG_PATH``, else config.yaml."""
    return path or os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH


def load_config(path: str) -> AppConfig:
    """Load YAML configuration into AppConfig."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return AppConfig(
        data=DataConfig(**(raw.get("data", {}) or {})),
        source=SourceConfig(**(raw.get("source", {}) or {})),
        tokenizer=TokenizerConfig(**(raw.get("tokenizer", {}) or {})),
        analysis=AnalysisConfig(**(raw.get("analysis", {}) or {})),
        drilldown=DrillDownConfig(**(raw.get("drilldown", {}) or {})),
        lexicon=LexiconConfig(**(raw.get("lexicon", {}) or {})),
        output=OutputConfig(**(raw.get("output", {}) or {})),
    )


def validate_config(config: AppConfig) -> None:
    """Validate configuration constraints and prerequisites."""
    if config.analysis.mode not in VALID_MODES:
        raise ValueError(f"Invalid analysis mode: {config.analysis.mode}")
    if config.source.type not in VALID_SOURCE_TYPES:
        raise ValueError(f"Invalid source type: {config.source.type}")
    if config.tokenizer.backend not in VALID_TOKENIZERS:
        raise ValueError(f"Invalid tokenizer backend: {config.tokenizer.backend}")
    if config.drilldown.scope not in SCOPES:
        raise ValueError(f"Invalid drilldown scope: {config.drilldown.scope}")

    for name in ("keyword_top_n", "comparison_top_n", "unique_limit"):
        if int(getattr(config.analysis, name)) <= 0:
            raise ValueError(f"analysis.{name} must be >= 1")
    if float(config.analysis.tendency_threshold) < 0:
        raise ValueError("analysis.tendency_threshold must be >= 0")

    if config.analysis.mode == "drill":
        if not config.drilldown.keywords:
            raise ValueError("drill mode requires drilldown.keywords")
        if any(not k for k in config.drilldown.keywords):
            raise ValueError("drilldown.keywords must not contain empty strings")

    if config.source.type == "rss":
        unknown = [k for k in config.source.social_feeds if k not in HATENA_FEEDS]
        unknown += [k for k in config.source.media_feeds if k not in NEWS_FEEDS]
        if unknown:
            raise ValueError(f"Unknown feeds: {unknown}")
        if int(config.source.limit) <= 0:
            raise ValueError("source.limit must be >= 1")
        if int(config.source.timeout_seconds) <= 0:
            raise ValueError("source.timeout_seconds must be >= 1")
    else:
        if config.analysis.mode == "compare":
            required = [config.data.social_path, config.data.media_path]
        else:
            required = [config.data.input_path]
        missing = [p for p in required if not os.path.exists(p)]
        if missing:
            raise FileNotFoundError(f"Input documents not found: {missing}")

    if config.lexicon.path and not os.path.exists(config.lexicon.path):
        raise FileNotFoundError(f"Lexicon file not found: {config.lexicon.path}")


def config_to_shared(config: AppConfig) -> dict:
    """Convert AppConfig into the shared store structure used by nodes."""
    return {
        "config": {
            "mode": config.analysis.mode,
            "data_source": {
                "type": config.source.type,
                "input_path": config.data.input_path,
                "social_path": config.data.social_path,
                "media_path": config.data.media_path,
                "snapshot_path": config.data.snapshot_path,
                "social_feeds": list(config.source.social_feeds),
                "media_feeds": list(config.source.media_feeds),
                "limit": int(config.source.limit),
                "timeout_seconds": int(config.source.timeout_seconds),
            },
            "analysis": {
                "keyword_top_n": int(config.analysis.keyword_top_n),
                "comparison_top_n": int(config.analysis.comparison_top_n),
                "unique_limit": int(config.analysis.unique_limit),
                "tendency_threshold": float(config.analysis.tendency_threshold),
            },
            "drilldown": {
                "keywords": list(config.drilldown.keywords),
                "scope": config.drilldown.scope,
            },
            "output": {
                "report_dir": config.output.report_dir,
                "output_path": config.data.output_path,
                "charts": bool(config.output.charts),
            },
        },
        "data": {
            "documents": [],
            "social_documents": [],
            "media_documents": [],
        },
        "results": {},
        "monitor": {
            "execution_log": [],
            "error_log": [],
        },
    }
