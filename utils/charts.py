"""
Keyword and sentiment charts / tables for analysis reports.
"""
from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from utils.nlp.types import CorpusSentiment, Keyword

# 设置日文字体（关键词标签为日文）
JAPANESE_FONTS = ["IPAexGothic", "IPAGothic", "Noto Sans CJK JP", "Hiragino Sans", "Yu Gothic", "MS Gothic", "DejaVu Sans"]
plt.rcParams["font.sans-serif"] = JAPANESE_FONTS
plt.rcParams["font.family"] = "sans-serif"
plt.rcParams["axes.unicode_minus"] = False


def keyword_frame(keywords: Sequence[Keyword]) -> pd.DataFrame:
    """Ranked keyword table with columns rank / word / count."""
    return pd.DataFrame(
        [{"rank": i + 1, "word": k.word, "count": k.count} for i, k in enumerate(keywords)],
        columns=["rank", "word", "count"],
    )


def sentiment_frame(sentiments: Dict[str, CorpusSentiment]) -> pd.DataFrame:
    """One row per named corpus: counts, rates and average score."""
    rows = []
    for name, s in sentiments.items():
        rows.append({
            "corpus": name,
            "documents": s.document_count,
            "average": s.average,
            "positive": s.positive_count,
            "negative": s.negative_count,
            "neutral": s.neutral_count,
            "positive_rate": s.positive_rate,
            "negative_rate": s.negative_rate,
            "neutral_rate": s.neutral_rate,
        })
    return pd.DataFrame(rows)


def save_table(df: pd.DataFrame, output_dir: str, filename: str) -> Dict[str, Any]:
    """Write a table as CSV and return its descriptor (id / type / path)."""
    path = os.path.join(output_dir, filename)
    df.to_csv(path, index=False, encoding="utf_8")
    return {
        "id": os.path.splitext(filename)[0],
        "type": "csv",
        "rows": len(df),
        "path": path,
    }


def keyword_bar_chart(
    keywords: Sequence[Keyword],
    output_dir: str,
    filename: str = "keywords.png",
    title: str = "Keyword Frequency (Top)",
) -> Optional[Dict[str, Any]]:
    """Bar chart of keyword counts; ``None`` when there is nothing to plot."""
    if not keywords:
        return None

    labels = [k.word for k in keywords]
    values = [k.count for k in keywords]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(range(len(values)), values)
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.set_title(title)
    fig.tight_layout()

    path = os.path.join(output_dir, filename)
    fig.savefig(path, dpi=150)
    plt.close(fig)

    return {
        "id": os.path.splitext(filename)[0],
        "title": title,
        "type": "bar",
        "path": path,
    }


def sentiment_distribution_chart(
    sentiment: CorpusSentiment,
    output_dir: str,
    filename: str = "sentiment.png",
    title: str = "Sentiment Distribution",
) -> Optional[Dict[str, Any]]:
    """Pie chart of positive / negative / neutral document counts."""
    if sentiment.is_empty:
        return None

    labels: List[str] = []
    values: List[int] = []
    for label, count in (
        ("positive", sentiment.positive_count),
        ("negative", sentiment.negative_count),
        ("neutral", sentiment.neutral_count),
    ):
        if count:
            labels.append(label)
            values.append(count)

    fig, ax = plt.subplots(figsize=(5, 5))
    ax.pie(values, labels=labels, autopct="%1.1f%%", startangle=90)
    ax.set_title(title)
    fig.tight_layout()

    path = os.path.join(output_dir, filename)
    fig.savefig(path, dpi=150)
    plt.close(fig)

    return {
        "id": os.path.splitext(filename)[0],
        "title": title,
        "type": "pie",
        "path": path,
    }
