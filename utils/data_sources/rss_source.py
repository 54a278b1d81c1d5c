"""
RSS data source: Hatena Bookmark hot entries (social) and news media feeds.

Both RSS 2.0 (``<channel><item>``) and RSS 1.0/RDF (namespaced ``<item>``)
documents are accepted.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Sequence

import requests

from utils.data_sources.base import BaseDataSource
from utils.nlp.text_cleaner import clean_text
from utils.nlp.types import Document

logger = logging.getLogger(__name__)

HTTP_TIMEOUT = 12
USER_AGENT = "trend-analyzer/1.0"
SUMMARY_MAX_LENGTH = 500

SOURCE_SOCIAL = "social"
SOURCE_MEDIA = "media"

HATENA_FEEDS: Dict[str, str] = {
    "general": "https://b.hatena.ne.jp/hotentry/all.rss",
    "tech": "https://b.hatena.ne.jp/hotentry/it.rss",
    "entertainment": "https://b.hatena.ne.jp/hotentry/fun.rss",
    "social": "https://b.hatena.ne.jp/hotentry/social.rss",
    "economics": "https://b.hatena.ne.jp/hotentry/economics.rss",
    "knowledge": "https://b.hatena.ne.jp/hotentry/knowledge.rss",
    "life": "https://b.hatena.ne.jp/hotentry/life.rss",
}

NEWS_FEEDS: Dict[str, Dict[str, str]] = {
    "nhk": {
        "name": "NHKニュース",
        "url": "https://www3.nhk.or.jp/rss/news/cat0.xml",
    },
    "nikkei_business": {
        "name": "日経ビジネス",
        "url": "https://business.nikkei.com/rss/sns/nb.rdf",
    },
    "yahoo_topics": {
        "name": "Yahoo!ニュース トピックス",
        "url": "https://news.yahoo.co.jp/rss/topics/top-picks.xml",
    },
}


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child_text(item: ET.Element, name: str) -> str:
    for child in item:
        if _local(child.tag) == name:
            return (child.text or "").strip()
    return ""


def parse_feed(content: bytes, source: str, limit: Optional[int] = None) -> List[Document]:
    """Parse RSS bytes into documents tagged with ``source``."""
    root = ET.fromstring(content)
    documents: List[Document] = []
    for item in root.iter():
        if _local(item.tag) != "item":
            continue
        title = clean_text(_child_text(item, "title"))
        body = clean_text(_child_text(item, "description"), max_length=SUMMARY_MAX_LENGTH)
        link = _child_text(item, "link")
        if not title and not body:
            continue
        documents.append(Document(title=title, body=body, link=link, source=source))
        if limit is not None and len(documents) >= limit:
            break
    return documents


def _fetch(url: str, timeout: float) -> bytes:
    resp = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    resp.raise_for_status()
    return resp.content


def fetch_hatena_bookmarks(category: str = "general", limit: int = 10, timeout: float = HTTP_TIMEOUT) -> List[Document]:
    """Hot entries of a Hatena Bookmark category; fetch errors are raised."""
    url = HATENA_FEEDS.get(category)
    if not url:
        raise ValueError(f"Unknown category: {category}")
    try:
        documents = parse_feed(_fetch(url, timeout), SOURCE_SOCIAL, limit)
    except Exception as e:
        logger.error("Hatena RSS fetch failed (%s): %s", category, e)
        raise
    logger.info("Fetched %d Hatena entries (%s)", len(documents), category)
    return documents


def fetch_news(source_key: str, limit: int = 10, timeout: float = HTTP_TIMEOUT) -> List[Document]:
    """Items of one news feed; a failing feed yields an empty list."""
    feed = NEWS_FEEDS.get(source_key)
    if not feed:
        raise ValueError(f"Unknown source: {source_key}")
    try:
        documents = parse_feed(_fetch(feed["url"], timeout), SOURCE_MEDIA, limit)
    except (requests.RequestException, ET.ParseError) as e:
        logger.warning("News RSS fetch failed (%s): %s", feed["name"], e)
        return []
    logger.info("Fetched %d items from %s", len(documents), feed["name"])
    return documents


class RssDataSource(BaseDataSource):
    """
    Fetch documents from configured feeds.

    ``social_feeds`` are Hatena categories, ``media_feeds`` are keys of
    ``NEWS_FEEDS``. The per-feed limit for media is split evenly across feeds.
    """

    def __init__(
        self,
        social_feeds: Sequence[str] = ("general",),
        media_feeds: Sequence[str] = (),
        limit: int = 20,
        timeout: float = HTTP_TIMEOUT,
    ):
        unknown = [k for k in social_feeds if k not in HATENA_FEEDS]
        unknown += [k for k in media_feeds if k not in NEWS_FEEDS]
        if unknown:
            raise ValueError(f"Unknown feeds: {unknown}")
        self.social_feeds = list(social_feeds)
        self.media_feeds = list(media_feeds)
        self.limit = limit
        self.timeout = timeout

    def load_social(self) -> List[Document]:
        documents: List[Document] = []
        for category in self.social_feeds:
            documents.extend(fetch_hatena_bookmarks(category, self.limit, self.timeout))
        return documents

    def load_media(self) -> List[Document]:
        if not self.media_feeds:
            return []
        per_feed = max(1, self.limit // len(self.media_feeds))
        documents: List[Document] = []
        for key in self.media_feeds:
            documents.extend(fetch_news(key, per_feed, self.timeout))
        return documents

    def load_documents(self) -> List[Document]:
        return self.load_social() + self.load_media()
